"""Failure conditions returned or raised by the service layer"""


class ServiceError(Exception):
    """Base class for expected service failures"""
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(ServiceError):
    """Missing video or missing engagement record"""
    status_code = 404


class ConflictError(ServiceError):
    """Resource already exists; title conflicts on publish are a 409 response body instead"""
    status_code = 409


class AuthenticationFailedError(ServiceError):
    """Credentials missing or not recognized"""
    status_code = 401


class ForbiddenError(ServiceError):
    """Credentials valid but not allowed"""
    status_code = 403


class InternalServerError(ServiceError):
    """Persistence or data-integrity failure with a contextual message"""
    status_code = 500
