"""Translation of service outcomes and failures into HTTP responses"""
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from service.dto import ErrorResponseDTO
from service.errors import (
    AuthenticationFailedError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    ResourceNotFoundError,
)
from service.results import ServiceResult

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

ERROR_STATUS = {
    ResourceNotFoundError: 404,
    ConflictError: 409,
    AuthenticationFailedError: 401,
    ForbiddenError: 403,
    InternalServerError: 500,
}


def error_response(exc: Exception) -> JSONResponse:
    """Map a failure condition to {code, message}; unknown ones hide their detail"""
    for error_type, status_code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            body = ErrorResponseDTO(code=status_code, message=exc.message)
            return JSONResponse(status_code=status_code, content=body.model_dump())

    logger.error("Unexpected error", exc_info=exc, extra={"error_type": type(exc).__name__})
    body = ErrorResponseDTO(code=500, message=UNEXPECTED_ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())


def to_response(result: ServiceResult[Any]) -> JSONResponse:
    """Render a service result, delegating errors to the dispatcher"""
    if result.error is not None:
        return error_response(result.error)
    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.body, exclude_none=True)
    )


async def _handle_exception(request: Request, exc: Exception) -> JSONResponse:
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Route raised failures through the same dispatcher as returned ones"""
    for error_type in ERROR_STATUS:
        app.add_exception_handler(error_type, _handle_exception)
    app.add_exception_handler(Exception, _handle_exception)
