"""Explicit outcome type returned by service operations"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from service.errors import ServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a service call.

    Either a status code with a body (which may itself describe a negative
    outcome, such as a 409 publish conflict) or a typed error for the
    boundary to translate.
    """
    status_code: int
    body: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, body: T, status_code: int = 200) -> "ServiceResult[T]":
        return cls(status_code=status_code, body=body)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(status_code=error.status_code, error=error)
