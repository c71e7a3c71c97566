# app/utils/errors.py
"""Application error kinds raised by services and the auth layer.

Each kind is mapped to an HTTP status in ``app.utils.error_handlers``; services
never build HTTP responses themselves.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class AppError(Exception):
    """Base class for errors surfaced through the API"""

    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    default_message = "Validation failed"

    def __init__(self, errors: List[FieldError], message: Optional[str] = None):
        super().__init__(message)
        self.errors = list(errors)

    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class AuthenticationError(AppError):
    default_message = "Unauthorized"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.headers = headers or {}


class AuthorizationError(AppError):
    default_message = "You don't have permission to perform this action"

    @property
    def reason(self) -> str:
        return self.message


class NotFoundError(AppError):
    default_message = "Resource not found"


class ConflictError(AppError):
    default_message = "Resource already exists"


class InternalError(AppError):
    default_message = "Internal server error"
