# app/utils/error_handlers.py
import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config.settings import Settings
from app.utils.errors import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    FieldError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Error kind -> HTTP status, applied uniformly at the API boundary
ERROR_STATUS: Dict[Type[AppError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: AppError) -> int:
    for kind in type(error).__mro__:
        if kind in ERROR_STATUS:
            return ERROR_STATUS[kind]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(error: AppError) -> dict:
    """Build the JSON body for an application error"""
    if isinstance(error, ValidationError):
        return {
            "message": error.message,
            "errors": [{"field": e.field, "message": e.message} for e in error.errors],
        }
    if isinstance(error, AuthenticationError):
        # Never tell the caller why the credential was rejected
        return {"message": AuthenticationError.default_message}
    if isinstance(error, InternalError) and not Settings.DEBUG:
        return {"message": InternalError.default_message}
    return {"message": error.message}


def _field_name(loc) -> str:
    # ("body", "assigneeId") -> "assigneeId"; ("query", "status") -> "status"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = exc.headers if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=code, content=error_body(exc), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [FieldError(_field_name(err.get("loc", ())), err.get("msg", "Invalid value")) for err in exc.errors()]
    return await app_error_handler(request, ValidationError(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if Settings.DEBUG else None
    return await app_error_handler(request, InternalError(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
