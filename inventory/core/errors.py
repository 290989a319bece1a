"""
Exception handlers producing the uniform error envelope

Every error response carries ``error``, ``status_code``, ``detail`` and ``path``.
In prod, validation and server errors are reduced to a generic message.
"""
import logging
import traceback

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inventory.core.config import settings
from inventory.utils.json_serializer import to_json_safe

logger = logging.getLogger(__name__)


def _respond(request: Request, status_code: int, detail, headers=None, **extra) -> JSONResponse:
    content = {
        "error": True,
        "status_code": status_code,
        "detail": detail,
        "path": request.url.path,
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _validation_errors(exc: RequestValidationError) -> list:
    # ctx can hold the ValueError raised by a validator
    errors = []
    for item in exc.errors():
        err = dict(item)
        if isinstance(err.get("ctx"), dict):
            err["ctx"] = {key: to_json_safe(value) for key, value in err["ctx"].items()}
        errors.append(to_json_safe(err))
    return errors


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Service-raised errors: 400 business rules, 404 lookups"""
    return _respond(request, exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed request bodies and query parameters

    Field-level errors are listed under ``errors`` outside prod.
    """
    code = status.HTTP_422_UNPROCESSABLE_ENTITY
    if settings.APP_ENV == "prod":
        return _respond(request, code, "Validation error: Invalid request data")
    return _respond(request, code, "Validation error", errors=_validation_errors(exc))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)

    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if settings.APP_ENV == "prod":
        return _respond(request, code, "Internal server error")

    extra = {}
    if settings.APP_ENV == "local":
        extra["traceback"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return _respond(request, code, str(exc), **extra)
