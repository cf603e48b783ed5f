"""
Exception handlers for FastAPI application.

Domain exceptions carry their own HTTP status; use cases and routes never
build error responses themselves.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pharmalink.config.settings import get_settings
from pharmalink.core.domain import DomainException

logger = logging.getLogger(__name__)


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain exceptions into `{error, code, details?}` responses."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = exc.status_code
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the same `{error}` shape."""
    if not isinstance(exc, StarletteHTTPException):
        return await global_exception_handler(request, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part not in ("body", "query", "path"))


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Schema failures answer 400 with one entry per offending field."""
    if not isinstance(exc, RequestValidationError):
        return await global_exception_handler(request, exc)

    details = [{"field": _field_path(e["loc"]), "message": e["msg"], "type": e["type"]} for e in exc.errors()]
    logger.info(f"Rejected {request.method} {request.url.path}: {[d['field'] for d in details]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "code": "VALIDATION_ERROR", "details": details},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unexpected is a 500; the exception text is only exposed in development."""
    logger.exception(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}")
    content = {"error": "Internal server error"}
    if get_settings().is_development:
        content["detail"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
