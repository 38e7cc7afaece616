# app/core/errors.py
"""
Endpoint boundary: every failure leaves the API as
``{"success": false, "message": ..., "data": null}``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import (
    ApiError,
    IdentityProviderError,
    InternalError,
    ValidationError,
    translate_provider_error,
)

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None},
    )


def format_validation_error(err: dict) -> str:
    kind = err.get("type")
    if kind == "json_invalid":
        return "Invalid JSON body"
    if kind == "missing" and tuple(err.get("loc", ())) == ("body",):
        return "Request body is required"

    msg = err.get("msg", "Invalid value")
    if kind == "value_error" and msg.startswith(VALUE_ERROR_PREFIX):
        return msg[len(VALUE_ERROR_PREFIX):]
    field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{field}: {msg}" if field else msg


async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def identity_error_handler(request: Request, exc: IdentityProviderError):
    return await api_error_handler(request, translate_provider_error(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError.from_messages(format_validation_error(e) for e in exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, error.message)
    return error_response(error.status_code, error.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message)


async def unexpected_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.default_message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(IdentityProviderError, identity_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(unexpected_error_middleware)
