"""Error taxonomy and the handlers that turn errors into JSON responses.

Every failure leaves the API in one envelope:

    {"success": false, "message": str}

Validation failures add ``"errors": [{"field": str, "message": str}, ...]``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.settings import get_settings

logger = logging.getLogger("uvicorn.error")

INVALID_EMAIL_MESSAGE = "Please include a valid email"


class ApiError(Exception):
    """Base error with an HTTP status and a client-facing message."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None, *, headers: dict[str, str] | None = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationFailed(ApiError):
    """Request input broke one or more declared constraints."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]], message: str | None = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        return result


class Unauthorized(ApiError):
    status_code = 401
    default_message = "No token, authorization denied"


class InvalidToken(ApiError):
    status_code = 400
    default_message = "Token is not valid"


class InvalidCredentials(ApiError):
    status_code = 400
    default_message = "Invalid credentials"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class RateLimited(ApiError):
    status_code = 429
    default_message = "Too many requests, please try again later."


class PersistenceError(ApiError):
    """A store write or read failed; details stay in the server log."""

    status_code = 500
    default_message = "Server error"


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "email") -> "email"; ("query", "search") -> "search"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


def _clean_message(error: dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    msg = str(error.get("msg", "Invalid value"))
    # EmailStr: "value is not a valid email address: <reason>"
    if msg.startswith("value is not a valid email address"):
        return INVALID_EMAIL_MESSAGE
    # Custom validators surface as "Value error, <text>"
    prefix = "Value error, "
    if msg.startswith(prefix):
        msg = msg[len(prefix):]
    return msg


def validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten FastAPI/Pydantic validation errors into field-level messages."""
    errors = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(tuple(err.get("loc", ())))
        errors.append({"field": field, "message": _clean_message(err)})
    return errors


def _log(request: Request, status_code: int, exc: Exception) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s %s -> %s: %s",
        request.method,
        request.url.path,
        status_code,
        exc,
        exc_info=exc,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    _log(request, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await api_error_handler(request, ValidationFailed(validation_errors(exc)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    _log(request, exc.status_code, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 in the common envelope, with the limiter's Retry-After and X-RateLimit-* headers.

    Must stay synchronous: SlowAPIMiddleware calls it without awaiting.
    """
    error = RateLimited()
    logger.warning(
        "%s %s -> 429: limit %s exceeded for %s",
        request.method,
        request.url.path,
        exc.detail,
        request.client.host if request.client else "-",
    )
    response = JSONResponse(status_code=error.status_code, content=error.to_dict())
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for errors nothing else claimed."""
    _log(request, 500, exc)
    settings = get_settings()
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": str(exc) if settings.debug else PersistenceError.default_message,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the uniform error envelope to every failure path."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
