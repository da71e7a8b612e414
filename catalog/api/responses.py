"""Uniform ``{message, response, error}`` envelope for every API response."""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"

_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def success_response(
    message: str, data: Any, status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "response": {"data": jsonable_encoder(data)},
            "error": None,
        },
    )


def error_response(
    message: str, status_code: int, error: str | dict | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "response": None,
            "error": message if error is None else error,
        },
    )


def error_message(exc: Exception) -> str:
    """Client-facing message for a failure; never includes a traceback."""
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    return str(exc) or DEFAULT_ERROR_MESSAGE


def _validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        key = ".".join(loc) or "request"
        errors.setdefault(key, []).append(err.get("msg", "Invalid value"))
    return errors


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else DEFAULT_ERROR_MESSAGE
    response = error_response(message, exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        "Validation failed", status.HTTP_400_BAD_REQUEST, error=_validation_errors(exc)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
