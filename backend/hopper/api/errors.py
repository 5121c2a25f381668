"""
Exception handlers

Every error response is plain text. Request validation failures become
400 instead of FastAPI's default 422.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hopper.exceptions import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        msg = error.get("msg", "invalid value")
        # pydantic prefixes messages raised by field validators
        msg = msg.removeprefix("Value error, ")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        msg = f"bad request. {_format_validation_errors(exc)}"
        logger.warning(msg)
        return PlainTextResponse(msg, status_code=400)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> PlainTextResponse:
        msg = f"bad request. {exc.message}"
        logger.warning(msg)
        return PlainTextResponse(msg, status_code=400)

    # Routes that expose a lookup miss as 404 catch NotFoundError themselves;
    # anywhere else it is a store failure like any other.
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> PlainTextResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        if exc.status_code == 405:
            msg = f"method not allowed. got {request.method}"
        else:
            msg = str(exc.detail)
        logger.warning(msg)
        return PlainTextResponse(
            msg,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
