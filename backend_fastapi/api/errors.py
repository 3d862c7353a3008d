import logging
import os
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.errors import StorageUnavailable, TodoError

logger = logging.getLogger(__name__)


def is_development() -> bool:
    return os.getenv("ENVIRONMENT", "production").strip().lower() == "development"


def _error_body(message: str, details: Any = None, error: str | None = None) -> dict:
    body: dict[str, Any] = {"message": message}
    if details is not None:
        body["details"] = details
    if error is not None and is_development():
        body["error"] = error
    return body


async def handle_todo_error(request: Request, exc: TodoError) -> JSONResponse:
    error = None
    if isinstance(exc, StorageUnavailable):
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
        error = str(exc.__cause__ or exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.details, error),
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details: dict[str, str] = {}
    for err in exc.errors():
        # loc = ("body", "<campo>") | ("path", "<param>")
        field = str(err["loc"][-1]) if err.get("loc") else "body"
        details[field] = err.get("msg", "Invalid value")
    return JSONResponse(
        status_code=400,
        content=_error_body("Invalid request", details),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", error=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoError, handle_todo_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
