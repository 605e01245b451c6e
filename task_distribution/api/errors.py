"""
Translation of errors into HTTP responses.

The only place where exceptions become status codes. Every error body is
the plain-text error message:

- NotFoundError                -> 404
- UnknownValueError            -> 400
- RequestValidationError       -> 400
- any other uncaught exception -> 400
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
import logging

from task_distribution.domain.errors import NotFoundError, UnknownValueError

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path} -> 404: {exc.message}")
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


async def unknown_value_handler(request: Request, exc: UnknownValueError):
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.message}")
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. 'path.employee_id: Input should be a valid integer'"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path/query/body values are client errors like any other bad input"""
    message = format_validation_errors(exc)
    logger.warning(f"Validation error for {request.method} {request.url.path}: {message}")
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def catch_unhandled_errors(request: Request, call_next):
    """
    Answer unclassified failures with 400 and their message.

    Server-side faults (e.g. a lost database connection) share the status
    code with client errors; kept for compatibility with existing clients.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"Unhandled error for {request.method} {request.url.path}: {e}", exc_info=True)
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UnknownValueError, unknown_value_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(catch_unhandled_errors)
