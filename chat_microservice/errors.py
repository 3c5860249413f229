from typing import Dict, Optional, Sequence, Union

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .logger import get_logger
from .models.session import utcnow
from .schemas import ErrorResponse


logger = get_logger(__name__)

_LOCATIONS = ("body", "query", "path", "header", "cookie")


class ChatServiceError(Exception):
    """Base class for failures the chat service reports to its callers."""


class SessionNotFoundError(ChatServiceError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


def error_response(
    status_code: int,
    message: str,
    validation_errors: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        message=message,
        timestamp=utcnow(),
        validation_errors=validation_errors or None,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, exclude_none=True))


def field_name(loc: Sequence[Union[str, int]]) -> str:
    parts = [part for part in loc if isinstance(part, str) and part not in _LOCATIONS]
    return ".".join(parts) or "body"


def collect_field_errors(errors: Sequence[dict]) -> Dict[str, str]:
    field_errors: Dict[str, str] = {}
    for err in errors:
        field_errors.setdefault(field_name(err.get("loc", ())), err.get("msg", "Invalid value"))
    return field_errors


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = collect_field_errors(exc.errors())
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, field_errors)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", field_errors)


async def handle_chat_service_error(request: Request, exc: ChatServiceError) -> JSONResponse:
    # Unknown sessions are reported as a bad request, not 404
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # The server re-raises after this response and logs the traceback itself
    logger.error("Unhandled error on %s %s: %r", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ChatServiceError, handle_chat_service_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
