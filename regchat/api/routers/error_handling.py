"""
API error handling utilities.

Maps each ChatError kind to an HTTP status and public message through one
mapping function per kind, and wraps route handlers so every failure leaves
as the uniform envelope {"error": ..., "details": ...}. Raw details are only
attached in development-like environments.

Dependencies: fastapi, regchat.core.exceptions, regchat.configs
System role: Error envelope mapping for all API routes
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from regchat.configs import get_settings
from regchat.core.exceptions import ChatError, ChatErrorKind

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

CHAT_FAILURE = "Failed to process chat request"
DOCUMENT_FAILURE = "Failed to process document request"
HISTORY_FAILURE = "Failed to process chat history request"


def _invalid_request(error: ChatError) -> tuple[int, str | None]:
    return status.HTTP_400_BAD_REQUEST, error.message


def _unauthorized(error: ChatError) -> tuple[int, str | None]:
    return status.HTTP_401_UNAUTHORIZED, "Authentication required"


def _forbidden(error: ChatError) -> tuple[int, str | None]:
    return status.HTTP_403_FORBIDDEN, "Access denied"


def _not_found(error: ChatError) -> tuple[int, str | None]:
    if "document_id" in error.details:
        return status.HTTP_404_NOT_FOUND, "Document not found"
    return status.HTTP_404_NOT_FOUND, error.message


def _upstream(error: ChatError) -> tuple[int, str | None]:
    # Public message is the failure message of the route that raised
    return status.HTTP_500_INTERNAL_SERVER_ERROR, None


ERROR_MAPPERS: dict[ChatErrorKind, Callable[[ChatError], tuple[int, str | None]]] = {
    ChatErrorKind.INVALID_REQUEST: _invalid_request,
    ChatErrorKind.UNAUTHORIZED: _unauthorized,
    ChatErrorKind.FORBIDDEN: _forbidden,
    ChatErrorKind.NOT_FOUND: _not_found,
    ChatErrorKind.UPSTREAM_EMBEDDING: _upstream,
    ChatErrorKind.UPSTREAM_RETRIEVAL: _upstream,
    ChatErrorKind.UPSTREAM_COMPLETION: _upstream,
    # Logging errors are swallowed before they reach a route; if one leaks, it is a 500
    ChatErrorKind.LOGGING: _upstream,
}


def error_response(
    status_code: int,
    message: str,
    details: Any = None,
    expose_details: bool | None = None,
) -> JSONResponse:
    """
    Build the uniform error envelope.

    Args:
        status_code: HTTP status
        message: Public error message
        details: Raw context, dropped outside development-like environments
        expose_details: Override for the environment check

    Returns:
        JSONResponse: {"error": message} plus "details" when exposed
    """
    if expose_details is None:
        expose_details = get_settings().expose_error_details

    body: dict[str, Any] = {"error": message}
    if expose_details and details:
        body["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=body)


def chat_error_response(error: ChatError, failure_message: str = CHAT_FAILURE) -> JSONResponse:
    """
    Map a ChatError to its envelope response.

    Args:
        error: Pipeline error
        failure_message: Public message for server-side failures

    Returns:
        JSONResponse: Envelope with the status for the error kind
    """
    status_code, message = ERROR_MAPPERS[error.kind](error)
    return error_response(status_code, message or failure_message, error.details)


def handle_api_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory turning route errors into envelope responses.

    ChatErrors map by kind; anything else is logged with its traceback and
    returned as a 500 carrying failure_message.

    Args:
        failure_message: Public message for server-side failures of the route

    Returns:
        Callable: Route decorator
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except ChatError as e:
                log = logger.error if e.kind.value.startswith("upstream") else logger.warning
                log(
                    f"{func.__name__} failed: {e.kind.value}",
                    extra={"kind": e.kind.value, "error": str(e)},
                )
                return chat_error_response(e, failure_message)

            except Exception as e:
                logger.exception(
                    f"Unexpected failure in {func.__name__}",
                    extra={"error": str(e)},
                )
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    failure_message,
                    {"error_type": type(e).__name__, "error": str(e)},
                )

        return wrapper  # type: ignore

    return decorator


handle_chat_errors = handle_api_errors(CHAT_FAILURE)
handle_document_errors = handle_api_errors(DOCUMENT_FAILURE)
handle_history_errors = handle_api_errors(HISTORY_FAILURE)
