"""
Test suite for chat error mapping.

Tests the per-kind mapping table, the envelope builder and the
route decorators with their per-router failure messages.

System role: Verification of HTTP error envelopes
"""

import json

import pytest

from regchat.api.routers.error_handling import (
    ERROR_MAPPERS,
    CHAT_FAILURE,
    DOCUMENT_FAILURE,
    HISTORY_FAILURE,
    chat_error_response,
    error_response,
    handle_api_errors,
    handle_chat_errors,
    handle_document_errors,
    handle_history_errors,
)
from regchat.core.exceptions import (
    ChatErrorKind,
    DocumentNotFoundError,
    ForbiddenError,
    InvalidRequestError,
    LoggingError,
    NotFoundError,
    UnauthorizedError,
    UpstreamCompletionError,
    UpstreamEmbeddingError,
    UpstreamRetrievalError,
)


def _body(response) -> dict:
    return json.loads(response.body)


class TestMappingTable:
    """Test one mapper per kind."""

    def test_every_kind_mapped(self):
        assert set(ERROR_MAPPERS) == set(ChatErrorKind)

    @pytest.mark.parametrize(
        ("error", "status", "message"),
        [
            (InvalidRequestError("Message is required"), 400, "Message is required"),
            (UnauthorizedError(), 401, "Authentication required"),
            (ForbiddenError("validator said no"), 403, "Access denied"),
            (DocumentNotFoundError("EPA-1"), 404, "Document not found"),
            (NotFoundError("Chat log not found: 1"), 404, "Chat log not found: 1"),
            (UpstreamEmbeddingError("quota"), 500, CHAT_FAILURE),
            (UpstreamRetrievalError("throttled"), 500, CHAT_FAILURE),
            (UpstreamCompletionError("empty"), 500, CHAT_FAILURE),
            (LoggingError("insert failed"), 500, CHAT_FAILURE),
        ],
    )
    def test_status_and_message(self, error, status, message):
        response = chat_error_response(error)

        assert response.status_code == status
        assert _body(response)["error"] == message


class TestErrorResponse:
    """Test envelope details exposure."""

    def test_details_exposed(self):
        response = error_response(500, CHAT_FAILURE, {"error": "quota"}, expose_details=True)

        assert _body(response) == {"error": CHAT_FAILURE, "details": {"error": "quota"}}

    def test_details_hidden(self):
        response = error_response(500, CHAT_FAILURE, {"error": "quota"}, expose_details=False)

        assert _body(response) == {"error": CHAT_FAILURE}

    def test_empty_details_omitted(self):
        response = error_response(401, "Authentication required", {}, expose_details=True)

        assert _body(response) == {"error": "Authentication required"}


class TestHandleChatErrors:
    """Test the route decorator."""

    async def test_passes_result_through(self):
        @handle_chat_errors
        async def handler(value: int) -> int:
            return value * 2

        assert await handler(21) == 42
        assert handler.__name__ == "handler"

    async def test_maps_chat_error(self):
        @handle_chat_errors
        async def handler():
            raise ForbiddenError("nope")

        response = await handler()

        assert response.status_code == 403

    async def test_unexpected_exception(self):
        @handle_chat_errors
        async def handler():
            raise ZeroDivisionError("bad math")

        response = await handler()

        assert response.status_code == 500
        assert _body(response)["error"] == CHAT_FAILURE

    def test_upstream_uses_given_failure_message(self):
        response = chat_error_response(UpstreamRetrievalError("throttled"), DOCUMENT_FAILURE)

        assert response.status_code == 500
        assert _body(response)["error"] == DOCUMENT_FAILURE


class TestPerRouterFailureMessages:
    """Test each router decorator reports its own failure message."""

    @pytest.mark.parametrize(
        ("decorator", "message"),
        [
            (handle_chat_errors, "Failed to process chat request"),
            (handle_document_errors, "Failed to process document request"),
            (handle_history_errors, "Failed to process chat history request"),
            (handle_api_errors("Failed to export"), "Failed to export"),
        ],
    )
    async def test_unexpected_exception_message(self, decorator, message):
        @decorator
        async def handler():
            raise RuntimeError("db gone")

        response = await handler()

        assert response.status_code == 500
        assert _body(response)["error"] == message

    async def test_document_upstream_error_message(self):
        @handle_document_errors
        async def handler():
            raise UpstreamRetrievalError("throttled")

        response = await handler()

        assert response.status_code == 500
        assert _body(response)["error"] == DOCUMENT_FAILURE

    async def test_history_client_error_keeps_own_message(self):
        @handle_history_errors
        async def handler():
            raise NotFoundError("Chat log not found: 7")

        response = await handler()

        assert response.status_code == 404
        assert _body(response)["error"] == "Chat log not found: 7"
