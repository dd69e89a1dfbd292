"""
Test suite for the exception hierarchy.

System role: Verification of error kinds and context handling
"""

import pytest

from regchat.core.exceptions import (
    ChatError,
    ChatErrorKind,
    DocumentNotFoundError,
    ForbiddenError,
    InvalidRequestError,
    LoggingError,
    NoResponseError,
    NotFoundError,
    RegChatException,
    UnauthorizedError,
    UpstreamCompletionError,
    UpstreamEmbeddingError,
    UpstreamRetrievalError,
    VectorStoreError,
)


class TestRegChatException:
    """Test base exception."""

    def test_str_with_details(self):
        error = RegChatException("Failed", {"key": "value"})

        assert str(error) == "Failed | Details: {'key': 'value'}"

    def test_str_without_details(self):
        error = RegChatException("Failed")

        assert str(error) == "Failed"
        assert error.details == {}


class TestChatErrorKinds:
    """Test every ChatError subclass pins its kind."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidRequestError("Message is required"), ChatErrorKind.INVALID_REQUEST),
            (UnauthorizedError(), ChatErrorKind.UNAUTHORIZED),
            (ForbiddenError("Access denied"), ChatErrorKind.FORBIDDEN),
            (NotFoundError("Chat log not found"), ChatErrorKind.NOT_FOUND),
            (DocumentNotFoundError("EPA-1"), ChatErrorKind.NOT_FOUND),
            (UpstreamEmbeddingError("x"), ChatErrorKind.UPSTREAM_EMBEDDING),
            (UpstreamRetrievalError("x"), ChatErrorKind.UPSTREAM_RETRIEVAL),
            (UpstreamCompletionError("x"), ChatErrorKind.UPSTREAM_COMPLETION),
            (NoResponseError(), ChatErrorKind.UPSTREAM_COMPLETION),
            (LoggingError("x"), ChatErrorKind.LOGGING),
        ],
    )
    def test_kind(self, error, kind):
        assert isinstance(error, ChatError)
        assert error.kind == kind

    def test_invalid_request_field(self):
        error = InvalidRequestError("Document ID is required", field="documentId")

        assert error.details == {"field": "documentId"}

    def test_document_not_found_message(self):
        error = DocumentNotFoundError("EPA-2024-001")

        assert error.message == "Document not found: EPA-2024-001"
        assert error.details["document_id"] == "EPA-2024-001"

    def test_unauthorized_default_message(self):
        assert UnauthorizedError().message == "Authentication required"

    def test_vector_store_error_namespace(self):
        error = VectorStoreError("down", namespace="major-regs", details={"code": 503})

        assert error.details == {"code": 503, "namespace": "major-regs"}
