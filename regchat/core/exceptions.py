"""
Exception hierarchy for the regulatory compliance chat backend.

Boundary adapters raise the low-level errors (EmbeddingError, VectorStoreError).
The chat pipeline translates everything it lets escape into a ChatError, a
closed set of kinds that the HTTP layer maps to status codes one kind at a time.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from enum import Enum
from typing import Any


class RegChatException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EmbeddingError(RegChatException):
    """Raised when the embedding provider fails or returns no vector."""

    pass


class VectorStoreError(RegChatException):
    """Raised when vector index operations fail."""

    def __init__(
        self,
        message: str,
        namespace: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            namespace: Namespace that was being queried
            details: Additional context
        """
        details = details or {}
        if namespace:
            details["namespace"] = namespace
        super().__init__(message, details)


class ChatErrorKind(str, Enum):
    """Closed set of chat pipeline failure kinds."""

    INVALID_REQUEST = "invalid_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UPSTREAM_EMBEDDING = "upstream_embedding"
    UPSTREAM_RETRIEVAL = "upstream_retrieval"
    UPSTREAM_COMPLETION = "upstream_completion"
    LOGGING = "logging"


class ChatError(RegChatException):
    """
    Tagged pipeline error.

    Subclasses pin `kind`; callers dispatch on `kind` rather than on the
    concrete class.
    """

    kind: ChatErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class InvalidRequestError(ChatError):
    """Missing or empty message or document id."""

    kind = ChatErrorKind.INVALID_REQUEST

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid request error.

        Args:
            message: Error message (echoed to the caller)
            field: Request field that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnauthorizedError(ChatError):
    """No resolvable caller identity."""

    kind = ChatErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(ChatError):
    """Access validator denied the caller."""

    kind = ChatErrorKind.FORBIDDEN


class NotFoundError(ChatError):
    """Requested record does not exist."""

    kind = ChatErrorKind.NOT_FOUND


class DocumentNotFoundError(NotFoundError):
    """Document id has no matching federal document."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class UpstreamEmbeddingError(ChatError):
    """Embedding provider failed or returned a malformed result."""

    kind = ChatErrorKind.UPSTREAM_EMBEDDING


class UpstreamRetrievalError(ChatError):
    """Vector index query failed."""

    kind = ChatErrorKind.UPSTREAM_RETRIEVAL


class UpstreamCompletionError(ChatError):
    """Completion provider failed."""

    kind = ChatErrorKind.UPSTREAM_COMPLETION


class NoResponseError(UpstreamCompletionError):
    """Completion provider returned an empty payload."""

    def __init__(self, message: str = "Completion returned no content") -> None:
        super().__init__(message)


class LoggingError(ChatError):
    """Chat log persistence failed. Never surfaced to callers."""

    kind = ChatErrorKind.LOGGING
