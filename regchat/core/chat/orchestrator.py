"""
Chat orchestrator for retrieval-augmented answers.

Runs one request through the pipeline:
validate -> authenticate -> (authorize -> resolve document) -> embed ->
retrieve -> generate -> log (detached) -> respond.

Every stage is attempted once and any failure before logging ends the request
with a ChatError. The chat log write is scheduled after the answer exists and
is never awaited here.

Dependencies: regchat.boundary, regchat.application.services, regchat.core.chat.generator
System role: Chat Orchestrator (root of the chat pipeline)
"""

import logging
from typing import Any, Protocol

from regchat.application.services.access_validator import (
    DOCUMENT_NOT_FOUND,
    AccessDecision,
)
from regchat.boundary.embeddings.query_embedder import QueryEmbedder
from regchat.boundary.vdb.vector_index import VectorIndex
from regchat.configs.vector_store import VectorStoreSettings
from regchat.core.chat.generator import GroundedCompletionGenerator
from regchat.core.exceptions import (
    ChatError,
    DocumentNotFoundError,
    EmbeddingError,
    ForbiddenError,
    InvalidRequestError,
    UnauthorizedError,
    UpstreamCompletionError,
    UpstreamEmbeddingError,
    UpstreamRetrievalError,
    VectorStoreError,
)
from regchat.models.chat import (
    ChatLogCreate,
    ChatMetadata,
    ChatResponse,
    ChatType,
    Completion,
    DocumentChatMetadata,
    DocumentChatRequest,
    DocumentChatResponse,
    RegulationChatRequest,
    RetrievedChunk,
)
from regchat.models.document import DocumentMetadata
from regchat.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class AccessValidator(Protocol):
    async def validate(self, user_id: str, document_id: str) -> AccessDecision: ...


class DocumentStore(Protocol):
    async def get_metadata(self, doc_id: str) -> DocumentMetadata | None: ...


class ChatLogSink(Protocol):
    def log_in_background(self, entry: ChatLogCreate) -> Any: ...


class ChatOrchestrator:
    """
    Composes embedding, retrieval, generation and logging for both chat variants.

    Holds no per-request state; one instance may serve concurrent requests as
    long as its collaborators can.
    """

    def __init__(
        self,
        embedder: QueryEmbedder,
        vector_index: VectorIndex,
        generator: GroundedCompletionGenerator,
        interaction_logger: ChatLogSink,
        document_store: DocumentStore,
        access_validator: AccessValidator,
        retrieval: VectorStoreSettings | None = None,
    ) -> None:
        """
        Initialize orchestrator with its collaborators.

        Args:
            embedder: Embedding Client
            vector_index: Vector Index Client
            generator: Grounded-Completion Generator
            interaction_logger: Interaction Logger (background writes)
            document_store: Document metadata lookup
            access_validator: Document access check
            retrieval: Namespaces, topK and filter field (defaults if None)
        """
        self.embedder = embedder
        self.vector_index = vector_index
        self.generator = generator
        self.interaction_logger = interaction_logger
        self.document_store = document_store
        self.access_validator = access_validator
        self.retrieval = retrieval or VectorStoreSettings()

    async def chat_about_document(
        self,
        request: DocumentChatRequest,
        user_id: str | None,
    ) -> DocumentChatResponse:
        """
        Answer a question about one federal document.

        Args:
            request: Message and document id
            user_id: Authenticated caller, None if unauthenticated

        Returns:
            DocumentChatResponse: Answer and retrieval metadata

        Raises:
            InvalidRequestError: Empty message or document id
            UnauthorizedError: No caller identity
            ForbiddenError: Access validator denied the caller
            DocumentNotFoundError: Document id does not resolve
            UpstreamEmbeddingError | UpstreamRetrievalError | UpstreamCompletionError:
                Remote dependency failure
        """
        message = self._require_message(request.message)
        document_id = request.document_id.strip()
        if not document_id:
            raise InvalidRequestError("Document ID is required", field="documentId")
        user_id = self._require_user(user_id)

        decision = await self.access_validator.validate(user_id, document_id)
        if not decision.valid:
            code = decision.error.code if decision.error else None
            if code == DOCUMENT_NOT_FOUND:
                raise DocumentNotFoundError(document_id)
            raise ForbiddenError(
                "Access denied",
                details={"reason": decision.error.model_dump() if decision.error else None},
            )

        document = await self.document_store.get_metadata(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        embedding = await self._embed(message)
        chunks = await self._retrieve(
            embedding,
            top_k=self.retrieval.document_top_k,
            namespace=self.retrieval.document_namespace,
            metadata_filter={self.retrieval.filename_field: document_id},
        )
        completion = await self._generate(message, chunks, document)

        self._log(
            ChatLogCreate(
                user_id=user_id,
                chat_type=ChatType.DOCUMENT,
                document_id=document_id,
                prompt=message,
                response=completion.text,
                embedding=embedding,
                tokens_used=completion.tokens_used,
            )
        )

        metadata = self._metadata(embedding, chunks, completion)
        return DocumentChatResponse(
            response=completion.text,
            metadata=DocumentChatMetadata(**metadata.model_dump(), document_id=document_id),
        )

    async def chat_about_regulations(
        self,
        request: RegulationChatRequest,
        user_id: str | None,
    ) -> ChatResponse:
        """
        Answer a question from the regulation knowledge base.

        Args:
            request: Message
            user_id: Authenticated caller, None if unauthenticated

        Returns:
            ChatResponse: Answer and retrieval metadata

        Raises:
            InvalidRequestError: Empty message
            UnauthorizedError: No caller identity
            UpstreamEmbeddingError | UpstreamRetrievalError | UpstreamCompletionError:
                Remote dependency failure
        """
        message = self._require_message(request.message)
        user_id = self._require_user(user_id)

        embedding = await self._embed(message)
        chunks = await self._retrieve(
            embedding,
            top_k=self.retrieval.regulation_top_k,
            namespace=self.retrieval.regulation_namespace,
        )
        completion = await self._generate(message, chunks, None)

        self._log(
            ChatLogCreate(
                user_id=user_id,
                chat_type=ChatType.REGULATION,
                prompt=message,
                response=completion.text,
                embedding=embedding,
                tokens_used=completion.tokens_used,
            )
        )

        return ChatResponse(
            response=completion.text,
            metadata=self._metadata(embedding, chunks, completion),
        )

    @staticmethod
    def _require_message(message: str) -> str:
        if not message or not message.strip():
            raise InvalidRequestError("Message is required", field="message")
        return message

    @staticmethod
    def _require_user(user_id: str | None) -> str:
        if not user_id or not user_id.strip():
            raise UnauthorizedError()
        return user_id

    async def _embed(self, message: str) -> list[float]:
        try:
            embedding = await self.embedder.embed(message)
        except EmbeddingError as e:
            raise UpstreamEmbeddingError(e.message, details=e.details) from e
        except Exception as e:
            raise UpstreamEmbeddingError(
                "Embedding provider request failed",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        if not embedding:
            raise UpstreamEmbeddingError("Embedding provider returned an empty vector")
        return embedding

    async def _retrieve(
        self,
        embedding: list[float],
        top_k: int,
        namespace: str,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[RetrievedChunk]:
        try:
            chunks = await self.vector_index.query(
                embedding,
                top_k=top_k,
                namespace=namespace,
                metadata_filter=metadata_filter,
            )
        except VectorStoreError as e:
            raise UpstreamRetrievalError(e.message, details=e.details) from e
        except Exception as e:
            raise UpstreamRetrievalError(
                "Vector index query failed",
                details={"namespace": namespace, "error_type": type(e).__name__, "error": str(e)},
            ) from e

        chunks = list(chunks)[:top_k]
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:_retrieve - Retrieved chunks",
            namespace=namespace,
            match_count=len(chunks),
            top_score=chunks[0].score if chunks else None,
        )
        return chunks

    async def _generate(
        self,
        message: str,
        chunks: list[RetrievedChunk],
        document: DocumentMetadata | None,
    ) -> Completion:
        try:
            return await self.generator.generate(message, chunks, document)
        except ChatError:
            raise
        except Exception as e:
            raise UpstreamCompletionError(
                "Completion failed",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

    def _log(self, entry: ChatLogCreate) -> None:
        try:
            self.interaction_logger.log_in_background(entry)
        except Exception as e:
            # Scheduling failures are as non-fatal as write failures
            logger.error(f"{__name__}:_log - Could not schedule chat log: {type(e).__name__}: {e}")

    @staticmethod
    def _metadata(
        embedding: list[float],
        chunks: list[RetrievedChunk],
        completion: Completion,
    ) -> ChatMetadata:
        return ChatMetadata(
            match_count=len(chunks),
            tokens_used=completion.tokens_used,
            embedding_dimensions=len(embedding),
            has_relevant_sections=bool(chunks),
            top_match_score=chunks[0].score if chunks else None,
        )
