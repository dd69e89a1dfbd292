"""
Dependency injection container.

Factory functions for FastAPI dependencies. Remote clients are built once per
process and cached; request-scoped collaborators get the request's session.

Dependencies: regchat.configs, regchat.application, regchat.boundary, regchat.core
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from regchat.application.services import (
    ChatHistoryService,
    DocumentAccessValidator,
    DocumentService,
    InteractionLogger,
)
from regchat.boundary.db import get_async_db, get_async_session_factory
from regchat.configs import get_settings
from regchat.core.chat import ChatOrchestrator, GroundedCompletionGenerator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._embedder = None
        self._vector_index = None
        self._generator = None
        self._interaction_logger = None

    @property
    def embedder(self):
        """Get cached query embedder."""
        if self._embedder is None:
            from regchat.boundary.embeddings import GeminiQueryEmbedder

            llm_settings = get_settings().llm
            self._embedder = GeminiQueryEmbedder(
                model=llm_settings.embedding_model,
                output_dimensionality=llm_settings.embedding_dimension,
            )
        return self._embedder

    @property
    def vector_index(self):
        """Get cached vector index client."""
        if self._vector_index is None:
            from regchat.boundary.vdb import get_vector_index

            settings = get_settings()
            embeddings = self.embedder.embeddings if settings.vector_store.store_type == "faiss" else None
            self._vector_index = get_vector_index(settings.vector_store, embeddings)
        return self._vector_index

    @property
    def generator(self) -> GroundedCompletionGenerator:
        """Get cached grounded completion generator."""
        if self._generator is None:
            from regchat.core.chat.generator import create_chat_model

            llm_settings = get_settings().llm
            self._generator = GroundedCompletionGenerator(
                create_chat_model(llm_settings.chat_model, llm_settings.temperature)
            )
        return self._generator

    @property
    def interaction_logger(self) -> InteractionLogger:
        """Get cached interaction logger."""
        if self._interaction_logger is None:
            self._interaction_logger = InteractionLogger(get_async_session_factory())
        return self._interaction_logger

    async def aclose(self) -> None:
        """Flush pending chat log writes and clear all cached instances."""
        if self._interaction_logger is not None:
            await self._interaction_logger.drain()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedder = None
        self._vector_index = None
        self._generator = None
        self._interaction_logger = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_user_id(request: Request) -> str | None:
    """
    Resolve the authenticated caller from the gateway identity header.

    Absence is not rejected here: the chat pipeline decides when a missing
    identity becomes an error so input validation can run first.

    Args:
        request: Incoming request

    Returns:
        str | None: User id, or None when the header is missing or blank
    """
    header = get_settings().auth.user_header
    user_id = request.headers.get(header, "").strip()
    return user_id or None


def get_document_service(db: AsyncSession = Depends(get_async_db)) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DocumentService: Document service instance
    """
    return DocumentService(db=db)


def get_chat_history_service(db: AsyncSession = Depends(get_async_db)) -> ChatHistoryService:
    """
    Get chat history service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatHistoryService: Chat history service instance
    """
    return ChatHistoryService(db=db)


def get_chat_orchestrator(db: AsyncSession = Depends(get_async_db)) -> ChatOrchestrator:
    """
    Get chat orchestrator wired with cached clients and request-scoped stores.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatOrchestrator: Orchestrator for one request
    """
    cache = get_service_cache()
    return ChatOrchestrator(
        embedder=cache.embedder,
        vector_index=cache.vector_index,
        generator=cache.generator,
        interaction_logger=cache.interaction_logger,
        document_store=DocumentService(db=db),
        access_validator=DocumentAccessValidator(db=db),
        retrieval=get_settings().vector_store,
    )
