"""FastAPI dependency providers."""

from regchat.api.deps.dependencies import (
    get_chat_history_service,
    get_chat_orchestrator,
    get_current_user_id,
    get_document_service,
    get_service_cache,
)

__all__ = [
    "get_chat_history_service",
    "get_chat_orchestrator",
    "get_current_user_id",
    "get_document_service",
    "get_service_cache",
]
