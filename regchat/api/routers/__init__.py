"""API routers."""

from .chat import router as chat_router
from .chat_history import router as chat_history_router
from .documents import router as documents_router
from .health import router as health_router

__all__ = [
    "chat_history_router",
    "chat_router",
    "documents_router",
    "health_router",
]
