"""
Application services.

Exports DocumentAccessValidator, InteractionLogger, DocumentService and
ChatHistoryService.
"""

from regchat.application.services.access_validator import AccessDecision, DocumentAccessValidator
from regchat.application.services.chat_history_service import ChatHistoryService
from regchat.application.services.document_service import DocumentService
from regchat.application.services.interaction_logger import InteractionLogger

__all__ = [
    "AccessDecision",
    "ChatHistoryService",
    "DocumentAccessValidator",
    "DocumentService",
    "InteractionLogger",
]
