"""ORM models."""

from regchat.boundary.db.models.chat_log_model import ChatLogModel
from regchat.boundary.db.models.federal_document_model import FederalDocumentModel

__all__ = ["ChatLogModel", "FederalDocumentModel"]
