"""CRUD classes and their module-level singletons."""

from regchat.boundary.db.CRUD.base_crud import BaseCRUD
from regchat.boundary.db.CRUD.chat_log_crud import ChatLogCRUD, chat_log_crud
from regchat.boundary.db.CRUD.federal_document_crud import (
    FederalDocumentCRUD,
    federal_document_crud,
)

__all__ = [
    "BaseCRUD",
    "ChatLogCRUD",
    "FederalDocumentCRUD",
    "chat_log_crud",
    "federal_document_crud",
]
