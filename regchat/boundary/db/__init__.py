"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - FederalDocumentModel, ChatLogModel: Persistent entities
  - federal_document_crud, chat_log_crud: CRUD operation singletons

Dependencies: sqlalchemy, regchat.configs
System role: Relational store adapter for documents and chat logs
"""

from regchat.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from regchat.boundary.db.connection import (
    create_all_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from regchat.boundary.db.models import ChatLogModel, FederalDocumentModel
from regchat.boundary.db.CRUD import (
    BaseCRUD,
    ChatLogCRUD,
    FederalDocumentCRUD,
    chat_log_crud,
    federal_document_crud,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    "create_all_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "ChatLogModel",
    "FederalDocumentModel",
    "BaseCRUD",
    "ChatLogCRUD",
    "FederalDocumentCRUD",
    "chat_log_crud",
    "federal_document_crud",
]
