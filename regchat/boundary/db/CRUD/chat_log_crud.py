"""
Chat log CRUD operations.

All reads and deletes are user-scoped: a user only ever sees or removes
their own log entries.

Dependencies: sqlalchemy, regchat.boundary.db.models
System role: Chat log persistence and history queries
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from regchat.boundary.db.CRUD.base_crud import BaseCRUD
from regchat.boundary.db.models.chat_log_model import ChatLogModel


class ChatLogCRUD(BaseCRUD[ChatLogModel]):
    """CRUD operations for ChatLogModel."""

    def __init__(self) -> None:
        """Initialize ChatLogCRUD with ChatLogModel."""
        super().__init__(ChatLogModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        document_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ChatLogModel]:
        """
        Retrieve a user's chat log entries, newest first.

        Args:
            session: Async database session
            user_id: Owner of the entries
            document_id: Restrict to chats about this document
            limit: Maximum number of entries to return
            offset: Number of entries to skip

        Returns:
            Sequence of ChatLogModels
        """
        stmt = select(ChatLogModel).where(ChatLogModel.user_id == user_id)
        if document_id is not None:
            stmt = stmt.where(ChatLogModel.document_id == document_id)
        stmt = stmt.order_by(ChatLogModel.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        document_id: str | None = None,
    ) -> int:
        """
        Count a user's chat log entries.

        Args:
            session: Async database session
            user_id: Owner of the entries
            document_id: Restrict to chats about this document

        Returns:
            Number of matching entries
        """
        stmt = select(func.count()).select_from(ChatLogModel).where(ChatLogModel.user_id == user_id)
        if document_id is not None:
            stmt = stmt.where(ChatLogModel.document_id == document_id)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def delete_for_user(
        self,
        session: AsyncSession,
        user_id: str,
        chat_id: UUID,
    ) -> bool:
        """
        Delete one entry owned by the user.

        Args:
            session: Async database session
            user_id: Owner of the entry
            chat_id: Chat log id

        Returns:
            True if an entry was deleted, False if none matched
        """
        stmt = delete(ChatLogModel).where(
            ChatLogModel.id == chat_id,
            ChatLogModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


chat_log_crud = ChatLogCRUD()
