"""
Chat history service.

User-scoped reads and deletes over the chat log store.

Dependencies: sqlalchemy, regchat.boundary.db
System role: Chat history queries for the authenticated user
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from regchat.boundary.db.CRUD.chat_log_crud import chat_log_crud
from regchat.core.exceptions import NotFoundError
from regchat.models.chat import ChatLogResponse
from regchat.models.common import PaginatedResponse

logger = logging.getLogger(__name__)


class ChatHistoryService:
    """Lists and deletes a user's own chat log entries."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize chat history service.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def list_history(
        self,
        user_id: str,
        document_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> PaginatedResponse[ChatLogResponse]:
        """
        List a user's chat log entries, newest first.

        Args:
            user_id: Authenticated user
            document_id: Restrict to chats about this document
            limit: Maximum number of entries
            offset: Number of entries to skip

        Returns:
            PaginatedResponse[ChatLogResponse]: Entries and total count
        """
        rows = await chat_log_crud.get_by_user(
            self.db, user_id, document_id=document_id, limit=limit, offset=offset
        )
        total = await chat_log_crud.count_by_user(self.db, user_id, document_id=document_id)
        return PaginatedResponse[ChatLogResponse](
            items=[ChatLogResponse.model_validate(row) for row in rows],
            total=total,
        )

    async def delete_entry(self, user_id: str, chat_id: UUID) -> None:
        """
        Delete one of the user's chat log entries.

        Args:
            user_id: Authenticated user
            chat_id: Chat log id

        Raises:
            NotFoundError: No entry with that id belongs to the user
        """
        deleted = await chat_log_crud.delete_for_user(self.db, user_id, chat_id)
        if not deleted:
            raise NotFoundError(f"Chat log not found: {chat_id}", details={"chat_id": str(chat_id)})
        await self.db.commit()
        logger.info(f"{__name__}:delete_entry - Deleted chat log id={chat_id}")
