"""
Chat interaction logger.

Persists one chat log row per answered request. Writes use their own database
session so they can outlive the request that triggered them, and failures are
reported to the application log only: a chat answer is never affected by the
log store.

Dependencies: sqlalchemy, asyncio, regchat.boundary.db
System role: Interaction Logger (fire-and-forget audit writes)
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from regchat.boundary.db.CRUD.chat_log_crud import chat_log_crud
from regchat.core.exceptions import LoggingError
from regchat.models.chat import ChatLogCreate
from regchat.models.common import ErrorInfo

logger = logging.getLogger(__name__)


class InteractionLogger:
    """Writes chat logs, in the foreground or as detached tasks."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize logger.

        Args:
            session_factory: Factory for sessions independent of any request
        """
        self._session_factory = session_factory
        self._pending: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def log(self, entry: ChatLogCreate) -> ErrorInfo | None:
        """
        Insert one chat log row.

        Args:
            entry: Chat log record

        Returns:
            ErrorInfo describing the failure, or None on success
        """
        logger.info(
            f"{__name__}:log - Inserting chat log",
            extra={
                "chat_type": entry.chat_type.value,
                "embedding_length": len(entry.embedding),
                "has_document_id": entry.document_id is not None,
            },
        )
        try:
            async with self._session_factory() as session:
                row = await chat_log_crud.create(session, **entry.model_dump())
                await session.commit()
        except Exception as e:
            error = LoggingError(
                "Failed to log chat interaction",
                details={"error_type": type(e).__name__, "error": str(e)},
            )
            logger.error(f"{__name__}:log - {error}")
            return ErrorInfo(message=error.message, code=error.kind.value, details=error.details)

        logger.info(f"{__name__}:log - Inserted chat log id={row.id}")
        return None

    def log_in_background(self, entry: ChatLogCreate) -> asyncio.Task:
        """
        Schedule a chat log write without waiting for it.

        Args:
            entry: Chat log record

        Returns:
            asyncio.Task: The detached write (already tracked; callers may ignore it)
        """
        task = asyncio.create_task(self.log(entry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for all scheduled writes to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
