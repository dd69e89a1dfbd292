"""
Chat log ORM model.

Append-only audit record of one answered chat interaction.

Dependencies: sqlalchemy, regchat.boundary.db.base
System role: Chat interaction audit persistence
"""

from sqlalchemy import JSON, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from regchat.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from regchat.models.chat import ChatType


class ChatLogModel(UUIDMixin, CreatedAtMixin, Base):
    """
    Chat interaction log entry.

    Written once after a completion succeeds and never updated.

    Attributes:
        id: UUID primary key
        user_id: Authenticated user who asked
        chat_type: document or regulation chat
        document_id: Federal document id for document chat, None otherwise
        prompt: Raw user message
        response: Generated answer
        embedding: Query embedding vector as sent to the vector index
        tokens_used: Total tokens reported by the completion provider
        created_at: Insertion timestamp (UTC)
    """

    __tablename__ = "chat_logs"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    chat_type: Mapped[ChatType] = mapped_column(
        Enum(ChatType, name="chat_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    document_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[list[float]] = mapped_column(JSON, nullable=False)
    tokens_used: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<ChatLogModel(id={self.id}, user_id={self.user_id}, chat_type={self.chat_type})>"
