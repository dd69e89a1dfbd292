"""
Chat domain models and schemas.

Request/response schemas for the chat endpoints plus the chat log record.

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from regchat.models.common import CamelModel


class ChatType(str, Enum):
    """Which chat endpoint produced an interaction."""

    DOCUMENT = "document"
    REGULATION = "regulation"


class RegulationChatRequest(CamelModel):
    """Request schema for regulation knowledge base chat."""

    message: str = Field(default="", description="User question or message")


class DocumentChatRequest(RegulationChatRequest):
    """Request schema for chat scoped to one federal document."""

    document_id: str = Field(default="", description="doc_id of the federal document")


class RetrievedChunk(CamelModel):
    """One vector index match, ranked by descending similarity."""

    text: str
    score: float
    metadata_filename: str = ""


class Completion(BaseModel):
    """Answer text and token usage from the completion provider."""

    text: str
    tokens_used: int = 0


class ChatMetadata(CamelModel):
    """Retrieval and generation facts returned alongside the answer."""

    match_count: int
    tokens_used: int
    embedding_dimensions: int
    has_relevant_sections: bool
    top_match_score: float | None = None


class DocumentChatMetadata(ChatMetadata):
    """Chat metadata with the document the answer is scoped to."""

    document_id: str


class ChatResponse(BaseModel):
    """Response schema for regulation chat."""

    response: str
    metadata: ChatMetadata


class DocumentChatResponse(ChatResponse):
    """Response schema for document chat."""

    metadata: DocumentChatMetadata


class ChatLogCreate(BaseModel):
    """Chat log record written after a successful completion."""

    user_id: str
    chat_type: ChatType
    document_id: str | None = None
    prompt: str
    response: str
    embedding: list[float]
    tokens_used: int = 0


class ChatLogResponse(BaseModel):
    """Persisted chat log entry as returned by the history endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    chat_type: ChatType
    document_id: str | None = None
    prompt: str
    response: str
    tokens_used: int
    created_at: datetime
