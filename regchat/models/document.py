"""
Federal document schemas.

Dependencies: pydantic
System role: Document metadata and relevance flag API contracts
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentMetadata(BaseModel):
    """Structured metadata of one federal regulatory document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    doc_id: str = Field(alias="doc_id")
    title: str
    agency_id: str | None = None
    document_type: str | None = None
    posted_date: date | None = None
    docket_id: str | None = None
    fr_doc_num: str | None = None
    open_for_comment: bool = False
    comment_end_date: date | None = None
    summary: str | None = None
    relevant: bool = False


class RelevanceUpdateRequest(BaseModel):
    """Request body for toggling a document's relevant flag."""

    relevant: Any = None


class RelevanceUpdateResponse(BaseModel):
    """Updated relevance flag."""

    doc_id: str
    relevant: bool
