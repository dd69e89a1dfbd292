"""
Federal document ORM model.

One row per regulatory filing. Rows are loaded by the ingestion side of the
platform; this service reads them and toggles the relevant flag.

Dependencies: sqlalchemy, regchat.boundary.db.base
System role: Federal document metadata persistence
"""

from datetime import date

from sqlalchemy import Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from regchat.boundary.db.base import Base, TimestampMixin


class FederalDocumentModel(TimestampMixin, Base):
    """
    Federal regulatory document metadata.

    Attributes:
        doc_id: Regulations.gov document id (e.g. "EPA-2024-001"), primary key
        title: Document title
        agency_id: Issuing agency acronym
        document_type: Rule, Proposed Rule, Notice, ...
        posted_date: Date the document was posted
        docket_id: Parent docket id
        fr_doc_num: Federal Register document number
        open_for_comment: Whether the comment period is open
        comment_end_date: Last day of the comment period
        summary: Short summary text
        relevant: Analyst-maintained relevance flag
    """

    __tablename__ = "federal_documents"

    doc_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    agency_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    document_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    posted_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    docket_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    fr_doc_num: Mapped[str | None] = mapped_column(String(64), nullable=True)
    open_for_comment: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    comment_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    relevant: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<FederalDocumentModel(doc_id={self.doc_id}, agency_id={self.agency_id})>"
