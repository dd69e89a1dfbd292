"""
Federal document CRUD operations.

Dependencies: sqlalchemy, regchat.boundary.db.models
System role: Document metadata lookups and relevance flag updates
"""

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from regchat.boundary.db.CRUD.base_crud import BaseCRUD
from regchat.boundary.db.models.federal_document_model import FederalDocumentModel


class FederalDocumentCRUD(BaseCRUD[FederalDocumentModel]):
    """
    CRUD operations for FederalDocumentModel.

    Keyed by doc_id rather than a surrogate UUID.
    """

    def __init__(self) -> None:
        """Initialize FederalDocumentCRUD with FederalDocumentModel."""
        super().__init__(FederalDocumentModel, pk_name="doc_id")

    async def get_by_doc_id(
        self,
        session: AsyncSession,
        doc_id: str,
    ) -> FederalDocumentModel | None:
        """
        Retrieve a document by exact doc_id match.

        Args:
            session: Async database session
            doc_id: Federal document id

        Returns:
            FederalDocumentModel if found, None otherwise
        """
        return await self.get_by_id(session, doc_id)

    async def list_newest_first(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[FederalDocumentModel]:
        """
        Retrieve documents ordered by posted date, newest first.

        Documents without a posted date sort last.

        Args:
            session: Async database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of FederalDocumentModels
        """
        stmt = (
            select(FederalDocumentModel)
            .order_by(
                FederalDocumentModel.posted_date.is_(None),
                FederalDocumentModel.posted_date.desc(),
                FederalDocumentModel.doc_id,
            )
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_relevance(
        self,
        session: AsyncSession,
        doc_id: str,
        relevant: bool,
    ) -> FederalDocumentModel | None:
        """
        Set the relevant flag on a document.

        Args:
            session: Async database session
            doc_id: Federal document id
            relevant: New flag value

        Returns:
            Updated FederalDocumentModel if found, None otherwise
        """
        stmt = (
            update(FederalDocumentModel)
            .where(FederalDocumentModel.doc_id == doc_id)
            .values(relevant=relevant)
            .returning(FederalDocumentModel)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


federal_document_crud = FederalDocumentCRUD()
