"""
Federal document service.

Document metadata lookup for the chat pipeline plus the listing and
relevance flag operations behind the document browser.

Dependencies: sqlalchemy, regchat.boundary.db
System role: Document Store Client
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from regchat.boundary.db.CRUD.federal_document_crud import federal_document_crud
from regchat.core.exceptions import DocumentNotFoundError, InvalidRequestError
from regchat.models.document import DocumentMetadata, RelevanceUpdateResponse

logger = logging.getLogger(__name__)


class DocumentService:
    """Reads federal document metadata and maintains the relevant flag."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def get_metadata(self, doc_id: str) -> DocumentMetadata | None:
        """
        Fetch a document's metadata by exact id.

        Args:
            doc_id: Federal document id

        Returns:
            DocumentMetadata if found, None otherwise
        """
        document = await federal_document_crud.get_by_doc_id(self.db, doc_id)
        if document is None:
            return None
        return DocumentMetadata.model_validate(document)

    async def list_documents(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[DocumentMetadata]:
        """
        List documents, newest posted first.

        Args:
            limit: Maximum number of documents
            offset: Number of documents to skip

        Returns:
            list[DocumentMetadata]: Documents
        """
        documents = await federal_document_crud.list_newest_first(self.db, limit=limit, offset=offset)
        return [DocumentMetadata.model_validate(doc) for doc in documents]

    async def update_relevance(self, doc_id: str, relevant: object) -> RelevanceUpdateResponse:
        """
        Set a document's relevant flag.

        Args:
            doc_id: Federal document id
            relevant: New value; must be a real boolean

        Returns:
            RelevanceUpdateResponse: doc_id and stored flag

        Raises:
            InvalidRequestError: relevant is not a boolean
            DocumentNotFoundError: No such document
        """
        if not isinstance(relevant, bool):
            raise InvalidRequestError("Invalid relevant status", field="relevant")

        document = await federal_document_crud.update_relevance(self.db, doc_id, relevant)
        if document is None:
            raise DocumentNotFoundError(doc_id)

        await self.db.commit()
        logger.info(f"{__name__}:update_relevance - doc_id={doc_id} relevant={relevant}")
        return RelevanceUpdateResponse(doc_id=document.doc_id, relevant=document.relevant)
