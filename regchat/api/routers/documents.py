"""Federal document API endpoints.

Routes:
- GET /details - List documents, newest posted first
- PUT /details/{doc_id}/relevant - Set a document's relevant flag

Dependencies: regchat.application.services.document_service
System role: Document browser HTTP API
"""

from fastapi import APIRouter, Depends, Query

from regchat.api.deps import get_document_service
from regchat.api.routers.error_handling import handle_document_errors
from regchat.application.services import DocumentService
from regchat.models.common import ErrorResponse
from regchat.models.document import (
    DocumentMetadata,
    RelevanceUpdateRequest,
    RelevanceUpdateResponse,
)

router = APIRouter(prefix="/details", tags=["documents"])


@router.get("", response_model=list[DocumentMetadata])
@handle_document_errors
async def list_documents(
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentMetadata]:
    """List federal documents ordered by posted date, newest first."""
    return await document_service.list_documents(limit=limit, offset=offset)


@router.put(
    "/{doc_id}/relevant",
    response_model=RelevanceUpdateResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@handle_document_errors
async def update_relevance(
    doc_id: str,
    request: RelevanceUpdateRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> RelevanceUpdateResponse:
    """Set the relevant flag on one document.

    Args:
        doc_id: Federal document id
        request: Body with a boolean `relevant`
        document_service: Injected DocumentService

    Returns:
        RelevanceUpdateResponse: doc_id and stored flag
    """
    return await document_service.update_relevance(doc_id, request.relevant)
