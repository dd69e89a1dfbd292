"""Chat history API endpoints.

Routes:
- GET /chat/history - List the caller's chat log entries
- GET /chat/history/documents/{document_id} - List the caller's chats about one document
- DELETE /chat/history/{chat_id} - Delete one of the caller's entries

Dependencies: regchat.application.services.chat_history_service
System role: Chat history HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from regchat.api.deps import get_chat_history_service, get_current_user_id
from regchat.api.routers.error_handling import handle_history_errors
from regchat.application.services import ChatHistoryService
from regchat.core.exceptions import UnauthorizedError
from regchat.models.chat import ChatLogResponse
from regchat.models.common import ErrorResponse, PaginatedResponse

router = APIRouter(
    prefix="/chat/history",
    tags=["chat-history"],
    responses={401: {"model": ErrorResponse}},
)


def _require_user(user_id: str | None) -> str:
    if user_id is None:
        raise UnauthorizedError()
    return user_id


@router.get("", response_model=PaginatedResponse[ChatLogResponse])
@handle_history_errors
async def list_history(
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user_id: str | None = Depends(get_current_user_id),
    history_service: ChatHistoryService = Depends(get_chat_history_service),
) -> PaginatedResponse[ChatLogResponse]:
    """List the caller's chat log entries, newest first."""
    return await history_service.list_history(_require_user(user_id), limit=limit, offset=offset)


@router.get("/documents/{document_id}", response_model=PaginatedResponse[ChatLogResponse])
@handle_history_errors
async def list_document_history(
    document_id: str,
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user_id: str | None = Depends(get_current_user_id),
    history_service: ChatHistoryService = Depends(get_chat_history_service),
) -> PaginatedResponse[ChatLogResponse]:
    """List the caller's chats about one document, newest first."""
    return await history_service.list_history(
        _require_user(user_id),
        document_id=document_id,
        limit=limit,
        offset=offset,
    )


@router.delete(
    "/{chat_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
@handle_history_errors
async def delete_history_entry(
    chat_id: UUID,
    user_id: str | None = Depends(get_current_user_id),
    history_service: ChatHistoryService = Depends(get_chat_history_service),
) -> Response:
    """Delete one chat log entry owned by the caller.

    Raises:
        UnauthorizedError: No caller identity (401)
        NotFoundError: Entry missing or owned by someone else (404)
    """
    await history_service.delete_entry(_require_user(user_id), chat_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
