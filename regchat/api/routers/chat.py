"""Chat API endpoints.

Routes:
- POST /chat - Answer a question about one federal document
- POST /reg-chat - Answer a question from the regulation knowledge base

Dependencies: regchat.core.chat, regchat.api.deps
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from regchat.api.deps import get_chat_orchestrator, get_current_user_id
from regchat.api.routers.error_handling import handle_chat_errors
from regchat.core.chat import ChatOrchestrator
from regchat.models.chat import (
    ChatResponse,
    DocumentChatRequest,
    DocumentChatResponse,
    RegulationChatRequest,
)
from regchat.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/chat",
    response_model=DocumentChatResponse,
    responses={**ERROR_RESPONSES, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@handle_chat_errors
async def document_chat(
    request: DocumentChatRequest,
    user_id: str | None = Depends(get_current_user_id),
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
) -> DocumentChatResponse:
    """Answer a question grounded in sections of one federal document.

    Args:
        request: Message and documentId
        user_id: Caller identity from the gateway header
        orchestrator: Injected ChatOrchestrator

    Returns:
        DocumentChatResponse: Answer with retrieval metadata
    """
    logger.info(
        f"{__name__}:document_chat - Request received",
        extra={"document_id": request.document_id, "message_length": len(request.message)},
    )
    return await orchestrator.chat_about_document(request, user_id)


@router.post("/reg-chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
@handle_chat_errors
async def regulation_chat(
    request: RegulationChatRequest,
    user_id: str | None = Depends(get_current_user_id),
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
) -> ChatResponse:
    """Answer a question grounded in the regulation knowledge base."""
    logger.info(
        f"{__name__}:regulation_chat - Request received",
        extra={"message_length": len(request.message)},
    )
    return await orchestrator.chat_about_regulations(request, user_id)
