"""
Grounded-completion generator.

Assembles the grounded prompt for a chat variant, calls the chat model once,
and extracts answer text and token usage.

Dependencies: langchain_core, langchain_google_genai
System role: Grounded-Completion Generator
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from regchat.core.chat.prompts import build_document_messages, build_regulation_messages
from regchat.core.exceptions import NoResponseError, UpstreamCompletionError
from regchat.models.chat import Completion, RetrievedChunk
from regchat.models.document import DocumentMetadata

logger = logging.getLogger(__name__)


def create_chat_model(model_id: str, temperature: float = 0.7) -> ChatGoogleGenerativeAI:
    """
    Create the Gemini chat model used for grounded answers.

    Args:
        model_id: Gemini model identifier
        temperature: Sampling temperature

    Returns:
        ChatGoogleGenerativeAI: Configured chat model
    """
    return ChatGoogleGenerativeAI(model=model_id, temperature=temperature)


def extract_text(content: Any) -> str:
    """
    Flatten message content to plain text.

    Gemini may return a list of parts (strings or {"type": "text", "text": ...}
    dicts) instead of a single string.

    Args:
        content: AIMessage.content

    Returns:
        str: Concatenated text, stripped
    """
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts).strip()
    return ""


class GroundedCompletionGenerator:
    """Drives one grounded chat completion per call."""

    def __init__(self, llm: BaseChatModel) -> None:
        """
        Initialize generator.

        Args:
            llm: LangChain chat model (temperature configured on the model)
        """
        self._llm = llm

    async def generate(
        self,
        question: str,
        chunks: list[RetrievedChunk],
        document: DocumentMetadata | None = None,
    ) -> Completion:
        """
        Generate an answer grounded on retrieved chunks.

        Args:
            question: Raw user message
            chunks: Retrieved chunks in ranked order (may be empty)
            document: Document metadata for document chat, None for regulation chat

        Returns:
            Completion: Answer text and tokens used

        Raises:
            NoResponseError: Model returned no text
            UpstreamCompletionError: Model call failed
        """
        if document is not None:
            messages = build_document_messages(question, chunks, document)
        else:
            messages = build_regulation_messages(question, chunks)

        try:
            result = await self._llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:generate - {type(e).__name__}: {e}")
            raise UpstreamCompletionError(
                "Completion provider request failed",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        text = extract_text(getattr(result, "content", None))
        if not text:
            logger.error(f"{__name__}:generate - Empty completion payload")
            raise NoResponseError()

        usage = getattr(result, "usage_metadata", None) or {}
        tokens_used = int(usage.get("total_tokens", 0) or 0)

        logger.info(
            f"{__name__}:generate - Completion OK",
            extra={
                "chunks": len(chunks),
                "answer_len": len(text),
                "tokens_used": tokens_used,
            },
        )
        return Completion(text=text, tokens_used=tokens_used)
