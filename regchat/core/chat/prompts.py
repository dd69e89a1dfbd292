"""
Grounded chat system prompts.

Two templates: document chat embeds the document's metadata as fixed context,
regulation chat searches the general knowledge base and may fall back to
general knowledge only when it says so. Both list retrieved sections in ranked
order and state the grounding rules; with no sections they say so explicitly.

Dependencies: langchain_core.prompts
System role: Prompt templates for the Grounded-Completion Generator
"""

from langchain_core.prompts import ChatPromptTemplate

from regchat.models.chat import RetrievedChunk
from regchat.models.document import DocumentMetadata

NO_SECTIONS_NOTICE = "No specific sections of this document matched the question."
NO_KB_SECTIONS_NOTICE = "No specific regulation sections matched the question."

DOCUMENT_SYSTEM_PROMPT = """You are an AI assistant helping with questions about a specific federal regulatory document.

DOCUMENT CONTEXT:
Title: {title}
Agency: {agency}
Type: {document_type}
Date: {posted_date}

RELEVANT SECTIONS:
{sections}

Instructions:
1. Base your responses on the provided document sections above
2. If specific information is found in the text, cite or quote it
3. If you cannot find relevant information in the provided sections, say so
4. Be precise and factual when discussing the document's content
5. Only make statements that are directly supported by the document content
{fallback_rule}"""

DOCUMENT_FALLBACK_RULE = (
    "6. No sections were retrieved for this question. Say that no specific sections "
    "were found, then give a general answer based only on the document context above."
)

REGULATION_SYSTEM_PROMPT = """You are an AI assistant answering questions about major federal regulations.

RELEVANT SECTIONS:
{sections}

Instructions:
1. Answer using only the regulation sections provided above
2. Quote or cite the sections you rely on when possible
3. Do not make anything up; if the sections do not contain the answer, say that you don't know
{fallback_rule}"""

REGULATION_FALLBACK_RULE = (
    "4. No sections were retrieved for this question. Say that no specific regulation "
    "sections were found. You may then answer from general knowledge, but you must "
    "clearly label that answer as general knowledge that is not grounded in the knowledge base."
)

DOCUMENT_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", DOCUMENT_SYSTEM_PROMPT),
    ("human", "{question}"),
])

REGULATION_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", REGULATION_SYSTEM_PROMPT),
    ("human", "{question}"),
])


def format_sections(chunks: list[RetrievedChunk], empty_notice: str) -> str:
    """
    Join chunk texts in ranked order, separated by blank lines.

    Args:
        chunks: Retrieved chunks, highest score first
        empty_notice: Text used when nothing was retrieved

    Returns:
        str: Sections block for the system prompt
    """
    if not chunks:
        return empty_notice
    return "\n\n".join(chunk.text for chunk in chunks)


def _or_unknown(value: object) -> str:
    return str(value) if value not in (None, "") else "Unknown"


def build_document_messages(
    question: str,
    chunks: list[RetrievedChunk],
    document: DocumentMetadata,
):
    """
    Build system + human messages for document chat.

    Args:
        question: Raw user message
        chunks: Retrieved chunks, highest score first
        document: Metadata of the document being discussed

    Returns:
        list[BaseMessage]: [SystemMessage, HumanMessage]
    """
    return DOCUMENT_CHAT_PROMPT.invoke({
        "title": document.title,
        "agency": _or_unknown(document.agency_id),
        "document_type": _or_unknown(document.document_type),
        "posted_date": _or_unknown(document.posted_date),
        "sections": format_sections(chunks, NO_SECTIONS_NOTICE),
        "fallback_rule": "" if chunks else DOCUMENT_FALLBACK_RULE,
        "question": question,
    }).to_messages()


def build_regulation_messages(question: str, chunks: list[RetrievedChunk]):
    """
    Build system + human messages for regulation chat.

    Args:
        question: Raw user message
        chunks: Retrieved chunks, highest score first

    Returns:
        list[BaseMessage]: [SystemMessage, HumanMessage]
    """
    return REGULATION_CHAT_PROMPT.invoke({
        "sections": format_sections(chunks, NO_KB_SECTIONS_NOTICE),
        "fallback_rule": "" if chunks else REGULATION_FALLBACK_RULE,
        "question": question,
    }).to_messages()
