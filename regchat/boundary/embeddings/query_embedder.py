"""
Query embedding client.

Turns a user message into a fixed-length vector with Google Gemini embeddings.
The configured output dimensionality is passed on every call because the
provider's default dimension does not match the vector index.

Dependencies: langchain_google_genai, fastapi.concurrency
System role: Embedding Client (text -> EmbeddingVector)
"""

import logging
from typing import Protocol

from dotenv import load_dotenv
from fastapi.concurrency import run_in_threadpool
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from regchat.core.exceptions import EmbeddingError

load_dotenv()
logger = logging.getLogger(__name__)


class QueryEmbedder(Protocol):
    """Capability: embed one query text."""

    async def embed(self, text: str) -> list[float]: ...


class GeminiQueryEmbedder:
    """Gemini embeddings with a fixed output dimensionality."""

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        embeddings: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize the embedding client.

        Args:
            model: Google embedding model ID
            output_dimensionality: Length of every returned vector
            embeddings: Pre-built LangChain embeddings client (tests, sharing)
        """
        self._output_dimensionality = output_dimensionality
        self._embeddings = embeddings or GoogleGenerativeAIEmbeddings(model=model)
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @property
    def embeddings(self) -> GoogleGenerativeAIEmbeddings:
        """Underlying LangChain embeddings client."""
        return self._embeddings

    @property
    def dimension(self) -> int:
        return self._output_dimensionality

    async def embed(self, text: str) -> list[float]:
        """
        Embed a query text.

        Args:
            text: Query text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: Provider failure or empty vector
        """
        try:
            vector = await run_in_threadpool(
                self._embeddings.embed_query,
                text,
                output_dimensionality=self.dimension,
            )
        except Exception as e:
            logger.error(f"{__name__}:embed - {type(e).__name__}: {e}")
            raise EmbeddingError(
                "Embedding provider request failed",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        if not vector:
            raise EmbeddingError("Embedding provider returned an empty vector")

        if len(vector) != self.dimension:
            logger.warning(f"{__name__}:embed - Expected {self.dimension} dims, got {len(vector)}")

        return [float(value) for value in vector]
