"""Query embedding adapters."""

from regchat.boundary.embeddings.query_embedder import GeminiQueryEmbedder, QueryEmbedder

__all__ = ["GeminiQueryEmbedder", "QueryEmbedder"]
