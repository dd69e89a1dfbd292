"""
Vector index capability.

Dependencies: regchat.models.chat
System role: Interface shared by the S3 Vectors and FAISS index clients
"""

from typing import Any, Protocol

from regchat.models.chat import RetrievedChunk


class VectorIndex(Protocol):
    """
    Nearest-neighbour search over namespaced chunk collections.

    Implementations return matches ordered by descending score and apply no
    score threshold; an empty list is a normal result.
    """

    async def query(
        self,
        vector: list[float],
        top_k: int,
        namespace: str,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[RetrievedChunk]: ...
