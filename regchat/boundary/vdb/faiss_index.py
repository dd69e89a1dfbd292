"""
Local FAISS vector index for development.

One persisted FAISS index per namespace under a common directory
(<persist_directory>/<namespace>/index.faiss). Indexes are loaded lazily and
cached; a namespace with no index on disk simply has no matches.

Dependencies: langchain_community.vectorstores, langchain_core
System role: Development Vector Index Client
"""

import logging
from pathlib import Path
from typing import Any

from fastapi.concurrency import run_in_threadpool
from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from regchat.core.exceptions import VectorStoreError
from regchat.models.chat import RetrievedChunk

logger = logging.getLogger(__name__)


class FAISSIndex:
    """FAISS-backed index client with namespace-per-directory isolation."""

    def __init__(
        self,
        embeddings: Embeddings,
        persist_directory: str = ".faiss_index",
        filename_field: str = "filename",
    ) -> None:
        """
        Initialize FAISS index client.

        Args:
            embeddings: Embeddings used when the indexes were built (required to load them)
            persist_directory: Directory holding one sub-directory per namespace
            filename_field: Metadata key holding the source filename
        """
        self._embeddings = embeddings
        self._persist_dir = Path(persist_directory)
        self._filename_field = filename_field
        self._stores: dict[str, FAISS] = {}

    def _load(self, namespace: str) -> FAISS | None:
        if namespace in self._stores:
            return self._stores[namespace]

        namespace_dir = self._persist_dir / namespace
        if not (namespace_dir / "index.faiss").exists():
            logger.warning(f"{__name__}:_load - No FAISS index for namespace={namespace}")
            return None

        store = FAISS.load_local(
            str(namespace_dir),
            self._embeddings,
            allow_dangerous_deserialization=True,
        )
        self._stores[namespace] = store
        return store

    def _query_sync(
        self,
        vector: list[float],
        top_k: int,
        namespace: str,
        metadata_filter: dict[str, Any] | None,
    ) -> list[RetrievedChunk]:
        store = self._load(namespace)
        if store is None:
            return []

        search_kwargs: dict[str, Any] = {"k": top_k}
        if metadata_filter:
            # Filtering happens after the nearest-neighbour fetch, so fetch the whole namespace
            search_kwargs["filter"] = metadata_filter
            search_kwargs["fetch_k"] = max(top_k, store.index.ntotal)

        results = store.similarity_search_with_score_by_vector(vector, **search_kwargs)
        relevance = store._select_relevance_score_fn()
        return [
            RetrievedChunk(
                text=doc.page_content,
                score=relevance(float(distance)),
                metadata_filename=str(doc.metadata.get(self._filename_field, "")),
            )
            for doc, distance in results
        ]

    async def query(
        self,
        vector: list[float],
        top_k: int,
        namespace: str,
        metadata_filter: dict[str, Any] | None = None,
    ) -> list[RetrievedChunk]:
        """
        Search one namespace for the chunks closest to a vector.

        Args:
            vector: Query embedding
            top_k: Number of matches to request
            namespace: Namespace sub-directory
            metadata_filter: Metadata equality filter

        Returns:
            list[RetrievedChunk]: Matches by descending score (may be empty)

        Raises:
            VectorStoreError: If loading or searching the index fails
        """
        try:
            return await run_in_threadpool(
                self._query_sync, vector, top_k, namespace, metadata_filter
            )
        except Exception as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(
                "FAISS query failed",
                namespace=namespace,
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e
