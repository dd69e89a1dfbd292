"""
S3 Vectors index client for production retrieval.

Each namespace is an index inside one S3 Vectors bucket. Queries are issued
by vector, so the caller controls embedding and can log the vector it used.

Metadata keys (matching the ingestion side):
- Filterable: filename
- Non-filterable: text

Dependencies: boto3, fastapi.concurrency
System role: Production Vector Index Client
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from regchat.core.exceptions import VectorStoreError
from regchat.models.chat import RetrievedChunk

logger = logging.getLogger(__name__)


def distance_to_score(distance: float, metric: str) -> float:
    """
    Convert an S3 Vectors distance into a similarity score (higher is closer).

    Args:
        distance: Distance returned by query_vectors
        metric: Index distance metric ("cosine" or "euclidean")

    Returns:
        float: Similarity score
    """
    if metric.lower() == "euclidean":
        return 1.0 / (1.0 + distance)
    return 1.0 - distance


class S3VectorsIndex:
    """S3 Vectors client with namespace-per-index isolation."""

    def __init__(
        self,
        vectors_bucket: str,
        region: str = "us-east-1",
        text_field: str = "text",
        filename_field: str = "filename",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            region: AWS region for S3 Vectors
            text_field: Metadata key holding chunk text
            filename_field: Metadata key holding the source filename
            client: Pre-built boto3 s3vectors client (tests)
        """
        self._vectors_bucket = vectors_bucket
        self._text_field = text_field
        self._filename_field = filename_field
        self._client = client or boto3.client("s3vectors", region_name=region)

    def _query_sync(
        self,
        vector: list[float],
        top_k: int,
        namespace: str,
        metadata_filter: dict[str, Any] | None,
    ) -> list[RetrievedChunk]:
        params: dict[str, Any] = {
            "vectorBucketName": self._vectors_bucket,
            "indexName": namespace,
            "queryVector": {"float32": vector},
            "topK": top_k,
            "returnMetadata": True,
            "returnDistance": True,
        }
        if metadata_filter:
            params["filter"] = metadata_filter

        response = self._client.query_vectors(**params)
        metric = response.get("distanceMetric", "cosine")

        chunks = []
        for match in response.get("vectors", []):
            metadata = match.get("metadata") or {}
            chunks.append(
                RetrievedChunk(
                    text=str(metadata.get(self._text_field, "")),
                    score=distance_to_score(float(match.get("distance", 0.0)), metric),
                    metadata_filename=str(metadata.get(self._filename_field, "")),
                )
            )

        # query_vectors returns matches nearest first; keep that order
        return chunks[:top_k]

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
            namespace: Index name within the bucket
            metadata_filter: Metadata equality filter, e.g. {"filename": "EPA-2024-001"}

        Returns:
            list[RetrievedChunk]: Matches by descending score (may be empty)

        Raises:
            VectorStoreError: If the S3 Vectors call fails
        """
        try:
            chunks = await run_in_threadpool(
                self._query_sync, vector, top_k, namespace, metadata_filter
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(
                "S3 Vectors query failed",
                namespace=namespace,
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        logger.info(
            f"{__name__}:query - Found {len(chunks)} results",
            extra={"namespace": namespace, "top_k": top_k},
        )
        return chunks
