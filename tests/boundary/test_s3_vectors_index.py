"""
Test suite for S3VectorsIndex.

Uses a mocked boto3 s3vectors client passed through the constructor.

System role: Verification of production vector index client
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from regchat.boundary.vdb.s3_vectors_index import S3VectorsIndex, distance_to_score
from regchat.core.exceptions import VectorStoreError


@pytest.fixture
def mock_client() -> MagicMock:
    """s3vectors client returning two matches."""
    client = MagicMock()
    client.query_vectors.return_value = {
        "distanceMetric": "cosine",
        "vectors": [
            {
                "key": "EPA-2024-001#0",
                "distance": 0.11,
                "metadata": {"text": "Comments are due May 1.", "filename": "EPA-2024-001"},
            },
            {
                "key": "EPA-2024-001#4",
                "distance": 0.30,
                "metadata": {"text": "Docket EPA-HQ-OAR-2024.", "filename": "EPA-2024-001"},
            },
        ],
    }
    return client


@pytest.fixture
def index(mock_client) -> S3VectorsIndex:
    return S3VectorsIndex(vectors_bucket="test-vectors", client=mock_client)


class TestDistanceToScore:
    """Test distance conversion."""

    def test_cosine(self):
        assert distance_to_score(0.25, "cosine") == pytest.approx(0.75)

    def test_euclidean(self):
        assert distance_to_score(1.0, "euclidean") == pytest.approx(0.5)


class TestQuery:
    """Test query()."""

    async def test_request_parameters(self, index, mock_client):
        """Test namespace maps to index name and filter is forwarded."""
        await index.query([0.1, 0.2], top_k=5, namespace="federal-documents",
                          metadata_filter={"filename": "EPA-2024-001"})

        mock_client.query_vectors.assert_called_once_with(
            vectorBucketName="test-vectors",
            indexName="federal-documents",
            queryVector={"float32": [0.1, 0.2]},
            topK=5,
            returnMetadata=True,
            returnDistance=True,
            filter={"filename": "EPA-2024-001"},
        )

    async def test_no_filter_omitted(self, index, mock_client):
        await index.query([0.1], top_k=10, namespace="major-regs")

        assert "filter" not in mock_client.query_vectors.call_args.kwargs

    async def test_maps_matches(self, index):
        """Test matches become chunks with similarity scores, best first."""
        chunks = await index.query([0.1], top_k=5, namespace="federal-documents")

        assert [c.text for c in chunks] == ["Comments are due May 1.", "Docket EPA-HQ-OAR-2024."]
        assert chunks[0].score == pytest.approx(0.89)
        assert chunks[0].metadata_filename == "EPA-2024-001"

    async def test_empty(self, index, mock_client):
        """Test zero matches are a normal outcome."""
        mock_client.query_vectors.return_value = {"vectors": []}

        assert await index.query([0.1], top_k=5, namespace="major-regs") == []

    async def test_client_error(self, index, mock_client):
        """Test AWS errors become VectorStoreError with the namespace."""
        mock_client.query_vectors.side_effect = ClientError(
            {"Error": {"Code": "NotFoundException", "Message": "index missing"}},
            "QueryVectors",
        )

        with pytest.raises(VectorStoreError) as exc_info:
            await index.query([0.1], top_k=5, namespace="major-regs")

        assert exc_info.value.details["namespace"] == "major-regs"
        assert exc_info.value.details["error_type"] == "ClientError"

    async def test_keeps_service_order(self, index, mock_client):
        """Test matches are returned in the order the service ranked them."""
        mock_client.query_vectors.return_value = {
            "distanceMetric": "cosine",
            "vectors": [
                {"key": "b", "distance": 0.40, "metadata": {"text": "second", "filename": "B"}},
                {"key": "a", "distance": 0.10, "metadata": {"text": "first", "filename": "A"}},
            ],
        }

        chunks = await index.query([0.1], top_k=5, namespace="federal-documents")

        assert [c.text for c in chunks] == ["second", "first"]
