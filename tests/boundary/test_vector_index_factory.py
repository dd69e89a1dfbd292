"""
Test suite for vector index selection.

System role: Verification of vector index factory
"""

from unittest.mock import MagicMock, patch

import pytest

from regchat.boundary.vdb import get_vector_index
from regchat.boundary.vdb.faiss_index import FAISSIndex
from regchat.boundary.vdb.s3_vectors_index import S3VectorsIndex
from regchat.configs.vector_store import VectorStoreSettings


class TestGetVectorIndex:
    """Test get_vector_index()."""

    def test_faiss(self):
        index = get_vector_index(VectorStoreSettings(store_type="faiss"), embeddings=MagicMock())

        assert isinstance(index, FAISSIndex)

    def test_faiss_requires_embeddings(self):
        with pytest.raises(ValueError, match="requires an embeddings"):
            get_vector_index(VectorStoreSettings(store_type="faiss"))

    @patch("regchat.boundary.vdb.s3_vectors_index.boto3")
    def test_s3(self, mock_boto3):
        index = get_vector_index(VectorStoreSettings(store_type="S3", aws_region="us-west-2"))

        assert isinstance(index, S3VectorsIndex)
        mock_boto3.client.assert_called_once_with("s3vectors", region_name="us-west-2")

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid VECTOR_STORE_STORE_TYPE"):
            get_vector_index(VectorStoreSettings(store_type="pinecone"))
