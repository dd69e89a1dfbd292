"""Vector index adapters."""

from regchat.boundary.vdb.vector_index import VectorIndex
from regchat.boundary.vdb.vector_index_factory import get_vector_index

__all__ = ["VectorIndex", "get_vector_index"]
