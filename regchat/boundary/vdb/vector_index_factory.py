"""
Vector index factory for selecting between FAISS (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.

Dependencies: regchat.boundary.vdb, regchat.configs
System role: Vector index instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from regchat.boundary.vdb.faiss_index import FAISSIndex
from regchat.boundary.vdb.s3_vectors_index import S3VectorsIndex
from regchat.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def get_vector_index(
    settings: VectorStoreSettings,
    embeddings: Embeddings | None = None,
) -> FAISSIndex | S3VectorsIndex:
    """
    Build the vector index client selected by configuration.

    Args:
        settings: Vector store settings
        embeddings: LangChain embeddings, required to load FAISS indexes

    Returns:
        FAISSIndex or S3VectorsIndex: Configured vector index client

    Raises:
        ValueError: If store_type is invalid or FAISS is selected without embeddings
    """
    store_type = settings.store_type.lower()

    if store_type == "faiss":
        if embeddings is None:
            raise ValueError("FAISS vector index requires an embeddings instance")
        logger.info(f"{__name__}:get_vector_index - Creating FAISS index (local dev mode)")
        return FAISSIndex(
            embeddings=embeddings,
            persist_directory=settings.faiss_directory,
            filename_field=settings.filename_field,
        )

    if store_type == "s3":
        logger.info(f"{__name__}:get_vector_index - Creating S3 Vectors index (production mode)")
        return S3VectorsIndex(
            vectors_bucket=settings.vectors_bucket,
            region=settings.aws_region,
            text_field=settings.text_field,
            filename_field=settings.filename_field,
        )

    raise ValueError(
        f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
        f"Must be 'faiss' (dev) or 's3' (production)."
    )
