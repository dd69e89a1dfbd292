"""
Vector store configuration settings.

Manages the vector index backend (S3 Vectors in production, FAISS for local
development), the namespaces each chat variant searches, and retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector index configuration (FAISS for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector store type: 'faiss' for local dev, 's3' for production",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    vectors_bucket: str = Field(
        default="regcompliance-vectors",
        description="S3 Vectors bucket holding one index per namespace",
    )
    faiss_directory: str = Field(
        default=".faiss_index",
        description="Local directory holding one FAISS index per namespace",
    )

    document_namespace: str = Field(
        default="federal-documents",
        description="Namespace with chunks of individual federal documents",
    )
    regulation_namespace: str = Field(
        default="major-regs",
        description="Namespace with the general regulation knowledge base",
    )
    document_top_k: int = Field(default=5, ge=1, description="Matches requested for document chat")
    regulation_top_k: int = Field(default=10, ge=1, description="Matches requested for regulation chat")

    filename_field: str = Field(
        default="filename",
        description="Chunk metadata key equated to the document id in document chat",
    )
    text_field: str = Field(
        default="text",
        description="Chunk metadata key holding the chunk text",
    )
