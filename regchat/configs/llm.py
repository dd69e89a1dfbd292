"""
Model provider configuration settings.

Embedding and chat model identifiers for the Google Generative AI provider.

Dependencies: pydantic_settings
System role: Embedding and completion model configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Embedding and chat completion model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1536,
        description="Embedding vector dimension (must match the vector index)",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model ID",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for grounded answers",
    )
