"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, accepting either form on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Uniform error envelope returned for every failed request."""

    error: str = Field(description="Error message")
    details: Any | None = Field(default=None, description="Raw error context (development only)")


class ErrorInfo(BaseModel):
    """Error description returned by collaborators that report instead of raising."""

    message: str
    code: str | None = None
    details: Any | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    items: list[T]
    total: int
