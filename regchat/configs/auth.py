"""
Caller identity settings.

Dependencies: pydantic_settings
System role: Identity header configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Settings for resolving the authenticated caller."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    user_header: str = Field(
        default="X-User-Id",
        description="Header carrying the user id set by the authenticating gateway",
    )
