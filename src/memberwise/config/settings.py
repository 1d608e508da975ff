"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
type metadata cache.

Usage:
    from memberwise.config import MetadataSettings

    # Load from environment variables (MEMBERWISE_*)
    settings = MetadataSettings()

    # Or override with explicit values
    settings = MetadataSettings(include_non_public=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class MetadataSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for member introspection and filtering.

    Attributes:
        include_non_public: Inspect underscore-prefixed fields and properties.
        unwrap_optional: Judge ``Optional[X]`` members by X when filtering
            for known types. If False, optional members are never copied or
            compared.

    Environment Variables:
        MEMBERWISE_INCLUDE_NON_PUBLIC
        MEMBERWISE_UNWRAP_OPTIONAL
    """

    model_config = SettingsConfigDict(
        env_prefix="MEMBERWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    include_non_public: bool = True
    unwrap_optional: bool = True
