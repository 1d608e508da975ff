"""Configuration module using Pydantic Settings.

Usage:
    from memberwise.config import MetadataSettings

    settings = MetadataSettings(include_non_public=False)
"""

from memberwise.config.settings import MetadataSettings

__all__ = [
    "MetadataSettings",
]
