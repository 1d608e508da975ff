"""Type metadata cache: memoized member views per type."""

from memberwise.metadata.cache import MetadataView, TypeMetadataCache, get_cache

__all__ = [
    "MetadataView",
    "TypeMetadataCache",
    "get_cache",
]
