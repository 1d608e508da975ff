"""Cached per-type member metadata.

Each type's members are introspected once per view and kept for the lifetime
of the cache. Four views are cached independently, each behind its own lock:

    fields              all instance fields, public and non-public
    readable_accessors  marked properties with a getter
    writable_accessors  marked properties with a setter
    own_data_members    marked read/write properties declared on the type itself

Usage:
    cache = get_cache()
    for member in cache.fields(Person):
        print(member.name, member.declared_type)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum

from memberwise.config import MetadataSettings
from memberwise.core.member import MemberDescriptor, inspect_accessors, inspect_fields
from memberwise.core.types import is_known_type

logger = logging.getLogger(__name__)


class MetadataView(Enum):
    """The four independently cached member views."""

    FIELDS = "fields"
    READABLE_ACCESSORS = "readable_accessors"
    WRITABLE_ACCESSORS = "writable_accessors"
    OWN_DATA_MEMBERS = "own_data_members"


class _ViewCache:
    """Compute-once mapping from type to a tuple of member descriptors."""

    __slots__ = ("_view", "_compute", "_entries", "_lock", "_populations")

    def __init__(
        self,
        view: MetadataView,
        compute: Callable[[type], tuple[MemberDescriptor, ...]],
    ) -> None:
        self._view = view
        self._compute = compute
        self._entries: dict[type, tuple[MemberDescriptor, ...]] = {}
        self._lock = threading.Lock()
        self._populations = 0

    def get(self, cls: type) -> tuple[MemberDescriptor, ...]:
        entry = self._entries.get(cls)
        if entry is not None:
            return entry
        with self._lock:
            entry = self._entries.get(cls)
            if entry is None:
                entry = self._entries.setdefault(cls, self._compute(cls))
                self._populations += 1
                logger.debug(
                    "Cached %d %s for %s", len(entry), self._view.value, cls.__qualname__
                )
        return entry

    @property
    def populations(self) -> int:
        return self._populations


class TypeMetadataCache:
    """Lazily populated, thread-safe member metadata keyed by type.

    Entries are never invalidated: the first computed descriptor tuple for a
    type is returned for every later lookup. Lookups of cached types take no
    lock.

    Args:
        settings: Introspection settings. Defaults to MetadataSettings().
    """

    def __init__(self, settings: MetadataSettings | None = None) -> None:
        """Initialize empty metadata views.

        Args:
            settings: Introspection settings (loaded from environment if None).
        """
        self._settings = settings if settings is not None else MetadataSettings()
        self._views = {
            MetadataView.FIELDS: _ViewCache(MetadataView.FIELDS, self._inspect_fields),
            MetadataView.READABLE_ACCESSORS: _ViewCache(
                MetadataView.READABLE_ACCESSORS, self._inspect_readable
            ),
            MetadataView.WRITABLE_ACCESSORS: _ViewCache(
                MetadataView.WRITABLE_ACCESSORS, self._inspect_writable
            ),
            MetadataView.OWN_DATA_MEMBERS: _ViewCache(
                MetadataView.OWN_DATA_MEMBERS, self._inspect_own_data_members
            ),
        }

    @property
    def settings(self) -> MetadataSettings:
        """Settings this cache introspects with."""
        return self._settings

    def _inspect_fields(self, cls: type) -> tuple[MemberDescriptor, ...]:
        return inspect_fields(cls, include_non_public=self._settings.include_non_public)

    def _marked_accessors(
        self, cls: type, *, declared_only: bool = False
    ) -> tuple[MemberDescriptor, ...]:
        accessors = inspect_accessors(
            cls,
            declared_only=declared_only,
            include_non_public=self._settings.include_non_public,
        )
        return tuple(a for a in accessors if a.marked)

    def _inspect_readable(self, cls: type) -> tuple[MemberDescriptor, ...]:
        return tuple(a for a in self._marked_accessors(cls) if a.readable)

    def _inspect_writable(self, cls: type) -> tuple[MemberDescriptor, ...]:
        return tuple(a for a in self._marked_accessors(cls) if a.writable)

    def _inspect_own_data_members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        return tuple(
            a
            for a in self._marked_accessors(cls, declared_only=True)
            if a.readable and a.writable
        )

    def fields(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """Get all instance fields of a type, unfiltered by marking."""
        return self._views[MetadataView.FIELDS].get(cls)

    def readable_accessors(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """Get marked properties of a type that can be read."""
        return self._views[MetadataView.READABLE_ACCESSORS].get(cls)

    def writable_accessors(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """Get marked properties of a type that can be assigned."""
        return self._views[MetadataView.WRITABLE_ACCESSORS].get(cls)

    def own_data_members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """Get marked read/write properties declared directly on a type.

        Inherited properties are excluded.
        """
        return self._views[MetadataView.OWN_DATA_MEMBERS].get(cls)

    def is_known(self, member: MemberDescriptor) -> bool:
        """Check if a member's declared type passes the known-type filter.

        Args:
            member: Member to check.

        Returns:
            True if the member may be copied or compared.
        """
        return is_known_type(member.declared_type, unwrap=self._settings.unwrap_optional)

    def population_count(self, view: MetadataView) -> int:
        """Count how many types have been introspected for a view.

        Args:
            view: View to report on.

        Returns:
            Number of cache misses that triggered introspection.
        """
        return self._views[view].populations


# Module-level cache instance, created on first use so settings are read late
_cache: TypeMetadataCache | None = None
_cache_lock = threading.Lock()


def get_cache() -> TypeMetadataCache:
    """Access the process-wide metadata cache.

    Returns:
        The shared TypeMetadataCache instance.
    """
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                _cache = TypeMetadataCache()
    return _cache
