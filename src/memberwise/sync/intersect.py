"""Member intersection between two objects.

Pure functions over cached metadata: which members exist on both sides of a
copy or compare. Results follow the source side's member order.
"""

from __future__ import annotations

from typing import Any

from memberwise.core.member import MemberDescriptor
from memberwise.metadata import TypeMetadataCache, get_cache

type MemberPair = tuple[MemberDescriptor, MemberDescriptor]
"""(source member, destination member) sharing one name."""


def intersect_fields(
    source: Any, dest: Any, cache: TypeMetadataCache | None = None
) -> list[MemberPair]:
    """Get fields present on both the source and destination types.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cache: Metadata cache (defaults to the process-wide cache).

    Returns:
        Pairs of matching field descriptors in source order.
    """
    cache = cache or get_cache()
    dest_fields = {f.name: f for f in cache.fields(type(dest))}
    return [(f, dest_fields[f.name]) for f in cache.fields(type(source)) if f.name in dest_fields]


def intersect_accessors(
    source: Any, dest: Any, cache: TypeMetadataCache | None = None
) -> list[MemberPair]:
    """Get marked properties readable on the source and writable on the destination.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cache: Metadata cache (defaults to the process-wide cache).

    Returns:
        Pairs of matching accessor descriptors in source order.
    """
    cache = cache or get_cache()
    dest_writable = {a.name: a for a in cache.writable_accessors(type(dest))}
    return [
        (a, dest_writable[a.name])
        for a in cache.readable_accessors(type(source))
        if a.name in dest_writable
    ]
