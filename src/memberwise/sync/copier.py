"""Member-wise copy between objects.

Usage:
    @dataclass
    class PersonView:
        name: str = ""
        age: int = 0
        tags: list[str] = field(default_factory=list)

    @dataclass
    class PersonRecord:
        name: str = ""
        age: int = 0

    copy_fields(PersonView("Ann", 31, ["x"]), record)  # copies name and age only
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from memberwise.core.member import inspect_accessors
from memberwise.metadata import TypeMetadataCache, get_cache
from memberwise.sync.intersect import intersect_accessors, intersect_fields

logger = logging.getLogger(__name__)

_MISSING = object()


class InstantiationError(TypeError):
    """Raised when a clone target cannot be constructed without arguments."""


def copy_fields(source: Any, dest: Any, cache: TypeMetadataCache | None = None) -> None:
    """Copy known-type fields that exist on both objects.

    Fields of unknown type (collections, nested objects), fields missing on
    either side, read-only destination fields and unset slots are skipped.
    Fields are dataclass and Pydantic fields, slots and class-level
    annotations; attributes only assigned in ``__init__`` are not found, so
    expose those as data-member properties and use copy_properties.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cache: Metadata cache (defaults to the process-wide cache).
    """
    cache = cache or get_cache()
    for src, dst in intersect_fields(source, dest, cache):
        if not cache.is_known(src):
            continue
        if not dst.writable:
            logger.debug("Skipping read-only field %s.%s", type(dest).__qualname__, dst.name)
            continue
        value = getattr(source, src.name, _MISSING)
        if value is _MISSING:
            continue
        setattr(dest, dst.name, value)


def copy_properties(source: Any, dest: Any, cache: TypeMetadataCache | None = None) -> None:
    """Copy known-type data-member properties that exist on both objects.

    Only properties marked as data members take part: readable on the source
    and writable on the destination.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cache: Metadata cache (defaults to the process-wide cache).
    """
    cache = cache or get_cache()
    for src, dst in intersect_accessors(source, dest, cache):
        if not cache.is_known(src):
            continue
        setattr(dest, dst.name, getattr(source, src.name))


def sync_object(source: Any, dest: Any, cache: TypeMetadataCache | None = None) -> None:
    """Copy known-type fields, then known-type data-member properties.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cache: Metadata cache (defaults to the process-wide cache).
    """
    cache = cache or get_cache()
    copy_fields(source, dest, cache)
    copy_properties(source, dest, cache)


def copy_data_members[T](
    source: T,
    dest: T,
    cls: type[T] | None = None,
    cache: TypeMetadataCache | None = None,
) -> None:
    """Copy data-member properties declared on one type.

    Only read/write data members declared directly on ``cls`` are copied;
    inherited properties and fields are not. No known-type filtering is
    applied.

    Args:
        source: Object to read from.
        dest: Object to write to.
        cls: Type whose own data members are copied. Defaults to type(source).
        cache: Metadata cache (defaults to the process-wide cache).

    Raises:
        TypeError: If source or dest is not an instance of cls.
    """
    cache = cache or get_cache()
    cls = cls if cls is not None else type(source)
    for obj in (source, dest):
        if not isinstance(obj, cls):
            raise TypeError(
                f"copy_data_members requires {cls.__qualname__} instances, "
                f"got {type(obj).__qualname__}"
            )
    for member in cache.own_data_members(cls):
        setattr(dest, member.name, getattr(source, member.name))


def clone_object[T](
    source: T,
    factory: Callable[[], T] | None = None,
    cache: TypeMetadataCache | None = None,
) -> T:
    """Create a shallow copy by constructing a new instance and copying members.

    Every writable field and every public property with a getter and setter
    is copied, whatever its type. Member values are shared, not copied.
    Read-only members (frozen dataclass fields, properties without a setter)
    keep the value the factory gave them.

    Args:
        source: Object to clone.
        factory: Zero-argument callable making the new instance.
            Defaults to the exact runtime type of source.
        cache: Metadata cache (defaults to the process-wide cache).

    Returns:
        New instance holding the same member values.

    Raises:
        InstantiationError: If the new instance cannot be made without arguments.
    """
    cache = cache or get_cache()
    cls = type(source)
    make = factory if factory is not None else cls
    try:
        clone = make()
    except (TypeError, ValueError) as e:
        raise InstantiationError(
            f"Cannot construct {cls.__qualname__} without arguments: {e}"
        ) from e

    for member in cache.fields(cls):
        if not member.writable:
            continue
        value = getattr(source, member.name, _MISSING)
        if value is not _MISSING:
            setattr(clone, member.name, value)

    for member in inspect_accessors(cls, include_non_public=False):
        if member.readable and member.writable:
            setattr(clone, member.name, getattr(source, member.name))

    logger.debug("Cloned %s", cls.__qualname__)
    return clone
