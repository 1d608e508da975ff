"""Known-type filter and canonical defaults.

A member takes part in copy and compare only when its declared type is
"known": text, a built-in scalar, or a type declared serializable.

Usage:
    from memberwise.core.types import is_known_type, serializable

    @serializable
    class Money:
        ...

    is_known_type(int)            # True
    is_known_type(int | None)     # True
    is_known_type(list[int])      # False
    is_known_type(Money)          # True
"""

from __future__ import annotations

import datetime as dt
import enum
import logging
import threading
import types
import uuid
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Union, get_args, get_origin

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES: Final = (bool, int, float, complex, bytes)

_SERIALIZABLE_SCALARS: Final = (
    Decimal,
    Fraction,
    dt.datetime,
    dt.date,
    dt.time,
    dt.timedelta,
    uuid.UUID,
)


class _NoDefault:
    """Sentinel type for types without a canonical default value."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Final = _NoDefault()

_registry_lock = threading.Lock()
_known_types: set[type] = set()
_defaults: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
    Decimal: Decimal(0),
    Fraction: Fraction(0),
    dt.timedelta: dt.timedelta(0),
    uuid.UUID: uuid.UUID(int=0),
}


def is_optional_type(tp: Any) -> bool:
    """Check if an annotation is ``Optional[X]`` / ``X | None`` for a single X.

    Args:
        tp: Annotation to check.

    Returns:
        True if the annotation is a union of exactly one type and None.
    """
    if get_origin(tp) not in (Union, types.UnionType):
        return False
    args = get_args(tp)
    return len(args) == 2 and type(None) in args


def unwrap_optional(tp: Any) -> Any:
    """Return X for ``Optional[X]``, otherwise the annotation unchanged."""
    if is_optional_type(tp):
        return next(arg for arg in get_args(tp) if arg is not type(None))
    return tp


def serializable[C: type](cls: C) -> C:
    """Declare a class serializable so its members count as known scalars.

    Args:
        cls: Class to mark.

    Returns:
        The same class, marked with ``__serializable__ = True``.
    """
    cls.__serializable__ = True  # type: ignore[attr-defined]
    return cls


def register_known_type(tp: type) -> None:
    """Add a third-party type to the known-type set.

    Use for types you cannot decorate with ``@serializable``.

    Raises:
        TypeError: If tp is not a class.
    """
    if not isinstance(tp, type):
        raise TypeError(f"Known types must be classes, got {tp!r}")
    with _registry_lock:
        _known_types.add(tp)


def is_serializable(tp: type) -> bool:
    """Check if a class is declared serializable (explicitly or as a value scalar)."""
    if issubclass(tp, _SERIALIZABLE_SCALARS) or issubclass(tp, enum.Enum):
        return True
    if tp.__dict__.get("__serializable__", False):
        return True
    return any(issubclass(tp, known) for known in tuple(_known_types))


def is_known_type(tp: Any, *, unwrap: bool = True) -> bool:
    """Decide whether a declared type takes part in copy and compare.

    Args:
        tp: Declared type (a class or a typing annotation).
        unwrap: If True, ``Optional[X]`` is judged as X.

    Returns:
        True for text, built-in scalars, and serializable types.
    """
    if unwrap:
        tp = unwrap_optional(tp)
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return False
    return issubclass(tp, (str, *PRIMITIVE_TYPES)) or is_serializable(tp)


def register_default(tp: type, value: Any) -> None:
    """Register the canonical default ("empty") value for a type.

    Args:
        tp: Type the default belongs to.
        value: Value considered empty for tp.
    """
    with _registry_lock:
        _defaults[tp] = value


def canonical_default(tp: Any) -> Any:
    """Get the canonical default value of a type.

    Tries in order:
    1. A registered (or previously computed) default for the unwrapped type
    2. Calling the type with no arguments

    The result of step 2 is stored, so a constructor runs at most once per
    type. A failing construction means the type has no default.

    Args:
        tp: Declared type.

    Returns:
        The default value, or NO_DEFAULT when the type has none.
    """
    tp = unwrap_optional(tp)
    if not isinstance(tp, type):
        return NO_DEFAULT
    if tp in _defaults:
        return _defaults[tp]
    if issubclass(tp, enum.Enum):
        default = NO_DEFAULT
    else:
        try:
            default = tp()
        except (TypeError, ValueError) as e:
            logger.debug("No canonical default for %s: %s", tp.__qualname__, e)
            default = NO_DEFAULT
    with _registry_lock:
        return _defaults.setdefault(tp, default)


def is_empty(tp: Any, value: Any) -> bool:
    """Check if a value is absent or equal to its type's canonical default.

    Args:
        tp: Declared type of the value.
        value: Value to check.

    Returns:
        True for None, or for a value equal to canonical_default(tp).
    """
    if value is None:
        return True
    default = canonical_default(tp)
    if default is NO_DEFAULT:
        return False
    return bool(value == default)
