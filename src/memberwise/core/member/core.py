"""Data-member marking and type introspection.

Usage:
    @dataclass
    class Person:
        _name: str = ""

        @data_member
        def name(self) -> str:
            return self._name

        @name.setter
        def name(self, value: str) -> None:
            self._name = value

    # Or with an allow-list of plain properties:
    class Legacy:
        __data_members__ = ("title",)

        @property
        def title(self) -> str: ...
"""

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Callable, Iterator
from dataclasses import fields as dataclass_fields
from dataclasses import is_dataclass
from typing import Any, ClassVar, get_origin

from memberwise.core.member.models import DataMember, MemberDescriptor, MemberKind

logger = logging.getLogger(__name__)

_IMPLICIT_SLOTS = frozenset({"__dict__", "__weakref__"})


def data_member(fget: Callable[[Any], Any]) -> DataMember:
    """Declare a property that takes part in property copy and compare.

    Use exactly like ``@property``; add a setter with ``@name.setter``.

    Args:
        fget: Getter function.

    Returns:
        A DataMember property.
    """
    return DataMember(fget)


def is_marked_data_member(owner: type, name: str, attr: Any) -> bool:
    """Check if a class attribute is marked as a data member.

    A property is marked when it is a DataMember, or when its name appears in
    the ``__data_members__`` allow-list visible from its owner class.

    Args:
        owner: Class whose ``__dict__`` holds the attribute.
        name: Attribute name.
        attr: The attribute itself.

    Returns:
        True if the attribute is a marked property, False otherwise.
    """
    if not isinstance(attr, property):
        return False
    if getattr(attr, "__data_member__", False):
        return True
    return name in getattr(owner, "__data_members__", ())


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic."""
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _resolve_annotation(hint: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    """Evaluate one string annotation; keep the string if it cannot be resolved.

    An unresolved annotation stays a string and never passes the known-type
    filter, without affecting its sibling annotations.
    """
    if not isinstance(hint, str):
        return hint
    try:
        return eval(hint, globalns, localns)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError) as e:
        logger.debug("Could not resolve annotation %r: %s", hint, e)
        return hint


def _class_hints(cls: type) -> dict[str, Any]:
    """Resolve instance annotations name by name, base classes first.

    Each class in the MRO is evaluated against its own module globals.
    """
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        module = sys.modules.get(klass.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(klass))
        for name, hint in inspect.get_annotations(klass).items():
            hints[name] = _resolve_annotation(hint, globalns, localns)
    return hints


def _function_hints(fn: Callable[..., Any]) -> dict[str, Any]:
    """Resolve a function's annotations name by name."""
    globalns = getattr(inspect.unwrap(fn), "__globals__", {})
    return {
        name: _resolve_annotation(hint, globalns, {})
        for name, hint in inspect.get_annotations(fn).items()
    }


def _declaring_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass) or name in _own_slots(klass):
            return klass
    return cls


def _own_slots(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(s for s in slots if s not in _IMPLICIT_SLOTS)


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    return hint is ClassVar or get_origin(hint) is ClassVar


def _iter_fields(cls: type) -> Iterator[tuple[str, Any, bool]]:
    """Yield (name, declared_type, writable) for every instance field."""
    if _is_pydantic(cls):
        # Pydantic has already resolved the annotations
        model_frozen = bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
        for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
            yield name, info.annotation, not (model_frozen or info.frozen)
        return

    hints = _class_hints(cls)

    if is_dataclass(cls):
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
        for f in dataclass_fields(cls):
            yield f.name, hints.get(f.name, f.type), not frozen
        return

    seen: set[str] = set()
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        names = list(_own_slots(klass)) + list(inspect.get_annotations(klass))
        for name in names:
            if name in seen or _is_class_var(hints.get(name)):
                continue
            if isinstance(inspect.getattr_static(cls, name, None), property):
                continue
            seen.add(name)
            yield name, hints.get(name, Any), True


def inspect_fields(cls: type, *, include_non_public: bool = True) -> tuple[MemberDescriptor, ...]:
    """Introspect all instance fields of a class.

    Fields are not filtered by marking. Order is declaration order, base
    classes first.

    Args:
        cls: Class to inspect.
        include_non_public: If False, underscore-prefixed fields are left out.

    Returns:
        Field descriptors.
    """
    return tuple(
        MemberDescriptor(
            name=name,
            declared_type=declared_type,
            kind=MemberKind.FIELD,
            readable=True,
            writable=writable,
            marked=False,
            owner=_declaring_class(cls, name),
        )
        for name, declared_type, writable in _iter_fields(cls)
        if include_non_public or not name.startswith("_")
    )


def _accessor_type(prop: property) -> Any:
    """Declared type of a property: getter return, else setter value annotation."""
    if prop.fget is not None:
        hint = _function_hints(prop.fget).get("return")
        if hint is not None:
            return hint
    if prop.fset is not None:
        hints = _function_hints(prop.fset)
        params = list(inspect.signature(prop.fset).parameters)
        if len(params) >= 2 and params[1] in hints:
            return hints[params[1]]
    return Any


def inspect_accessors(
    cls: type,
    *,
    declared_only: bool = False,
    include_non_public: bool = True,
) -> tuple[MemberDescriptor, ...]:
    """Introspect all properties of a class.

    The most-derived definition of a name wins. Order follows the MRO,
    most-derived class first.

    Args:
        cls: Class to inspect.
        declared_only: If True, only properties defined in ``cls.__dict__``.
        include_non_public: If False, underscore-prefixed properties are left out.

    Returns:
        Accessor descriptors, marked and unmarked.
    """
    classes = (cls,) if declared_only else cls.__mro__
    shadowed: set[str] = set()
    descriptors: list[MemberDescriptor] = []
    for klass in classes:
        for name, attr in vars(klass).items():
            if name in shadowed:
                continue
            shadowed.add(name)
            if not isinstance(attr, property):
                continue
            if not include_non_public and name.startswith("_"):
                continue
            descriptors.append(
                MemberDescriptor(
                    name=name,
                    declared_type=_accessor_type(attr),
                    kind=MemberKind.ACCESSOR,
                    readable=attr.fget is not None,
                    writable=attr.fset is not None,
                    marked=is_marked_data_member(klass, name, attr),
                    owner=klass,
                )
            )
    return tuple(descriptors)
