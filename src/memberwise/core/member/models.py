"""Member models: descriptors and the data-member property type.

A member is either a field (an instance data attribute: dataclass field,
Pydantic field, slot or annotated attribute) or an accessor (a property).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class MemberKind(Enum):
    """How a member stores its value."""

    FIELD = auto()  # Instance data attribute
    ACCESSOR = auto()  # Property with getter and/or setter


@dataclass(slots=True, frozen=True)
class MemberDescriptor:
    """Cached metadata about one inspectable member of a type.

    Attributes:
        name: Attribute name, unique within one inspected view.
        declared_type: Resolved annotation (or the raw annotation if unresolved).
        kind: Field or accessor.
        readable: True if the member can be read.
        writable: True if the member can be assigned.
        marked: True if the member is explicitly tagged as a data member.
        owner: Class that declares the member.
    """

    name: str
    declared_type: Any
    kind: MemberKind
    readable: bool
    writable: bool
    marked: bool
    owner: type

    @property
    def is_public(self) -> bool:
        """Check if the member name has no leading underscore."""
        return not self.name.startswith("_")


class DataMember(property):
    """Property explicitly marked as a data member.

    Behaves exactly like ``property``; ``.setter`` and ``.deleter`` keep the
    subclass, so the mark survives adding a setter.
    """

    __data_member__ = True
