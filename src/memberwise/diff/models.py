"""Change classification models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class ChangeState(Enum):
    """How a value or object changed between an old and a new instance."""

    UNCHANGED = auto()
    ADDED = auto()  # Was empty, now has a value
    MODIFIED = auto()
    DELETED = auto()  # Had a value, now empty


@dataclass(slots=True, frozen=True)
class ChangeRecord:
    """Classification of one compared member.

    Attributes:
        name: Member name.
        declared_type: Declared type the values were judged by.
        old_value: Value on the old instance.
        new_value: Value on the new instance.
        state: Resulting classification.
    """

    name: str
    declared_type: Any
    old_value: Any
    new_value: Any
    state: ChangeState

    @property
    def changed(self) -> bool:
        """Check if the member is anything other than UNCHANGED."""
        return self.state is not ChangeState.UNCHANGED
