"""Change classification between old and new values and objects.

A value is "empty" when it is None or equal to its type's canonical default
(0, "", False, ...). Classification of one value:

    old empty  new empty  equal   state
    no         no         yes     UNCHANGED
    no         no         no      MODIFIED
    yes        no         -       ADDED
    no         yes        -       DELETED
    yes        yes        yes     UNCHANGED

Equality is value equality (``==``) for every known type.

Usage:
    classify_value(int, 0, 5)             # ChangeState.ADDED
    classify_object_pair(before, after)   # one state for the whole object
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from memberwise.core.member import MemberDescriptor, MemberKind
from memberwise.core.types import is_empty
from memberwise.diff.models import ChangeRecord, ChangeState
from memberwise.metadata import TypeMetadataCache, get_cache
from memberwise.sync.intersect import intersect_accessors, intersect_fields


def classify_value(declared_type: Any, old_value: Any, new_value: Any) -> ChangeState:
    """Classify the change from an old to a new value.

    Args:
        declared_type: Type the values are declared as; decides emptiness.
        old_value: Previous value.
        new_value: Current value.

    Returns:
        Exactly one ChangeState.
    """
    state = ChangeState.UNCHANGED
    if old_value != new_value:
        state = ChangeState.MODIFIED
    old_empty = is_empty(declared_type, old_value)
    new_empty = is_empty(declared_type, new_value)
    if old_empty and not new_empty:
        state = ChangeState.ADDED
    if new_empty and not old_empty:
        state = ChangeState.DELETED
    return state


def change_record(name: str, declared_type: Any, old_value: Any, new_value: Any) -> ChangeRecord:
    """Build the change record for one member."""
    return ChangeRecord(
        name=name,
        declared_type=declared_type,
        old_value=old_value,
        new_value=new_value,
        state=classify_value(declared_type, old_value, new_value),
    )


def compare_members(
    old: Any, new: Any, cache: TypeMetadataCache | None = None
) -> list[ChangeRecord]:
    """Classify every known-type member shared by two objects.

    Fields come first, then data-member properties, each in the old object's
    member order. Neither object is modified.

    Args:
        old: Previous instance.
        new: Current instance (same or structurally overlapping type).
        cache: Metadata cache (defaults to the process-wide cache).

    Returns:
        One ChangeRecord per compared member.
    """
    cache = cache or get_cache()
    records: list[ChangeRecord] = []
    pairs = intersect_fields(old, new, cache) + intersect_accessors(old, new, cache)
    for member, _ in pairs:
        if not cache.is_known(member):
            continue
        records.append(
            change_record(
                member.name, member.declared_type, _read(old, member), _read(new, member)
            )
        )
    return records


def _read(obj: Any, member: MemberDescriptor) -> Any:
    # Unset slots read as absent
    if member.kind is MemberKind.FIELD:
        return getattr(obj, member.name, None)
    return getattr(obj, member.name)


def aggregate_states(states: Iterable[ChangeState]) -> ChangeState:
    """Collapse member states into one object state.

    Args:
        states: Per-member states.

    Returns:
        UNCHANGED if nothing changed, the single distinct change if all
        changes agree, MODIFIED otherwise.
    """
    distinct = set(states) - {ChangeState.UNCHANGED}
    if not distinct:
        return ChangeState.UNCHANGED
    if len(distinct) == 1:
        return distinct.pop()
    return ChangeState.MODIFIED


def classify_object_pair(
    old: Any, new: Any, cache: TypeMetadataCache | None = None
) -> ChangeState:
    """Classify the change between two instances as a whole.

    Args:
        old: Previous instance.
        new: Current instance.
        cache: Metadata cache (defaults to the process-wide cache).

    Returns:
        Aggregated ChangeState over all compared members.
    """
    return aggregate_states(record.state for record in compare_members(old, new, cache))
