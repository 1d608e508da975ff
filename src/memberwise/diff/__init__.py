"""Change classification: per-value, per-member and per-object states."""

from memberwise.diff.classifier import (
    aggregate_states,
    change_record,
    classify_object_pair,
    classify_value,
    compare_members,
)
from memberwise.diff.models import ChangeRecord, ChangeState

__all__ = [
    # Models
    "ChangeState",
    "ChangeRecord",
    # Classifier
    "classify_value",
    "change_record",
    "compare_members",
    "aggregate_states",
    "classify_object_pair",
]
