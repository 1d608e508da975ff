"""Copy operations: member intersection, scalar copy, and shallow clone."""

from memberwise.sync.copier import (
    InstantiationError,
    clone_object,
    copy_data_members,
    copy_fields,
    copy_properties,
    sync_object,
)
from memberwise.sync.intersect import MemberPair, intersect_accessors, intersect_fields

__all__ = [
    # Intersection
    "MemberPair",
    "intersect_fields",
    "intersect_accessors",
    # Copier
    "copy_fields",
    "copy_properties",
    "copy_data_members",
    "sync_object",
    "clone_object",
    "InstantiationError",
]
