"""Member functionality: descriptors, data-member marking, and introspection."""

from memberwise.core.member.core import (
    data_member,
    inspect_accessors,
    inspect_fields,
    is_marked_data_member,
)
from memberwise.core.member.models import DataMember, MemberDescriptor, MemberKind

__all__ = [
    # Models
    "MemberDescriptor",
    "MemberKind",
    "DataMember",
    # Core
    "data_member",
    "is_marked_data_member",
    "inspect_fields",
    "inspect_accessors",
]
