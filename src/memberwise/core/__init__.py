"""Core functionalities: stateless primitives for members and known types.

Architecture Note:
    core/ contains pure, stateless functionalities: type predicates,
    member descriptors and introspection. For the cached metadata service,
    see metadata/; for copy and compare operations, see sync/ and diff/.
"""

from memberwise.core.member import (
    DataMember,
    MemberDescriptor,
    MemberKind,
    data_member,
    inspect_accessors,
    inspect_fields,
    is_marked_data_member,
)
from memberwise.core.types import (
    NO_DEFAULT,
    canonical_default,
    is_empty,
    is_known_type,
    is_optional_type,
    register_default,
    register_known_type,
    serializable,
    unwrap_optional,
)

__all__ = [
    # Types
    "NO_DEFAULT",
    "is_known_type",
    "is_optional_type",
    "unwrap_optional",
    "serializable",
    "register_known_type",
    "register_default",
    "canonical_default",
    "is_empty",
    # Member
    "MemberDescriptor",
    "MemberKind",
    "DataMember",
    "data_member",
    "is_marked_data_member",
    "inspect_fields",
    "inspect_accessors",
]
