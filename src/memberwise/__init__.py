"""memberwise: member-wise copy and change classification between objects.

Usage:
    from memberwise import ChangeState, classify_object_pair, copy_fields

    @dataclass
    class PersonForm:
        name: str = ""
        age: int = 0
        notes: list[str] = field(default_factory=list)

    @dataclass
    class PersonRecord:
        name: str = ""
        age: int = 0

    record = PersonRecord()
    copy_fields(PersonForm("Bob", 30), record)   # notes is not a known type

    classify_object_pair(PersonRecord(), record)  # ChangeState.ADDED
"""

__version__ = "0.1.0"

# Core primitives
from memberwise.core import (
    DataMember,
    MemberDescriptor,
    MemberKind,
    canonical_default,
    data_member,
    is_empty,
    is_known_type,
    register_default,
    register_known_type,
    serializable,
)

# Configuration
from memberwise.config import MetadataSettings

# Change classification
from memberwise.diff import (
    ChangeRecord,
    ChangeState,
    aggregate_states,
    classify_object_pair,
    classify_value,
    compare_members,
)

# Metadata
from memberwise.metadata import MetadataView, TypeMetadataCache, get_cache

# Copy
from memberwise.sync import (
    InstantiationError,
    clone_object,
    copy_data_members,
    copy_fields,
    copy_properties,
    sync_object,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "data_member",
    "DataMember",
    "MemberDescriptor",
    "MemberKind",
    "serializable",
    "is_known_type",
    "register_known_type",
    "register_default",
    "canonical_default",
    "is_empty",
    # Config
    "MetadataSettings",
    # Metadata
    "TypeMetadataCache",
    "MetadataView",
    "get_cache",
    # Copy
    "copy_fields",
    "copy_properties",
    "copy_data_members",
    "sync_object",
    "clone_object",
    "InstantiationError",
    # Diff
    "ChangeState",
    "ChangeRecord",
    "classify_value",
    "compare_members",
    "aggregate_states",
    "classify_object_pair",
]
