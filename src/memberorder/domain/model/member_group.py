"""Member group taxonomy.

Closed set of buckets a class member can be classified into.
Groups are identified by key; their rank comes from the configured
GroupOrder, not from the order of definition here.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class MemberGroup:
    """One member group of the taxonomy.

    Attributes:
        key: Stable identifier used in configuration and messages
    """

    key: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("group key must not be empty")

    def __str__(self) -> str:
        return self.key


# Generic
PUBLIC_FIELDS = MemberGroup("public_fields")
PRIVATE_FIELDS = MemberGroup("private_fields")
PUBLIC_GETTERS = MemberGroup("public_getters")
PRIVATE_GETTERS = MemberGroup("private_getters")
PUBLIC_SETTERS = MemberGroup("public_setters")
PRIVATE_SETTERS = MemberGroup("private_setters")
CONSTRUCTORS = MemberGroup("constructors")
PUBLIC_METHODS = MemberGroup("public_methods")
PRIVATE_METHODS = MemberGroup("private_methods")

# Angular
ANGULAR_INPUTS = MemberGroup("angular_inputs")
ANGULAR_OUTPUTS = MemberGroup("angular_outputs")
ANGULAR_HOST_BINDINGS = MemberGroup("angular_host_bindings")
ANGULAR_HOST_LISTENERS = MemberGroup("angular_host_listeners")
ANGULAR_VIEW_CHILDREN = MemberGroup("angular_view_children")
ANGULAR_CONTENT_CHILDREN = MemberGroup("angular_content_children")

DEFAULT_GROUPS: tuple[MemberGroup, ...] = (
    PUBLIC_FIELDS,
    PRIVATE_FIELDS,
    PUBLIC_GETTERS,
    PRIVATE_GETTERS,
    PUBLIC_SETTERS,
    PRIVATE_SETTERS,
    CONSTRUCTORS,
    PUBLIC_METHODS,
    PRIVATE_METHODS,
)

FRAMEWORK_GROUPS: tuple[MemberGroup, ...] = (
    ANGULAR_INPUTS,
    ANGULAR_OUTPUTS,
    ANGULAR_HOST_BINDINGS,
    ANGULAR_HOST_LISTENERS,
    ANGULAR_VIEW_CHILDREN,
    ANGULAR_CONTENT_CHILDREN,
)

ALL_GROUPS: tuple[MemberGroup, ...] = DEFAULT_GROUPS + FRAMEWORK_GROUPS

_GROUPS_BY_KEY: MappingProxyType[str, MemberGroup] = MappingProxyType(
    {group.key: group for group in ALL_GROUPS}
)

# Framework groups may also be spelled without their prefix ("inputs")
_FRAMEWORK_PREFIX = "angular_"


def parse_group(key: str) -> MemberGroup | None:
    """Look up a built-in group by configuration key.

    Accepts "-" in place of "_" and framework keys without
    the "angular_" prefix.

    Args:
        key: Configuration key (e.g. "public_fields", "host-bindings")

    Returns:
        Matching MemberGroup, None if the key is unknown
    """
    normalized = key.strip().replace("-", "_")
    group = _GROUPS_BY_KEY.get(normalized)
    if group is None:
        group = _GROUPS_BY_KEY.get(_FRAMEWORK_PREFIX + normalized)
    return group
