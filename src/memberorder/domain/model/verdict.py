"""Per-member ordering verdict."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberorder.domain.model.member import MemberDescriptor
    from memberorder.domain.model.member_group import MemberGroup


@dataclass(frozen=True, slots=True)
class MemberOrderVerdict:
    """Ordering decision for one checked member.

    Attributes:
        member: Member the verdict is about
        group: Group the member was classified into
        is_wrong: Member appears after a group that must follow it
        is_alphabetically_wrong: Name does not sort strictly after the
            previous member of the same group
        previous_group: Group to cite as "should be before"; inherited
            through runs of the same group
        name: Member sort key
        previous_name: Sort key of the immediately preceding checked member
    """

    member: MemberDescriptor
    group: MemberGroup
    is_wrong: bool = False
    is_alphabetically_wrong: bool = False
    previous_group: MemberGroup | None = None
    name: str = ""
    previous_name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.is_wrong and self.previous_group is None:
            raise ValueError("is_wrong=True requires previous_group")
        if self.is_alphabetically_wrong and self.previous_name is None:
            raise ValueError("is_alphabetically_wrong=True requires previous_name")
