"""Member classifier.

Maps one member descriptor to exactly one member group:
1. Annotation overrides (first matching rule wins, exclusive)
2. Kind + visibility
3. Groups absent from the configured order are excluded (None)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.domain.model import member_group as groups
from memberorder.domain.model.annotation_rule import ANNOTATION_RULES, match_annotation
from memberorder.domain.model.enums import MemberKind

if TYPE_CHECKING:
    from memberorder.domain.model.annotation_rule import AnnotationRule
    from memberorder.domain.model.group_order import GroupOrder
    from memberorder.domain.model.member import MemberDescriptor
    from memberorder.domain.model.member_group import MemberGroup

# kind → (public group, private group)
_GROUPS_BY_KIND: dict[MemberKind, tuple[MemberGroup, MemberGroup]] = {
    MemberKind.FIELD: (groups.PUBLIC_FIELDS, groups.PRIVATE_FIELDS),
    MemberKind.CONSTRUCTOR: (groups.CONSTRUCTORS, groups.CONSTRUCTORS),
    MemberKind.GETTER: (groups.PUBLIC_GETTERS, groups.PRIVATE_GETTERS),
    MemberKind.SETTER: (groups.PUBLIC_SETTERS, groups.PRIVATE_SETTERS),
    MemberKind.METHOD: (groups.PUBLIC_METHODS, groups.PRIVATE_METHODS),
}


def member_group(
    member: MemberDescriptor,
    rules: tuple[AnnotationRule, ...] = ANNOTATION_RULES,
) -> MemberGroup:
    """Group of a member, ignoring the configured order.

    Args:
        member: Member to classify
        rules: Annotation rules in priority order

    Returns:
        The member's group
    """
    rule = match_annotation(member.annotations, rules)
    if rule is not None:
        return rule.group

    public, private = _GROUPS_BY_KIND[member.kind]
    return private if member.is_private else public


def classify(
    member: MemberDescriptor,
    order: GroupOrder,
    rules: tuple[AnnotationRule, ...] = ANNOTATION_RULES,
) -> MemberGroup | None:
    """Classify member for checking against the configured order.

    An annotation match decides the group even when that group is
    excluded; the member is then skipped, not reclassified by kind.

    Args:
        member: Member to classify
        order: Configured group order
        rules: Annotation rules in priority order

    Returns:
        Member group, None if the group is excluded from checking
    """
    group = member_group(member, rules)
    return group if group in order else None
