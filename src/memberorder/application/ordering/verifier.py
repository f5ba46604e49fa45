"""Sequence verifier.

Single left-to-right pass over one class body. The only carried state
is the verdict of the previous checked member, so every call starts
clean and calls for different classes are independent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.application.ordering.classifier import classify
from memberorder.domain.model.annotation_rule import ANNOTATION_RULES
from memberorder.domain.model.verdict import MemberOrderVerdict

if TYPE_CHECKING:
    from collections.abc import Iterable

    from memberorder.domain.model.annotation_rule import AnnotationRule
    from memberorder.domain.model.group_order import GroupOrder
    from memberorder.domain.model.member import MemberDescriptor
    from memberorder.domain.model.member_group import MemberGroup


def verify_members(
    members: Iterable[MemberDescriptor],
    order: GroupOrder,
    alphabetize: bool = False,
    rules: tuple[AnnotationRule, ...] = ANNOTATION_RULES,
) -> tuple[MemberOrderVerdict, ...]:
    """Verify member order of one class body.

    Excluded members produce no verdict and are invisible to the
    members that follow them.

    Args:
        members: Members in source order
        order: Configured group order
        alphabetize: Also check name order inside each group
        rules: Annotation rules in priority order

    Returns:
        One verdict per checked member, in source order
    """
    verdicts: list[MemberOrderVerdict] = []
    previous: MemberOrderVerdict | None = None

    for member in members:
        group = classify(member, order, rules)
        if group is None:
            continue

        previous = next_verdict(previous, member, group, order, alphabetize)
        verdicts.append(previous)

    return tuple(verdicts)


def next_verdict(
    previous: MemberOrderVerdict | None,
    member: MemberDescriptor,
    group: MemberGroup,
    order: GroupOrder,
    alphabetize: bool = False,
) -> MemberOrderVerdict:
    """Compute the verdict of a member from its predecessor's verdict.

    Args:
        previous: Verdict of the preceding checked member, None at class start
        member: Member being checked
        group: Member's group (must be in order)
        order: Configured group order
        alphabetize: Check name order inside the group

    Returns:
        Verdict for member
    """
    name = member.name

    if previous is None:
        return MemberOrderVerdict(member=member, group=group, name=name)

    same_group = previous.group == group

    # A run of one group keeps citing the group that preceded the run
    previous_group = previous.previous_group if same_group else previous.group

    # Violations propagate through a same-group run
    is_wrong = (same_group and previous.is_wrong) or (
        order.rank(previous.group) > order.rank(group)
    )
    is_alphabetically_wrong = alphabetize and same_group and not name > previous.name

    return MemberOrderVerdict(
        member=member,
        group=group,
        is_wrong=is_wrong,
        is_alphabetically_wrong=is_alphabetically_wrong,
        previous_group=previous_group,
        name=name,
        previous_name=previous.name,
    )
