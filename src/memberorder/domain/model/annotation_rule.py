"""Annotation overrides.

A recognized marker on a member forces its group regardless of
kind and visibility. Rules are tried in priority order; the first
match wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from memberorder.domain.model.member_group import (
    ANGULAR_CONTENT_CHILDREN,
    ANGULAR_HOST_BINDINGS,
    ANGULAR_HOST_LISTENERS,
    ANGULAR_INPUTS,
    ANGULAR_OUTPUTS,
    ANGULAR_VIEW_CHILDREN,
    MemberGroup,
)


@dataclass(frozen=True, slots=True)
class AnnotationRule:
    """Maps an annotation name to a member group.

    Attributes:
        name: Annotation name as written (last dotted component)
        group: Group the annotated member belongs to
    """

    name: str
    group: MemberGroup

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")


ANNOTATION_RULES: tuple[AnnotationRule, ...] = (
    AnnotationRule("Input", ANGULAR_INPUTS),
    AnnotationRule("Output", ANGULAR_OUTPUTS),
    AnnotationRule("HostBinding", ANGULAR_HOST_BINDINGS),
    AnnotationRule("HostListener", ANGULAR_HOST_LISTENERS),
    AnnotationRule("ViewChild", ANGULAR_VIEW_CHILDREN),
    AnnotationRule("ViewChildren", ANGULAR_VIEW_CHILDREN),
    AnnotationRule("ContentChild", ANGULAR_CONTENT_CHILDREN),
    AnnotationRule("ContentChildren", ANGULAR_CONTENT_CHILDREN),
)


def match_annotation(
    annotations: Iterable[str],
    rules: tuple[AnnotationRule, ...] = ANNOTATION_RULES,
) -> AnnotationRule | None:
    """Find the first rule matching any of the member's annotations.

    Args:
        annotations: Annotation names on the member
        rules: Rules in priority order

    Returns:
        First matching rule, None if no annotation is recognized
    """
    names = frozenset(annotations)
    if not names:
        return None
    for rule in rules:
        if rule.name in names:
            return rule
    return None
