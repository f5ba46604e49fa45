"""Domain model: value objects and entities."""

from memberorder.domain.model.annotation_rule import ANNOTATION_RULES, AnnotationRule
from memberorder.domain.model.check_result import CheckResult, CheckStats
from memberorder.domain.model.configuration import MemberOrderingConfig
from memberorder.domain.model.enums import MemberKind, Severity, Visibility
from memberorder.domain.model.group_order import GroupOrder
from memberorder.domain.model.location import Location
from memberorder.domain.model.member import MemberDescriptor
from memberorder.domain.model.member_group import ALL_GROUPS, DEFAULT_GROUPS, MemberGroup
from memberorder.domain.model.source_file import ClassMembers, SourceFile
from memberorder.domain.model.verdict import MemberOrderVerdict
from memberorder.domain.model.violation import Violation

__all__ = [
    # Enums
    "MemberKind",
    "Severity",
    "Visibility",
    # Value objects
    "Location",
    "MemberGroup",
    "GroupOrder",
    "AnnotationRule",
    "MemberDescriptor",
    "MemberOrderVerdict",
    # Entities
    "ClassMembers",
    "SourceFile",
    "Violation",
    "CheckResult",
    "CheckStats",
    # Configuration
    "MemberOrderingConfig",
    # Tables
    "ALL_GROUPS",
    "ANNOTATION_RULES",
    "DEFAULT_GROUPS",
]
