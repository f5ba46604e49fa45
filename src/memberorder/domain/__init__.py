"""memberorder domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, types, collections.abc
"""

from memberorder.domain.exceptions import ConfigurationError, MemberOrderError, ParsingError
from memberorder.domain.model import (
    ClassMembers,
    GroupOrder,
    Location,
    MemberDescriptor,
    MemberGroup,
    MemberKind,
    MemberOrderingConfig,
    MemberOrderVerdict,
    Severity,
    SourceFile,
    Violation,
    Visibility,
)

__all__ = [
    # Exceptions
    "MemberOrderError",
    "ConfigurationError",
    "ParsingError",
    # Model
    "ClassMembers",
    "GroupOrder",
    "Location",
    "MemberDescriptor",
    "MemberGroup",
    "MemberKind",
    "MemberOrderingConfig",
    "MemberOrderVerdict",
    "Severity",
    "SourceFile",
    "Violation",
    "Visibility",
]
