"""Parsed source file: class bodies ready for checking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from memberorder.domain.model.location import Location
    from memberorder.domain.model.member import MemberDescriptor


@dataclass(frozen=True, slots=True)
class ClassMembers:
    """Members of one class body in source order.

    Attributes:
        name: Class name
        qualified_name: Full path (module.Outer.Class)
        location: Location of the class statement
        members: Members as they physically appear
    """

    name: str
    qualified_name: str
    location: Location
    members: tuple[MemberDescriptor, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if not self.qualified_name.endswith(self.name):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must end with name '{self.name}'"
            )


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Python module with all of its class bodies.

    Attributes:
        path: File path
        module_name: Module name used to qualify classes
        classes: Every class in the file, outer before nested
    """

    path: Path
    module_name: str
    classes: tuple[ClassMembers, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.module_name:
            raise ValueError("module_name must not be empty")
