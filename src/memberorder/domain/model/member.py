"""Class member descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from memberorder.domain.model.enums import MemberKind, Visibility

if TYPE_CHECKING:
    from memberorder.domain.model.location import Location

# Sort key of the default constructor (__init__)
DEFAULT_CONSTRUCTOR_NAME = ""
DEFAULT_CONSTRUCTOR_SOURCE_NAME = "__init__"


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    """One class member as it appears in source.

    Attributes:
        kind: FIELD/CONSTRUCTOR/GETTER/SETTER/METHOD
        name: Sort key; empty only for the default constructor
        visibility: PUBLIC/PROTECTED/PRIVATE by naming convention
        annotations: Annotation names attached to the member
        location: Source span, None for synthetic members
    """

    kind: MemberKind
    name: str
    visibility: Visibility = Visibility.PUBLIC
    annotations: tuple[str, ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.name is None:
            raise TypeError("name must not be None")
        if not self.name and self.kind is not MemberKind.CONSTRUCTOR:
            raise ValueError(f"{self.kind.name.lower()} name must not be empty")

    @property
    def is_private(self) -> bool:
        """True for any non-public member (_name and __name)."""
        return self.visibility is not Visibility.PUBLIC

    @property
    def source_name(self) -> str:
        """Name as written in source (__init__ for the default constructor)."""
        if self.kind is MemberKind.CONSTRUCTOR and self.name == DEFAULT_CONSTRUCTOR_NAME:
            return DEFAULT_CONSTRUCTOR_SOURCE_NAME
        return self.name
