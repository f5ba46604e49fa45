"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberorder.domain.model.enums import Severity
    from memberorder.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Violation:
    """Member ordering violation.

    Attributes:
        rule_name: Name of violated rule
        message: Human-readable message
        location: Source location of the offending member
        severity: ERROR/WARNING/INFO/STYLE
        subject: Qualified member name (module.Class.member)
    """

    rule_name: str
    message: str
    location: Location
    severity: Severity
    subject: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")

    def __str__(self) -> str:
        """Format violation for display."""
        return f"{self.location}: [{self.severity.name}] {self.rule_name}: {self.message}"
