"""Check result and statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberorder.domain.model.enums import Severity
    from memberorder.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Counters of what was checked.

    Attributes:
        files_checked: Source files parsed
        classes_checked: Class bodies verified
        members_checked: Members that received a verdict
    """

    files_checked: int = 0
    classes_checked: int = 0
    members_checked: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("files_checked", "classes_checked", "members_checked"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a member-ordering run.

    Attributes:
        violations: All violations, in emission order
        stats: Counters
    """

    violations: tuple[Violation, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """True if no violations were found."""
        return not self.violations

    @property
    def violation_count(self) -> int:
        """Total number of violations."""
        return len(self.violations)

    def count(self, severity: Severity) -> int:
        """Number of violations with the given severity."""
        return sum(1 for v in self.violations if v.severity is severity)

    @classmethod
    def empty(cls) -> CheckResult:
        """Result with nothing checked."""
        return cls(violations=(), stats=CheckStats())
