"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Base class for check result reporters.

    memberorder provides PlainTextReporter, JSONReporter and
    ConsoleReporter. Users can implement their own.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"Violations: {result.violation_count}")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with violations and stats
        """
