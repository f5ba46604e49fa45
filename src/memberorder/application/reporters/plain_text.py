"""Plain text reporter using print().

One line per violation, compiler style, followed by a summary.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from memberorder.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for violation in result.violations:
            self._write(str(violation))

        if result.violations:
            self._write()

        stats = result.stats
        self._write(
            f"Checked {stats.files_checked} files, {stats.classes_checked} classes, "
            f"{stats.members_checked} members"
        )
        self._write(f"Violations: {result.violation_count}")
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
