"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from memberorder.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult
    from memberorder.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "files_checked": result.stats.files_checked,
                "classes_checked": result.stats.classes_checked,
                "members_checked": result.stats.members_checked,
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        """Convert Violation to JSON-serializable dict."""
        return {
            "rule_name": violation.rule_name,
            "message": violation.message,
            "severity": violation.severity.name,
            "subject": violation.subject,
            "location": {
                "file": str(violation.location.file),
                "line": violation.location.line,
                "column": violation.location.column,
                "end_line": violation.location.end_line,
                "declaration_line": violation.location.declaration_line,
            },
        }
