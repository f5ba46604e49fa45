"""Tests for application/reporters."""

import io
import json
from pathlib import Path

from memberorder.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from memberorder.domain.model.check_result import CheckResult, CheckStats
from memberorder.domain.model.enums import Severity
from memberorder.domain.model.location import Location
from memberorder.domain.model.violation import Violation


def make_result() -> CheckResult:
    """CheckResult with a single violation."""
    violation = Violation(
        rule_name="member-ordering",
        message="public_fields should be before public_methods",
        location=Location(file=Path("pkg/models.py"), line=12, column=4),
        severity=Severity.STYLE,
        subject="pkg.models.User.name",
    )
    return CheckResult(
        violations=(violation,),
        stats=CheckStats(files_checked=1, classes_checked=2, members_checked=7),
    )


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_reports_passed_result(self) -> None:
        output = io.StringIO()

        PlainTextReporter(output).report(CheckResult.empty())

        text = output.getvalue()
        assert "Violations: 0" in text
        assert "Result: PASSED" in text

    def test_reports_violations(self) -> None:
        output = io.StringIO()

        PlainTextReporter(output).report(make_result())

        lines = output.getvalue().splitlines()
        assert lines[0] == (
            "pkg/models.py:12:4: [STYLE] member-ordering: "
            "public_fields should be before public_methods"
        )
        assert "Checked 1 files, 2 classes, 7 members" in lines
        assert lines[-1] == "Result: FAILED"


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_structure(self) -> None:
        output = io.StringIO()

        JSONReporter(output).report(make_result())

        data = json.loads(output.getvalue())
        assert data["passed"] is False
        assert data["summary"] == {
            "violation_count": 1,
            "files_checked": 1,
            "classes_checked": 2,
            "members_checked": 7,
        }
        assert data["violations"][0] == {
            "rule_name": "member-ordering",
            "message": "public_fields should be before public_methods",
            "severity": "STYLE",
            "subject": "pkg.models.User.name",
            "location": {
                "file": "pkg/models.py",
                "line": 12,
                "column": 4,
                "end_line": None,
                "declaration_line": 12,
            },
        }

    def test_compact(self) -> None:
        output = io.StringIO()

        JSONReporter(output, indent=None).report(CheckResult.empty())

        assert output.getvalue().count("\n") == 1


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_reports_violations(self) -> None:
        output = io.StringIO()

        ConsoleReporter(output, force_terminal=False, width=200).report(make_result())

        text = output.getvalue()
        assert "MEMBER ORDERING" in text
        assert "pkg.models.User.name" in text
        assert "public_fields should be before public_methods" in text
        assert "STYLE: 1" in text
        assert "FAILED" in text

    def test_reports_passed(self) -> None:
        output = io.StringIO()

        ConsoleReporter(output, force_terminal=False).report(CheckResult.empty())

        assert "PASSED" in output.getvalue()
