"""Tests for domain/model/check_result.py."""

from pathlib import Path

import pytest

from memberorder.domain.model.check_result import CheckResult, CheckStats
from memberorder.domain.model.enums import Severity
from memberorder.domain.model.location import Location
from memberorder.domain.model.violation import Violation


def make_violation(severity: Severity) -> Violation:
    return Violation(
        rule_name="member-ordering",
        message="constructors should be before public_methods",
        location=Location(file=Path("m.py"), line=1, column=0),
        severity=severity,
        subject="m.A.__init__",
    )


class TestCheckStats:
    """Tests for CheckStats."""

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="members_checked must be >= 0"):
            CheckStats(members_checked=-1)


class TestCheckResult:
    """Tests for CheckResult."""

    def test_empty(self) -> None:
        result = CheckResult.empty()

        assert result.passed is True
        assert result.violation_count == 0
        assert result.stats == CheckStats()

    def test_count_by_severity(self) -> None:
        result = CheckResult(
            violations=(
                make_violation(Severity.ERROR),
                make_violation(Severity.STYLE),
                make_violation(Severity.STYLE),
            ),
            stats=CheckStats(),
        )

        assert result.passed is False
        assert result.count(Severity.STYLE) == 2
        assert result.count(Severity.WARNING) == 0


class TestViolation:
    """Tests for Violation invariants."""

    @pytest.mark.parametrize("field_name", ["rule_name", "message", "subject"])
    def test_empty_fields_raise(self, field_name: str) -> None:
        kwargs = {
            "rule_name": "member-ordering",
            "message": "m",
            "location": Location(file=Path("m.py"), line=1, column=0),
            "severity": Severity.STYLE,
            "subject": "s",
            field_name: "",
        }

        with pytest.raises(ValueError, match=f"{field_name} must not be empty"):
            Violation(**kwargs)
