"""Member-ordering rule.

Runs the sequence verifier over every class of a source file and
turns wrong verdicts into violations:
    "<group> should be before <previous group>"
    "<name> should be alphabetically before <previous name>"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from memberorder.application.ordering.verifier import verify_members
from memberorder.domain.model.check_result import CheckResult, CheckStats
from memberorder.domain.model.configuration import MemberOrderingConfig
from memberorder.domain.model.violation import Violation
from memberorder.infrastructure.adapters.ast_parser import ASTSourceParser

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from memberorder.domain.model.source_file import ClassMembers, SourceFile
    from memberorder.domain.model.verdict import MemberOrderVerdict

logger = logging.getLogger(__name__)

WARNING_MESSAGE = "should be before"
WARNING_ALPHABETICAL_MESSAGE = "should be alphabetically before"


class MemberOrderingRule:
    """Checks that class members follow the configured group order.

    Stateless between calls: every class body is verified from a
    clean state, so classes and files can be checked in any order.
    """

    rule_id = "member-ordering"

    def __init__(
        self,
        config: MemberOrderingConfig | None = None,
        parser: ASTSourceParser | None = None,
    ) -> None:
        """Initialize rule.

        Args:
            config: Rule configuration. Uses defaults if None.
            parser: Source parser. Uses ASTSourceParser() if None.
        """
        self._config = config or MemberOrderingConfig()
        self._parser = parser or ASTSourceParser()

    @property
    def config(self) -> MemberOrderingConfig:
        """Active configuration."""
        return self._config

    def verify_class(self, cls: ClassMembers) -> tuple[MemberOrderVerdict, ...]:
        """Verdicts for one class body."""
        return verify_members(cls.members, self._config.order, self._config.alphabetize)

    def check_class(self, cls: ClassMembers) -> tuple[Violation, ...]:
        """Violations for one class body.

        Order violations come first, then alphabetical ones.

        Args:
            cls: Class body to check

        Returns:
            Violations in emission order
        """
        return self._violations(cls, self.verify_class(cls))

    def check_source(self, source: SourceFile) -> tuple[Violation, ...]:
        """Violations for every class of a parsed file."""
        violations: list[Violation] = []
        for cls in source.classes:
            violations.extend(self.check_class(cls))
        return tuple(violations)

    def check_paths(self, paths: Iterable[Path]) -> CheckResult:
        """Parse and check files and directories.

        Args:
            paths: Files or directories (searched recursively)

        Returns:
            CheckResult with violations and statistics

        Raises:
            ParsingError: If any file cannot be parsed
        """
        violations: list[Violation] = []
        files = classes = members = 0

        for path in paths:
            sources = (
                self._parser.parse_directory(path)
                if path.is_dir()
                else (self._parser.parse_file(path),)
            )
            for source in sources:
                files += 1
                for cls in source.classes:
                    verdicts = self.verify_class(cls)
                    classes += 1
                    members += len(verdicts)
                    violations.extend(self._violations(cls, verdicts))

        logger.debug(
            "checked %d files, %d classes, %d members: %d violations",
            files,
            classes,
            members,
            len(violations),
        )

        return CheckResult(
            violations=tuple(violations),
            stats=CheckStats(
                files_checked=files,
                classes_checked=classes,
                members_checked=members,
            ),
        )

    def _violations(
        self,
        cls: ClassMembers,
        verdicts: tuple[MemberOrderVerdict, ...],
    ) -> tuple[Violation, ...]:
        """Convert wrong verdicts to violations."""
        order_violations = [
            self._violation(cls, verdict, order_message(verdict))
            for verdict in verdicts
            if verdict.is_wrong
        ]
        alphabetical_violations = [
            self._violation(cls, verdict, alphabetical_message(verdict))
            for verdict in verdicts
            if self._config.alphabetize and verdict.is_alphabetically_wrong
        ]
        return tuple(order_violations + alphabetical_violations)

    def _violation(
        self,
        cls: ClassMembers,
        verdict: MemberOrderVerdict,
        message: str,
    ) -> Violation:
        """Build violation located at the member (or its class)."""
        member = verdict.member
        return Violation(
            rule_name=self.rule_id,
            message=message,
            location=member.location or cls.location,
            severity=self._config.severity,
            subject=f"{cls.qualified_name}.{member.source_name}",
        )


def order_message(verdict: MemberOrderVerdict) -> str:
    """Message for a rank violation."""
    return f"{verdict.group} {WARNING_MESSAGE} {verdict.previous_group}"


def alphabetical_message(verdict: MemberOrderVerdict) -> str:
    """Message for an alphabetical violation."""
    return f"{verdict.name} {WARNING_ALPHABETICAL_MESSAGE} {verdict.previous_name}"
