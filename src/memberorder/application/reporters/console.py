"""Console reporter: CheckResult → rich formatted table."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from memberorder.application.reporters._base import BaseReporter
from memberorder.domain.model.enums import Severity

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
    Severity.STYLE: "magenta",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs colored text and tables."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force ANSI colors. None = autodetect.
            width: Console width. None = autodetect.
        """
        self._console = Console(
            file=output if output is not None else sys.stdout,
            force_terminal=force_terminal,
            width=width,
        )

    def report(self, result: CheckResult) -> None:
        """Report check results as a table.

        Args:
            result: Complete check result
        """
        console = self._console
        console.rule("[bold]MEMBER ORDERING[/bold]")

        if result.violations:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Location")
            table.add_column("Severity")
            table.add_column("Member")
            table.add_column("Message")

            for violation in result.violations:
                style = _SEVERITY_STYLES[violation.severity]
                table.add_row(
                    str(violation.location),
                    f"[{style}]{violation.severity.name}[/{style}]",
                    violation.subject,
                    violation.message,
                )

            console.print(table)

            totals: list[str] = []
            for severity in Severity:
                count = result.count(severity)
                if count:
                    style = _SEVERITY_STYLES[severity]
                    totals.append(f"[{style}]{severity.name}[/{style}]: {count}")
            console.print("  ".join(totals))

        stats = result.stats
        console.print(
            f"[bold]Files:[/bold] {stats.files_checked}  "
            f"[bold]Classes:[/bold] {stats.classes_checked}  "
            f"[bold]Members:[/bold] {stats.members_checked}  "
            f"[bold]Violations:[/bold] {result.violation_count}"
        )
        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print("[bold red]FAILED[/bold red]")
