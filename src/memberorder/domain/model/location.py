"""Member span value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Span of a class or member in a source file.

    A decorated member starts at its first decorator: moving the member
    moves the decorators with it. declaration_line still points at the
    def itself.

    Attributes:
        file: Path to source file
        line: First line of the span (1-based, must be > 0)
        column: Column of the first line (0-based, must be >= 0)
        end_line: Last line of the span, None if unknown
        name_line: Line of the declaration when decorators precede it
    """

    file: Path
    line: int
    column: int
    end_line: int | None = None
    name_line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.name_line is not None and self.name_line <= self.line:
            raise ValueError(f"name_line ({self.name_line}) must be > line ({self.line})")
        if self.end_line is not None and self.end_line < self.declaration_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= {self.declaration_line}"
            )

    @property
    def declaration_line(self) -> int:
        """Line of the declaration itself, after any decorators."""
        return self.name_line if self.name_line is not None else self.line

    def __str__(self) -> str:
        """Format as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"
