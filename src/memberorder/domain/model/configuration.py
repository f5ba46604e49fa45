"""Member-ordering rule configuration.

User-provided options, validated once before any class is checked.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from memberorder.domain.exceptions.configuration import ConfigurationError
from memberorder.domain.model.enums import Severity
from memberorder.domain.model.group_order import GroupOrder

_KNOWN_KEYS = frozenset({"order", "alphabetize", "severity"})


@dataclass(frozen=True, slots=True)
class MemberOrderingConfig:
    """Configuration DTO for the member-ordering rule.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        order: Canonical group order. Default: built-in generic order.
        alphabetize: Also require same-group members in name order.
        severity: Severity of reported violations.
    """

    order: GroupOrder = field(default_factory=GroupOrder.default)
    alphabetize: bool = False
    severity: Severity = Severity.STYLE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.order, GroupOrder):
            raise TypeError(f"order must be GroupOrder, got {type(self.order).__name__}")
        if not isinstance(self.alphabetize, bool):
            raise TypeError(f"alphabetize must be bool, got {type(self.alphabetize).__name__}")
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be Severity, got {type(self.severity).__name__}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> MemberOrderingConfig:
        """Build configuration from a raw mapping (TOML table, ini values).

        Recognized keys:
            order: list of group keys, empty for the default order
            alphabetize: bool, default False
            severity: "error" | "warning" | "info" | "style", default "style"

        Args:
            data: Raw configuration

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: Unknown key, wrong value type, unknown group
        """
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigurationError(unknown[0], "unknown option")

        raw_order = data.get("order", ())
        if isinstance(raw_order, str) or not isinstance(raw_order, list | tuple):
            raise ConfigurationError("order", "must be a list of group keys")
        order = GroupOrder.from_keys(raw_order)

        alphabetize = data.get("alphabetize", False)
        if not isinstance(alphabetize, bool):
            raise ConfigurationError("alphabetize", "must be true or false")

        return cls(
            order=order,
            alphabetize=alphabetize,
            severity=_parse_severity(data.get("severity", Severity.STYLE.name)),
        )


def _parse_severity(value: object) -> Severity:
    """Parse severity name (case-insensitive)."""
    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        raise ConfigurationError("severity", "must be a string")
    try:
        return Severity[value.strip().upper()]
    except KeyError:
        choices = ", ".join(s.name.lower() for s in Severity)
        raise ConfigurationError("severity", f"'{value}' is not one of: {choices}") from None
