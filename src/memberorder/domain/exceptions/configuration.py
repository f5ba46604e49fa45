"""Configuration exceptions."""

from memberorder.domain.exceptions.base import MemberOrderError


class ConfigurationError(MemberOrderError):
    """Error in rule configuration.

    Raised once, before any member is checked, when the configured
    group order or another option cannot be used.

    Attributes:
        key: Offending configuration key or value (must not be empty)
        reason: Why it is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")
