"""pytest plugin for memberorder.

Provides fixtures for member-ordering checks in a test suite:
    member_ordering_config: Rule configuration (override in conftest.py)
    member_ordering_rule: Configured MemberOrderingRule
    member_ordering_result: CheckResult for the configured source paths

Configuration (pytest.ini or pyproject.toml):
    member_order_paths: Files or directories to check (default: "src")
    member_order: Group order, one key per line (default: built-in order)
    member_order_alphabetize: Check alphabetical order (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from memberorder.presentation.pytest_plugin.fixtures import (
    member_ordering_config,
    member_ordering_result,
    member_ordering_rule,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "member_ordering_config",
    "member_ordering_result",
    "member_ordering_rule",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "member_order_paths",
        "Files or directories checked by member_ordering_result",
        type="linelist",
        default=["src"],
    )
    parser.addini(
        "member_order",
        "Member group order, one group key per line",
        type="linelist",
        default=[],
    )
    parser.addini(
        "member_order_alphabetize",
        "Require members of the same group in alphabetical order",
        type="bool",
        default=False,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "member_ordering: mark test as member-ordering check",
    )
