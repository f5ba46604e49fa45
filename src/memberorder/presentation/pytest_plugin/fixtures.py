"""pytest fixtures for member-ordering checks.

User overrides member_ordering_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from memberorder.application.services.member_ordering import MemberOrderingRule
from memberorder.domain.model.configuration import MemberOrderingConfig

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult


@pytest.fixture(scope="session")
def member_ordering_config(request: pytest.FixtureRequest) -> MemberOrderingConfig:
    """Rule configuration from ini options.

    Returns:
        MemberOrderingConfig built from member_order and
        member_order_alphabetize

    Raises:
        ConfigurationError: Unknown group in member_order
    """
    return MemberOrderingConfig.from_mapping(
        {
            "order": list(request.config.getini("member_order")),
            "alphabetize": bool(request.config.getini("member_order_alphabetize")),
        }
    )


@pytest.fixture(scope="session")
def member_ordering_rule(member_ordering_config: MemberOrderingConfig) -> MemberOrderingRule:
    """Member-ordering rule with the session configuration."""
    return MemberOrderingRule(member_ordering_config)


@pytest.fixture(scope="session")
def member_ordering_result(
    request: pytest.FixtureRequest,
    member_ordering_rule: MemberOrderingRule,
) -> CheckResult:
    """Check result for member_order_paths relative to rootdir.

    Returns:
        CheckResult for all configured paths

    Raises:
        FileNotFoundError: If a configured path does not exist
    """
    root_dir = Path(str(request.config.rootpath))

    paths: list[Path] = []
    for entry in request.config.getini("member_order_paths"):
        path = root_dir / entry
        if not path.exists():
            raise FileNotFoundError(
                f"member_order_paths entry '{path}' does not exist. "
                f"Configure member_order_paths in pytest.ini or pyproject.toml."
            )
        paths.append(path)

    return member_ordering_rule.check_paths(paths)
