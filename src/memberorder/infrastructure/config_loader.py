"""pyproject.toml configuration loader.

Reads the [tool.memberorder] table:

    [tool.memberorder]
    order = ["public_fields", "constructors", "public_methods"]
    alphabetize = true
    severity = "warning"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from memberorder.domain.exceptions.configuration import ConfigurationError
from memberorder.domain.model.configuration import MemberOrderingConfig

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
TOOL_TABLE = "memberorder"


def find_pyproject(start: Path) -> Path | None:
    """Find nearest pyproject.toml in start or its parents.

    Args:
        start: File or directory to search from

    Returns:
        Path to pyproject.toml, None if there is none
    """
    directory = start if start.is_dir() else start.parent
    for candidate in (directory, *directory.parents):
        path = candidate / PYPROJECT
        if path.is_file():
            return path
    return None


def load_config(path: Path) -> MemberOrderingConfig:
    """Load configuration from a pyproject.toml file.

    Missing [tool.memberorder] table means defaults.

    Args:
        path: Path to pyproject.toml

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: File unreadable, invalid TOML or invalid options
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(str(path), "file not found") from e
    except OSError as e:
        raise ConfigurationError(str(path), f"cannot read file: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("no [tool.%s] table in %s, using defaults", TOOL_TABLE, path)
        return MemberOrderingConfig()
    if not isinstance(table, dict):
        raise ConfigurationError(f"tool.{TOOL_TABLE}", "must be a table")

    logger.debug("loaded [tool.%s] from %s", TOOL_TABLE, path)
    return MemberOrderingConfig.from_mapping(table)
