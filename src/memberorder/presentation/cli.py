"""Command line interface.

    memberorder src/ --alphabetize --order public_fields constructors public_methods

Exit codes: 0 no violations, 1 violations found, 2 configuration or parsing error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from memberorder import __version__
from memberorder.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from memberorder.application.services.member_ordering import MemberOrderingRule
from memberorder.domain.exceptions import ConfigurationError, ParsingError
from memberorder.domain.model.configuration import MemberOrderingConfig
from memberorder.domain.model.group_order import GroupOrder
from memberorder.infrastructure.config_loader import find_pyproject, load_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

_REPORTERS = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "console": ConsoleReporter,
}


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="memberorder",
        description="Check the order of class members in Python source files",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to check (default: current directory)",
    )
    parser.add_argument(
        "--order",
        nargs="+",
        metavar="GROUP",
        help="Group order, overrides configuration (e.g. public_fields constructors)",
    )
    parser.add_argument(
        "--alphabetize",
        action="store_true",
        default=None,
        help="Require members of the same group in alphabetical order",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="pyproject.toml to read [tool.memberorder] from (default: nearest)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(_REPORTERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> MemberOrderingConfig:
    """Merge pyproject configuration with command line overrides.

    Raises:
        ConfigurationError: Invalid configuration
    """
    config_path = args.config or find_pyproject(Path.cwd())
    config = load_config(config_path) if config_path is not None else MemberOrderingConfig()

    if args.order:
        config = replace(config, order=GroupOrder.from_keys(args.order))
    if args.alphabetize is not None:
        config = replace(config, alphabetize=args.alphabetize)

    return config


def main(argv: list[str] | None = None) -> int:
    """Run member-ordering check.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = resolve_config(args)
        logger.debug("configuration: %s", config)
        result = MemberOrderingRule(config).check_paths(args.paths)
    except (ConfigurationError, ParsingError) as e:
        print(f"memberorder: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    _REPORTERS[args.format]().report(result)
    return EXIT_OK if result.passed else EXIT_VIOLATIONS


if __name__ == "__main__":
    sys.exit(main())
