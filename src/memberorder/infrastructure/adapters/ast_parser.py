"""AST-based source parser adapter.

Reads Python files and collects every class body with its members.
FAIL-FIRST: raises ParsingError on any read or syntax problem.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from memberorder.domain.exceptions.parsing import ParsingError
from memberorder.domain.model.source_file import ClassMembers, SourceFile
from memberorder.infrastructure.analyzers.base import (
    compute_module_name,
    make_location,
    shallow_walk,
)
from memberorder.infrastructure.analyzers.member_analyzer import MemberAnalyzer

logger = logging.getLogger(__name__)

# Default directories to exclude from parsing
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


class ASTSourceParser:
    """Parser using Python AST to extract class bodies.

    Stateless between parse_file() calls.
    """

    def __init__(self, root_path: Path | None = None) -> None:
        """Initialize parser.

        Args:
            root_path: Root for computing module names. None uses file names.
        """
        self._root_path = root_path
        self._member_analyzer = MemberAnalyzer()

    def parse_source(
        self,
        source: str,
        path: Path,
        *,
        root_path: Path | None = None,
    ) -> SourceFile:
        """Parse Python source text.

        Args:
            source: Source code
            path: File path the source belongs to
            root_path: Root for the module name, overrides the parser's root

        Returns:
            SourceFile with all classes, outer classes before nested ones

        Raises:
            ParsingError: If source has a syntax error or path is not under root
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        module_name = compute_module_name(path, root_path or self._root_path)
        classes = tuple(self._collect_classes(tree.body, module_name, path))

        logger.debug("parsed %s: %d classes", path, len(classes))

        return SourceFile(path=path, module_name=module_name, classes=classes)

    def parse_file(self, path: Path, *, root_path: Path | None = None) -> SourceFile:
        """Parse single Python file.

        Args:
            path: Path to .py file
            root_path: Root for the module name, overrides the parser's root

        Returns:
            Parsed SourceFile

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e
        except OSError as e:
            raise ParsingError(path, f"cannot read file: {e.strerror or e}") from e

        return self.parse_source(source, path, root_path=root_path)

    def parse_directory(
        self,
        path: Path,
        *,
        exclude: frozenset[str] = DEFAULT_EXCLUDES,
    ) -> tuple[SourceFile, ...]:
        """Parse all .py files under directory.

        Module names are relative to the parser's root, or to the
        searched directory when the parser has none.

        Args:
            path: Root directory
            exclude: Directory names to skip

        Returns:
            Parsed files in path order

        Raises:
            ParsingError: If any file cannot be parsed
        """
        root_path = self._root_path or path
        return tuple(
            self.parse_file(py_file, root_path=root_path)
            for py_file in find_python_files(path, exclude)
        )

    def _collect_classes(
        self,
        body: list[ast.stmt],
        prefix: str,
        path: Path,
    ) -> list[ClassMembers]:
        """Collect classes in body and in every scope nested inside it."""
        classes: list[ClassMembers] = []

        for node in shallow_walk(body):
            match node:
                case ast.ClassDef(name=name, body=class_body):
                    qualified_name = f"{prefix}.{name}"
                    classes.append(
                        ClassMembers(
                            name=name,
                            qualified_name=qualified_name,
                            location=make_location(node, path),
                            members=self._member_analyzer.analyze(node, path),
                        )
                    )
                    classes.extend(self._collect_classes(class_body, qualified_name, path))
                case ast.FunctionDef(name=name, body=func_body) | ast.AsyncFunctionDef(
                    name=name, body=func_body
                ):
                    classes.extend(self._collect_classes(func_body, f"{prefix}.{name}", path))

        return classes


def find_python_files(root: Path, exclude: frozenset[str] = DEFAULT_EXCLUDES) -> list[Path]:
    """Find all .py files in directory, excluding specified directories.

    Args:
        root: Directory to search
        exclude: Directory names to skip

    Returns:
        Sorted list of file paths
    """
    result: list[Path] = []

    for item in sorted(root.iterdir()):
        if item.is_dir():
            if item.name not in exclude:
                result.extend(find_python_files(item, exclude))
        elif item.is_file() and item.suffix == ".py":
            result.append(item)

    return result
