"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from memberorder.domain.model.enums import Visibility
from memberorder.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path


def make_location(
    node: ast.stmt,
    path: Path,
    *,
    with_decorators: bool = False,
) -> Location:
    """Create Location from AST node.

    Args:
        node: AST statement with position info
        path: Source file path
        with_decorators: Start the span at the first decorator

    Returns:
        Location spanning the node
    """
    line = node.lineno
    column = node.col_offset

    if with_decorators:
        for decorator in getattr(node, "decorator_list", ()):
            # Decorator expressions start after "@"
            if decorator.lineno < line:
                line = decorator.lineno
                column = max(decorator.col_offset - 1, 0)

    return Location(
        file=path,
        line=line,
        column=column,
        end_line=node.end_lineno,
        name_line=node.lineno if line != node.lineno else None,
    )


def get_visibility(name: str) -> Visibility:
    """Determine visibility from Python naming convention.

    Args:
        name: Identifier name

    Returns:
        Visibility based on underscore prefix

    Rules:
        __name__ (dunder) → PUBLIC (special methods)
        __name (not __name__) → PRIVATE (mangled)
        _name → PROTECTED
        name → PUBLIC
    """
    # Dunder methods (__init__, __str__, etc.) are PUBLIC
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    # Name-mangled private attributes
    if name.startswith("__"):
        return Visibility.PRIVATE
    # Protected by convention
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def compute_module_name(file_path: Path, root_path: Path | None) -> str:
    """Compute module name from file path.

    Args:
        file_path: Path to .py file
        root_path: Project root path, None to use the file name only

    Returns:
        Dotted module name

    Raises:
        ParsingError: If file is not under root_path (FAIL-FIRST)
    """
    from memberorder.domain.exceptions.parsing import ParsingError

    if root_path is None:
        parts = [file_path.stem]
        if file_path.stem == "__init__" and file_path.parent.name:
            parts = [file_path.parent.name]
        return ".".join(parts)

    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    if not parts:
        parts = [root_path.name or file_path.stem]

    return ".".join(parts)


def dotted_name(node: ast.expr) -> str | None:
    """Last component of a name, attribute or call expression.

    Examples:
        Input → "Input"
        ng.Input → "Input"
        ng.Input("alias") → "Input"
        value.setter → "setter"

    Args:
        node: Expression node

    Returns:
        Name, None for other expressions
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(attr=attr):
            return attr
        case ast.Call(func=func):
            return dotted_name(func)
    return None


def decorator_names(decorators: Iterable[ast.expr]) -> tuple[str, ...]:
    """Names of decorators in source order.

    Args:
        decorators: Decorator expressions from AST

    Returns:
        Tuple of decorator names (unrecognized expressions skipped)
    """
    names: list[str] = []
    for dec in decorators:
        name = dotted_name(dec)
        if name is not None:
            names.append(name)
    return tuple(names)


def shallow_walk(body: Iterable[ast.stmt]) -> Iterator[ast.AST]:
    """Walk AST nodes in body without entering nested scopes.

    Yields all nodes in the body, but stops at scope boundaries:
    - FunctionDef, AsyncFunctionDef (yields node, not children)
    - ClassDef (yields node, not children)
    - Lambda (yields node, not children)

    Args:
        body: List of statements to traverse

    Yields:
        AST nodes in depth-first order, excluding nested scope internals
    """
    stack: list[ast.AST] = list(reversed(list(body)))

    while stack:
        node = stack.pop()
        yield node

        match node:
            # Scope boundaries - yield node but don't traverse children
            case ast.FunctionDef() | ast.AsyncFunctionDef() | ast.ClassDef() | ast.Lambda():
                pass
            case _:
                # Add children in reverse order to maintain depth-first order
                stack.extend(reversed(list(ast.iter_child_nodes(node))))
