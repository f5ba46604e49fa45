"""Class member analyzer.

Turns a class body into member descriptors in source order.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from memberorder.domain.model.enums import MemberKind
from memberorder.domain.model.member import (
    DEFAULT_CONSTRUCTOR_NAME,
    DEFAULT_CONSTRUCTOR_SOURCE_NAME,
    MemberDescriptor,
)
from memberorder.infrastructure.analyzers.base import (
    decorator_names,
    dotted_name,
    get_visibility,
    make_location,
)

if TYPE_CHECKING:
    from pathlib import Path

_CONSTRUCTOR_NAMES = {
    DEFAULT_CONSTRUCTOR_SOURCE_NAME: DEFAULT_CONSTRUCTOR_NAME,
    "__new__": "__new__",
}
_GETTER_DECORATORS = frozenset({"property", "cached_property"})
_SETTER_DECORATORS = frozenset({"setter", "deleter"})


class MemberAnalyzer:
    """Extracts member descriptors from a class AST node.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(self, node: ast.ClassDef, path: Path) -> tuple[MemberDescriptor, ...]:
        """Analyze class body.

        Fields produce one descriptor per assigned name.
        Statements that declare nothing (docstrings, pass, nested
        classes, control flow) are not members.

        Args:
            node: ClassDef AST node
            path: Source file path

        Returns:
            Member descriptors in source order

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if node is None:
            raise TypeError("node must not be None")
        if path is None:
            raise TypeError("path must not be None")

        members: list[MemberDescriptor] = []

        for item in node.body:
            match item:
                case ast.FunctionDef() | ast.AsyncFunctionDef():
                    members.append(self._analyze_function(item, path))
                case ast.Assign(targets=targets):
                    for target in targets:
                        members.extend(self._fields(target, (), item, path))
                case ast.AnnAssign(target=target, annotation=annotation):
                    annotations = _annotated_metadata(annotation)
                    members.extend(self._fields(target, annotations, item, path))

        return tuple(members)

    def _analyze_function(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        path: Path,
    ) -> MemberDescriptor:
        """Classify a function definition by name and decorators."""
        decorators = decorator_names(node.decorator_list)
        name = node.name

        if name in _CONSTRUCTOR_NAMES:
            kind = MemberKind.CONSTRUCTOR
            name = _CONSTRUCTOR_NAMES[name]
        elif any(dec in _GETTER_DECORATORS for dec in decorators):
            kind = MemberKind.GETTER
        elif _is_accessor(node.decorator_list):
            kind = MemberKind.SETTER
        else:
            kind = MemberKind.METHOD

        return MemberDescriptor(
            kind=kind,
            name=name,
            visibility=get_visibility(node.name),
            annotations=decorators,
            location=make_location(node, path, with_decorators=True),
        )

    def _fields(
        self,
        target: ast.expr,
        annotations: tuple[str, ...],
        statement: ast.stmt,
        path: Path,
    ) -> list[MemberDescriptor]:
        """Field descriptors for every name bound by an assignment target."""
        location = make_location(statement, path)
        return [
            MemberDescriptor(
                kind=MemberKind.FIELD,
                name=name,
                visibility=get_visibility(name),
                annotations=annotations,
                location=location,
            )
            for name in _target_names(target)
        ]


def _target_names(target: ast.expr) -> list[str]:
    """Names bound by an assignment target (a, (a, b), [a, *b])."""
    match target:
        case ast.Name(id=name):
            return [name]
        case ast.Tuple(elts=elts) | ast.List(elts=elts):
            names: list[str] = []
            for elt in elts:
                names.extend(_target_names(elt))
            return names
        case ast.Starred(value=value):
            return _target_names(value)
    # self.x, obj[i]: not a class member
    return []


def _is_accessor(decorators: list[ast.expr]) -> bool:
    """True for @<property>.setter and @<property>.deleter."""
    return any(
        isinstance(dec, ast.Attribute) and dec.attr in _SETTER_DECORATORS for dec in decorators
    )


def _annotated_metadata(annotation: ast.expr) -> tuple[str, ...]:
    """Marker names from typing.Annotated[T, Marker(), ...].

    Args:
        annotation: Field annotation expression

    Returns:
        Names of the metadata expressions, empty if not Annotated
    """
    match annotation:
        case ast.Subscript(value=value, slice=ast.Tuple(elts=[_, *metadata])) if (
            dotted_name(value) == "Annotated"
        ):
            return tuple(name for name in map(dotted_name, metadata) if name is not None)
    return ()
