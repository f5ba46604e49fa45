"""Infrastructure adapters."""

from memberorder.infrastructure.adapters.ast_parser import ASTSourceParser, find_python_files

__all__ = ["ASTSourceParser", "find_python_files"]
