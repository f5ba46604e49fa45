"""AST analyzers."""

from memberorder.infrastructure.analyzers.member_analyzer import MemberAnalyzer

__all__ = ["MemberAnalyzer"]
