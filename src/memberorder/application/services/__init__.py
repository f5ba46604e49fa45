"""Application services."""

from memberorder.application.services.member_ordering import MemberOrderingRule

__all__ = ["MemberOrderingRule"]
