"""Member classification and sequence verification."""

from memberorder.application.ordering.classifier import classify, member_group
from memberorder.application.ordering.verifier import next_verdict, verify_members

__all__ = [
    "classify",
    "member_group",
    "next_verdict",
    "verify_members",
]
