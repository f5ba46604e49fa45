"""memberorder - class member ordering checker for Python source code."""

__version__ = "0.1.0"

from memberorder.application.ordering import classify, verify_members
from memberorder.application.services.member_ordering import MemberOrderingRule
from memberorder.domain.model.configuration import MemberOrderingConfig

__all__ = [
    "MemberOrderingConfig",
    "MemberOrderingRule",
    "__version__",
    "classify",
    "verify_members",
]
