"""Base exceptions for memberorder domain."""


class MemberOrderError(Exception):
    """Root exception for all memberorder errors.

    All domain exceptions inherit from this.
    Allows catching all memberorder-specific errors.
    """
