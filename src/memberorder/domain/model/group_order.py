"""Configured canonical group order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from memberorder.domain.exceptions.configuration import ConfigurationError
from memberorder.domain.model.member_group import DEFAULT_GROUPS, MemberGroup, parse_group


@dataclass(frozen=True, slots=True)
class GroupOrder:
    """Ordered, duplicate-free sequence of member groups.

    Single source of truth for before/after comparisons:
    a group's rank is its index here. Groups that are absent
    are excluded from checking.

    Attributes:
        groups: Groups in the order they must appear in a class body
    """

    groups: tuple[MemberGroup, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(set(self.groups)) != len(self.groups):
            raise ValueError(f"groups must be unique, got {[g.key for g in self.groups]}")

    def __contains__(self, group: object) -> bool:
        return group in self.groups

    def __iter__(self) -> Iterator[MemberGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def rank(self, group: MemberGroup) -> int:
        """Index of group in this order.

        Raises:
            ValueError: If group is not part of the order
        """
        try:
            return self.groups.index(group)
        except ValueError:
            raise ValueError(f"group '{group.key}' is not in the configured order") from None

    @classmethod
    def default(cls) -> GroupOrder:
        """Built-in order of the generic groups."""
        return cls(DEFAULT_GROUPS)

    @classmethod
    def from_keys(cls, keys: Iterable[str] | None) -> GroupOrder:
        """Build order from configuration keys.

        Empty or missing keys select the built-in default order.

        Args:
            keys: Group keys in the desired order

        Returns:
            GroupOrder

        Raises:
            ConfigurationError: Unknown or repeated group key
        """
        keys = list(keys or ())
        if not keys:
            return cls.default()

        groups: list[MemberGroup] = []
        for key in keys:
            if not isinstance(key, str):
                raise ConfigurationError(repr(key), "group key must be a string")
            group = parse_group(key)
            if group is None:
                raise ConfigurationError(key, "unknown member group")
            if group in groups:
                raise ConfigurationError(key, "member group listed more than once")
            groups.append(group)

        return cls(tuple(groups))
