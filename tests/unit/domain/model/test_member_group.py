"""Tests for domain/model/member_group.py."""

import pytest

from memberorder.domain.model import member_group as groups
from memberorder.domain.model.member_group import MemberGroup, parse_group


class TestMemberGroup:
    """Tests for MemberGroup value object."""

    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="key must not be empty"):
            MemberGroup("")

    def test_equality_by_key(self) -> None:
        assert MemberGroup("angular_inputs") == groups.ANGULAR_INPUTS

    def test_str_is_key(self) -> None:
        assert str(groups.PRIVATE_SETTERS) == "private_setters"

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            groups.PUBLIC_FIELDS.key = "other"  # type: ignore[misc]


class TestTables:
    """Tests for built-in group tables."""

    def test_default_groups(self) -> None:
        assert [g.key for g in groups.DEFAULT_GROUPS] == [
            "public_fields",
            "private_fields",
            "public_getters",
            "private_getters",
            "public_setters",
            "private_setters",
            "constructors",
            "public_methods",
            "private_methods",
        ]

    def test_framework_groups_not_in_default_order(self) -> None:
        assert set(groups.FRAMEWORK_GROUPS).isdisjoint(groups.DEFAULT_GROUPS)

    def test_all_groups_unique(self) -> None:
        assert len(set(groups.ALL_GROUPS)) == 15


class TestParseGroup:
    """Tests for parse_group()."""

    def test_exact_key(self) -> None:
        assert parse_group("constructors") is groups.CONSTRUCTORS

    def test_dashes(self) -> None:
        assert parse_group("public-getters") is groups.PUBLIC_GETTERS

    def test_framework_short_name(self) -> None:
        assert parse_group("host-bindings") is groups.ANGULAR_HOST_BINDINGS
        assert parse_group("inputs") is groups.ANGULAR_INPUTS

    def test_surrounding_whitespace(self) -> None:
        assert parse_group("  private_methods ") is groups.PRIVATE_METHODS

    def test_unknown(self) -> None:
        assert parse_group("protected_methods") is None

    def test_case_sensitive(self) -> None:
        assert parse_group("Public_Fields") is None
