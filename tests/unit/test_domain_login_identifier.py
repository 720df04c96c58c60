"""Unit tests for login identifier normalization.

Tests cover:
- Plain string: email when it parses as one, else username
- Selector mapping priority (id > username > email)
- Rejection of unsupported shapes
- Identifier echo for error details
"""

import pytest

from accounts.domain.value_objects import (
    ByEmail,
    ById,
    ByUsername,
    parse_login_identifier,
)
from accounts.domain.value_objects.login_identifier import describe_raw_identifier


@pytest.mark.unit
class TestParseLoginIdentifier:
    """Test parse_login_identifier."""

    def test_plain_string_email_is_lowercased(self):
        assert parse_login_identifier("Ann@X.com") == ByEmail("ann@x.com")

    def test_plain_string_without_at_is_username(self):
        assert parse_login_identifier("ann") == ByUsername("ann")

    def test_selector_prefers_id_over_username_and_email(self):
        raw = {"id": "u1", "username": "ann", "email": "ann@x.com"}

        assert parse_login_identifier(raw) == ById("u1")

    def test_selector_prefers_username_over_email(self):
        raw = {"username": "ann", "email": "ann@x.com"}

        assert parse_login_identifier(raw) == ByUsername("ann")

    def test_selector_email_only(self):
        assert parse_login_identifier({"email": "ANN@x.com"}) == ByEmail("ann@x.com")

    def test_already_parsed_identifier_passes_through(self):
        identifier = ById("u1")

        assert parse_login_identifier(identifier) is identifier

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"id": ""},
            {"id": 42},
            {"email": "not-an-email"},
            {"username": "  "},
            42,
            ["ann"],
        ],
    )
    def test_rejects_unsupported_shapes(self, raw):
        with pytest.raises(ValueError):
            parse_login_identifier(raw)


@pytest.mark.unit
class TestDescribe:
    """Test identifier echoes used in error details."""

    def test_variant_describe(self):
        assert ById("u1").describe() == {"id": "u1"}
        assert ByUsername("ann").describe() == {"username": "ann"}
        assert ByEmail("ann@x.com").describe() == {"email": "ann@x.com"}

    def test_describe_raw_string(self):
        assert describe_raw_identifier("ann") == {"user": "ann"}

    def test_describe_raw_mapping_keeps_known_keys_only(self):
        raw = {"username": "ann", "password": "Secret1!"}

        assert describe_raw_identifier(raw) == {"username": "ann"}

    def test_describe_raw_unsupported_is_none(self):
        assert describe_raw_identifier(None) is None
        assert describe_raw_identifier({}) is None
