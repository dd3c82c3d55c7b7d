"""Unit tests for Email value object."""

import pytest

from usermanagement.domain.user import Email, InvalidEmailError


class TestEmail:
    def test_valid_email(self):
        email = Email("john@example.com")
        assert email.value == "john@example.com"

    def test_strips_whitespace(self):
        assert Email("  john@example.com  ").value == "john@example.com"

    def test_keeps_casing(self):
        email = Email("John.Doe@Example.COM")
        assert email.value == "John.Doe@Example.COM"
        assert email.normalized == "john.doe@example.com"

    @pytest.mark.parametrize(
        "value",
        ["", "not-an-email", "missing@tld", "@example.com", "a b@example.com"],
    )
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_matches_is_case_insensitive(self):
        email = Email("john@example.com")
        assert email.matches("JOHN@EXAMPLE.COM")
        assert email.matches(Email("John@Example.com"))
        assert not email.matches("jane@example.com")

    def test_str(self):
        assert str(Email("john@example.com")) == "john@example.com"

    @pytest.mark.parametrize(
        "value",
        ["o'brien@example.com", "a!b#c&d@example.com", "josé@example.com"],
    )
    def test_accepts_addresses_valid_at_the_api_boundary(self, value):
        assert Email(value).value == value

    def test_normalized_lowercases_non_ascii(self):
        assert Email("José@Example.com").normalized == "josé@example.com"
