"""Unit tests for the User aggregate."""

from datetime import datetime, timezone

import pytest

from usermanagement.domain.user import (
    InvalidEmailError,
    User,
    UserRole,
    UserStatus,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _persisted_user(**overrides) -> User:
    values = {
        "id": 1,
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "role": UserRole.USER,
        "status": UserStatus.SUSPENDED,
        "city": "Berlin",
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(overrides)
    return User.reconstitute(**values)


class TestUserCreate:
    def test_defaults_status_to_active(self):
        user = User.create("John", "Doe", "john@example.com", UserRole.USER)

        assert user.status == UserStatus.ACTIVE
        assert user.id is None
        assert not user.is_persisted
        assert user.created_at is None

    def test_keeps_explicit_status(self):
        user = User.create(
            "John", "Doe", "john@example.com", UserRole.ADMIN, UserStatus.PENDING
        )
        assert user.status == UserStatus.PENDING

    def test_invalid_email_rejected(self):
        with pytest.raises(InvalidEmailError):
            User.create("John", "Doe", "nope", UserRole.USER)

    def test_full_name(self):
        user = User.create("John", "Doe", "john@example.com", UserRole.USER)
        assert user.full_name == "John Doe"


class TestUserUpdateDetails:
    def test_omitted_status_keeps_current(self):
        user = _persisted_user()

        user.update_details("Jane", "Roe", "jane@example.com", UserRole.MANAGER)

        assert user.status == UserStatus.SUSPENDED
        assert user.first_name == "Jane"
        assert user.email == "jane@example.com"
        assert user.role == UserRole.MANAGER

    def test_explicit_status_replaces_current(self):
        user = _persisted_user()

        user.update_details(
            "John", "Doe", "john@example.com", UserRole.USER, UserStatus.ACTIVE
        )

        assert user.status == UserStatus.ACTIVE

    def test_omitted_optional_fields_are_cleared(self):
        user = _persisted_user(phone="+1234567890")

        user.update_details("John", "Doe", "john@example.com", UserRole.USER)

        assert user.city is None
        assert user.phone is None

    def test_identity_fields_untouched(self):
        user = _persisted_user()

        user.update_details("Jane", "Doe", "john@example.com", UserRole.USER)

        assert user.id == 1
        assert user.created_at == NOW


class TestUserEquality:
    def test_equal_by_id(self):
        assert _persisted_user() == _persisted_user(first_name="Other")
        assert hash(_persisted_user()) == hash(_persisted_user())

    def test_unsaved_users_compare_by_identity(self):
        a = User.create("John", "Doe", "john@example.com", UserRole.USER)
        b = User.create("John", "Doe", "john@example.com", UserRole.USER)
        assert a != b
        assert a == a

    def test_has_email_ignores_case(self):
        assert _persisted_user().has_email("JOHN@example.com")
