"""Unit tests for User entity."""

from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email


def _user(user_id=1, email="test@email.com") -> User:
    now = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    return User(id=user_id, email=Email(email), password="salt.hash", created_at=now, updated_at=now)


class TestUserEntity:
    """Test User entity."""

    @freeze_time("2025-01-01 12:00:00")
    def test_create_user(self) -> None:
        user = User.create(Email("test@email.com"), "salt.hash")

        assert user.id is None
        assert user.is_persisted is False
        assert user.email == Email("test@email.com")
        assert user.password == "salt.hash"
        assert user.created_at == datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert user.updated_at == user.created_at

    def test_empty_password_rejected(self) -> None:
        with pytest.raises(ValueError, match="password hash cannot be empty"):
            User.create(Email("test@email.com"), "")

    def test_updated_before_created_rejected(self) -> None:
        now = datetime.now(timezone.utc)
        with pytest.raises(ValueError, match="updated_at cannot be before created_at"):
            User(
                id=1,
                email=Email("test@email.com"),
                password="salt.hash",
                created_at=now,
                updated_at=now - timedelta(seconds=1),
            )

    def test_change_email_touches_updated_at(self) -> None:
        user = _user()

        with freeze_time("2025-01-02 08:00:00"):
            user.change_email(Email("new@email.com"))

        assert str(user.email) == "new@email.com"
        assert user.updated_at == datetime(2025, 1, 2, 8, 0, 0, tzinfo=timezone.utc)

    def test_change_password(self) -> None:
        user = _user()
        user.change_password("othersalt.otherhash")

        assert user.password == "othersalt.otherhash"

    def test_change_password_rejects_empty(self) -> None:
        user = _user()
        with pytest.raises(ValueError):
            user.change_password("")
        assert user.password == "salt.hash"


class TestUserEquality:
    """Equality and hashing of users."""

    def test_equal_by_id(self) -> None:
        assert _user(1, "a@email.com") == _user(1, "b@email.com")
        assert _user(1) != _user(2)

    def test_unpersisted_equal_only_to_itself(self) -> None:
        first = User.create(Email("test@email.com"), "salt.hash")
        second = User.create(Email("test@email.com"), "salt.hash")

        assert first == first
        assert first != second

    def test_not_equal_to_other_types(self) -> None:
        assert _user() != 1

    def test_hashable(self) -> None:
        assert len({_user(1), _user(1), _user(2)}) == 2

    def test_repr_hides_password(self) -> None:
        assert repr(_user()) == "User(id=1, email='test@email.com')"
