"""Unit test fixtures: fakes standing in for the users service."""

import random
from datetime import datetime, timezone
from typing import List, Optional

import pytest

from application.user.services.users_service import EmailLike, as_email
from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from infrastructure.user.password_hasher import ScryptPasswordHasher


def _make_user(user_id: int = 1, email: str = "test@email.com", password: str = "salt.hash") -> User:
    now = datetime.now(timezone.utc)
    return User(id=user_id, email=Email(email), password=password, created_at=now, updated_at=now)


class FakeUsersService:
    """Minimal UsersService double backed by a list."""

    def __init__(self) -> None:
        self.users: List[User] = []

    async def find(self, email: EmailLike) -> List[User]:
        address = as_email(email)
        return [user for user in self.users if user.email == address]

    async def find_one(self, user_id: Optional[int]) -> Optional[User]:
        if not user_id:
            return None
        return next((user for user in self.users if user.id == user_id), None)

    async def create(self, email: EmailLike, password: str) -> User:
        user = _make_user(random.randint(1, 999999), str(as_email(email)), password)
        self.users.append(user)
        return user

    async def update(self, user_id: int, email=None, password=None) -> User:
        user = await self.find_one(user_id)
        assert user is not None
        if email is not None:
            user.change_email(as_email(email))
        if password is not None:
            user.change_password(password)
        return user


@pytest.fixture
def fast_hasher() -> ScryptPasswordHasher:
    """Scrypt hasher with a low cost factor to keep tests quick."""
    return ScryptPasswordHasher(n=1024)


@pytest.fixture
def fake_users_service() -> FakeUsersService:
    return FakeUsersService()


@pytest.fixture
def make_user():
    """Factory building persisted-looking User entities."""
    return _make_user
