"""In-memory User Repository for testing."""

from dataclasses import replace
from itertools import count
from typing import Dict, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import EmailInUseError, UserNotFoundError


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores copies of users in a dict keyed by id, so changes made to an
    entity only land here through save(). Ids start at 1 and are never
    reused, even after deletes. E-mails are unique like the unique
    index of the MongoDB collection.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.add(User.create(Email("a@b.io"), "salt.hash"))
        >>> user.id
        1
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[int, User] = {}
        self._ids = count(1)

    async def add(self, user: User) -> User:
        """Insert a new user and assign the next id.

        Raises:
            EmailInUseError: If another user already has this e-mail
        """
        if user.id is not None:
            raise ValueError(f"User already persisted with id {user.id}")
        self._check_email_free(user.email, owner_id=None)

        user.id = next(self._ids)
        self._users[user.id] = replace(user)
        return user

    async def save(self, user: User) -> None:
        """Replace the stored user with the same id.

        Raises:
            UserNotFoundError: If the id is unknown
            EmailInUseError: If another user already has the new e-mail
        """
        if user.id is None or user.id not in self._users:
            raise UserNotFoundError(user.id)
        self._check_email_free(user.email, owner_id=user.id)

        self._users[user.id] = replace(user)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def find_by_email(self, email: Email) -> List[User]:
        return [replace(user) for user in self._users.values() if user.email == email]

    async def delete(self, user_id: int) -> bool:
        """Delete user by id.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        if user_id not in self._users:
            raise UserNotFoundError(user_id)

        del self._users[user_id]
        return True

    def _check_email_free(self, email: Email, owner_id: Optional[int]) -> None:
        if any(u.email == email and u.id != owner_id for u in self._users.values()):
            raise EmailInUseError(str(email))

    def clear(self) -> None:
        """Clear all users from memory.

        Ids keep increasing after a clear.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
