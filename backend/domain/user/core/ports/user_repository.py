"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations own id assignment: ids are positive integers,
    unique and never reused.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def add(self, user: User) -> User:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user and assign its id.

        Args:
            user: Not yet persisted User entity (id is None)

        Returns:
            The same entity with its id set

        Raises:
            ValueError: If the user already has an id
            EmailInUseError: If another user already has this e-mail
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist changes of an existing user.

        Args:
            user: Persisted User entity

        Raises:
            UserNotFoundError: If no user with this id exists
            EmailInUseError: If another user already has the new e-mail
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by id.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> List[User]:
        """Find all users registered with an e-mail.

        Args:
            email: Normalized e-mail address

        Returns:
            Matching users (empty list when none)

        Note:
            Sign-up keeps e-mails unique, so the list holds at most one
            user; the list shape keeps the lookup usable as a filter.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete user by id.

        Returns:
            True if user was deleted

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        pass
