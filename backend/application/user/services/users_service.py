"""Users service: persistence-facing operations on user accounts."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from domain.shared.events.base import DomainEvent
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_removed import UserRemoved
from domain.user.core.events.user_updated import UserUpdated
from domain.user.core.exceptions.user_errors import EmailInUseError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email

logger = logging.getLogger(__name__)

EmailLike = Union[str, Email]


def as_email(value: EmailLike) -> Email:
    """Coerce a raw string to a normalized Email."""
    return value if isinstance(value, Email) else Email(value)


@dataclass
class UsersService:
    """Create, look up, update and remove users.

    Passwords handed to this service are already hashed; hashing and
    credential checks live in AuthService.

    Examples:
        >>> service = UsersService(InMemoryUserRepository())
        >>> user = await service.create("test@test.com", "salt.hash")
        >>> [u.id for u in await service.find("test@test.com")]
        [1]
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def create(self, email: EmailLike, password: str) -> User:
        """Persist a new user.

        Args:
            email: Login e-mail
            password: Salted password hash

        Returns:
            Persisted user with id assigned
        """
        user = await self.repository.add(User.create(as_email(email), password))
        logger.info("users.created", extra={"user_id": user.id})

        await self._publish(UserCreated.create(user_id=user.id, email=str(user.email)))
        return user

    async def find_one(self, user_id: Optional[int]) -> Optional[User]:
        """Get a user by id.

        A missing id (e.g. no user in the session) yields None instead of
        querying the repository.
        """
        if not user_id:
            return None
        return await self.repository.find_by_id(user_id)

    async def find(self, email: EmailLike) -> List[User]:
        """List users registered with an e-mail."""
        return await self.repository.find_by_email(as_email(email))

    async def update(
        self,
        user_id: int,
        email: Optional[EmailLike] = None,
        password: Optional[str] = None,
    ) -> User:
        """Change e-mail and/or password hash of an existing user.

        Args:
            user_id: Id of the user to update
            email: New login e-mail (optional)
            password: New salted password hash (optional)

        Returns:
            Updated user

        Raises:
            UserNotFoundError: If user doesn't exist
            EmailInUseError: If the new e-mail belongs to another user
        """
        user = await self.find_one(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        changed = []

        if email is not None:
            new_email = as_email(email)
            if new_email != user.email:
                owners = await self.repository.find_by_email(new_email)
                if any(owner.id != user.id for owner in owners):
                    raise EmailInUseError(str(new_email))
                user.change_email(new_email)
                changed.append("email")

        if password is not None:
            user.change_password(password)
            changed.append("password")

        if changed:
            await self.repository.save(user)
            logger.info("users.updated", extra={"user_id": user.id, "fields": changed})
            await self._publish(UserUpdated.create(user_id=user.id, changed_fields=tuple(changed)))

        return user

    async def remove(self, user_id: int) -> User:
        """Delete a user.

        Returns:
            The removed user

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = await self.find_one(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        await self.repository.delete(user.id)
        logger.info("users.removed", extra={"user_id": user.id})

        await self._publish(UserRemoved.create(user_id=user.id, email=str(user.email)))
        return user

    async def _publish(self, event: DomainEvent) -> None:
        if self.event_bus is not None:
            await self.event_bus.publish(event)
