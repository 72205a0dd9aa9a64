"""Auth service: sign-up and sign-in on top of UsersService."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.events.user_signed_in import UserSignedIn
from domain.user.core.exceptions.user_errors import (
    EmailInUseError,
    EmptyPasswordError,
    InvalidPasswordError,
    UserNotFoundError,
)
from domain.user.core.ports.password_hasher import IPasswordHasher
from application.user.services.users_service import EmailLike, UsersService, as_email

logger = logging.getLogger(__name__)


def _require_password(password: str) -> None:
    if not password:
        raise EmptyPasswordError()


@dataclass
class AuthService:
    """Credential handling for user accounts.

    Examples:
        >>> auth = AuthService(users_service, ScryptPasswordHasher())
        >>> user = await auth.signup("test@test.com", "123password")
        >>> user.password != "123password"
        True
        >>> await auth.signin("test@test.com", "123password") == user
        True
    """

    users_service: UsersService
    password_hasher: IPasswordHasher
    event_bus: Optional[IEventBus] = None

    async def signup(self, email: EmailLike, password: str) -> User:
        """Register a new account.

        Args:
            email: Login e-mail, must not be in use
            password: Plain text password

        Returns:
            Created user (password field holds the salted hash)

        Raises:
            EmailInUseError: If an account with this e-mail exists
            InvalidEmailError: If the e-mail is malformed
            EmptyPasswordError: If password is empty
        """
        address = as_email(email)
        _require_password(password)

        users = await self.users_service.find(address)
        if users:
            logger.info("auth.signup_rejected", extra={"reason": "email_in_use"})
            raise EmailInUseError(str(address))

        hashed = await self.password_hasher.hash(password)
        user = await self.users_service.create(address, hashed)

        logger.info("auth.signup", extra={"user_id": user.id})
        return user

    async def signin(self, email: EmailLike, password: str) -> User:
        """Check credentials and return the matching user.

        Raises:
            UserNotFoundError: If no account uses this e-mail
            InvalidPasswordError: If the password does not match
            EmptyPasswordError: If password is empty
        """
        address = as_email(email)
        _require_password(password)

        users = await self.users_service.find(address)
        if not users:
            logger.info("auth.signin_rejected", extra={"reason": "user_not_found"})
            raise UserNotFoundError(str(address))

        user = users[0]
        if not await self.password_hasher.verify(password, user.password):
            logger.info(
                "auth.signin_rejected",
                extra={"reason": "bad_password", "user_id": user.id},
            )
            raise InvalidPasswordError()

        logger.info("auth.signin", extra={"user_id": user.id})
        if self.event_bus is not None:
            await self.event_bus.publish(UserSignedIn.create(user_id=user.id, email=str(user.email)))

        return user

    async def change_credentials(
        self,
        user_id: int,
        email: Optional[EmailLike] = None,
        password: Optional[str] = None,
    ) -> User:
        """Update e-mail and/or password, hashing a new password first.

        Raises:
            UserNotFoundError: If user doesn't exist
            EmailInUseError: If the new e-mail belongs to another user
            EmptyPasswordError: If password is given but empty
        """
        if password is not None:
            _require_password(password)
        hashed = await self.password_hasher.hash(password) if password is not None else None
        return await self.users_service.update(user_id, email=email, password=hashed)
