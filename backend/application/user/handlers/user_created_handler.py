"""User created event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_created import UserCreated


logger = logging.getLogger(__name__)


@dataclass
class UserCreatedHandler:
    """Handler for UserCreated domain event.

    Triggered when a new account signs up.

    Examples:
        >>> handler = UserCreatedHandler()
        >>> await handler.handle(UserCreated.create(user_id=1, email="a@b.io"))
    """

    async def handle(self, event: UserCreated) -> None:
        """Handle UserCreated event.

        Args:
            event: UserCreated domain event
        """
        logger.info(
            "User created",
            extra={
                "user_id": event.user_id,
                "email_domain": event.email.rsplit("@", 1)[-1],
                "created_at": event.occurred_at.isoformat(),
            },
        )
