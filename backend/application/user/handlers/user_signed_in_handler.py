"""User signed-in event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_signed_in import UserSignedIn


logger = logging.getLogger(__name__)


@dataclass
class UserSignedInHandler:
    """Handler for UserSignedIn domain event."""

    async def handle(self, event: UserSignedIn) -> None:
        logger.info(
            "User signed in",
            extra={
                "user_id": event.user_id,
                "signed_in_at": event.occurred_at.isoformat(),
            },
        )
