"""User removed event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_removed import UserRemoved


logger = logging.getLogger(__name__)


@dataclass
class UserRemovedHandler:
    """Handler for UserRemoved domain event."""

    async def handle(self, event: UserRemoved) -> None:
        logger.info(
            "User removed",
            extra={
                "user_id": event.user_id,
                "removed_at": event.occurred_at.isoformat(),
            },
        )
