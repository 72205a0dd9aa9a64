"""User updated event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_updated import UserUpdated


logger = logging.getLogger(__name__)


@dataclass
class UserUpdatedHandler:
    """Handler for UserUpdated domain event.

    Logs which fields changed; values are never logged.
    """

    async def handle(self, event: UserUpdated) -> None:
        logger.info(
            "User updated",
            extra={
                "user_id": event.user_id,
                "changed_fields": list(event.changed_fields),
                "updated_at": event.occurred_at.isoformat(),
            },
        )
