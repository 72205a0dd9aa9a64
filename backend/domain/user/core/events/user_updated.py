"""UserUpdated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple
from uuid import uuid4

from domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class UserUpdated(DomainEvent):
    """Domain event: account attributes were changed.

    Only the names of the changed fields are recorded; the new
    password hash is never carried on the event.

    Attributes:
        user_id: Id of the updated user
        changed_fields: Names of changed attributes, e.g. ("email",)

    Examples:
        >>> event = UserUpdated.create(user_id=1, changed_fields=("password",))
        >>> event.changed_fields
        ('password',)
    """

    user_id: int
    changed_fields: Tuple[str, ...]

    @classmethod
    def create(cls, user_id: int, changed_fields: Tuple[str, ...]) -> "UserUpdated":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            changed_fields=tuple(changed_fields),
        )
