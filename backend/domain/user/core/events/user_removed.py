"""UserRemoved domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class UserRemoved(DomainEvent):
    """Domain event: an account was deleted."""

    user_id: int
    email: str

    @classmethod
    def create(cls, user_id: int, email: str) -> "UserRemoved":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
        )
