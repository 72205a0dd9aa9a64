"""UserCreated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    """Domain event: a new account was registered.

    Attributes:
        user_id: Repository-assigned user id
        email: Normalized e-mail of the new account

    Examples:
        >>> event = UserCreated.create(user_id=1, email="test@test.com")
        >>> event.user_id
        1
    """

    user_id: int
    email: str

    @classmethod
    def create(cls, user_id: int, email: str) -> "UserCreated":
        """Create new UserCreated event with generated id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
        )
