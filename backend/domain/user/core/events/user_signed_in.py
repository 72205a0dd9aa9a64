"""UserSignedIn domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class UserSignedIn(DomainEvent):
    """Domain event: a user presented valid credentials.

    Emitted by the auth service after password verification.
    Can be used for analytics, last login tracking, etc.

    Attributes:
        user_id: Id of the signed-in user
        email: E-mail used to sign in
    """

    user_id: int
    email: str

    @classmethod
    def create(cls, user_id: int, email: str) -> "UserSignedIn":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
        )
