"""User entity - aggregate root."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from domain.user.core.value_objects.email import Email


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class User:
    """User aggregate root.

    Represents a registered account. The integer id is assigned by the
    repository on first insert; until then it is None.

    Invariants:
    - email is normalized (see Email)
    - password always holds a salted hash ("<salt>.<hash>"), never the
      plain password
    - updated_at cannot be before created_at

    Examples:
        >>> user = User.create(Email("test@test.com"), "a1b2.c3d4")
        >>> user.id is None
        True
        >>> user.change_email(Email("new@test.com"))
        >>> str(user.email)
        'new@test.com'
    """

    id: Optional[int]
    email: Email
    password: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.password:
            raise ValueError("password hash cannot be empty")

        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at cannot be before created_at: {self.updated_at} < {self.created_at}"
            )

    @staticmethod
    def create(email: Email, password: str) -> "User":
        """Factory method to create a new, not yet persisted user.

        Args:
            email: Normalized e-mail address
            password: Salted password hash

        Returns:
            New User instance without id
        """
        now = _utcnow()
        return User(
            id=None,
            email=email,
            password=password,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def change_email(self, email: Email) -> None:
        """Replace the login e-mail."""
        self.email = email
        self.updated_at = _utcnow()

    def change_password(self, password: str) -> None:
        """Replace the stored password hash.

        Args:
            password: New salted hash (callers hash before calling)
        """
        if not password:
            raise ValueError("password hash cannot be empty")

        self.password = password
        self.updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        """Equality based on id once persisted, identity before."""
        if not isinstance(other, User):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={str(self.email)!r})"
