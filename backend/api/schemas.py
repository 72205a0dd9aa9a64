"""Request and response models of the users API."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email


def _normalize_email(value: str) -> str:
    return str(Email(value))


class CreateUserRequest(BaseModel):
    """Credentials for sign-up and sign-in."""

    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class UpdateUserRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    email: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _normalize_email(value)


class UserResponse(BaseModel):
    """Public view of a user; the password hash is never serialized."""

    id: int
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=str(user.email))
