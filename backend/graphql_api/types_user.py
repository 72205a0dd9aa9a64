"""GraphQL types for User domain."""

from typing import Optional

import strawberry

from domain.user.core.entities.user import User


@strawberry.type
class UserType:
    """Public view of a user account.

    The password hash is not part of the schema.

    Examples:
        query {
          user {
            whoami { id email }
          }
        }
    """

    id: int
    email: str

    @staticmethod
    def from_domain(user: User) -> "UserType":
        return UserType(id=user.id, email=str(user.email))


@strawberry.input
class CredentialsInput:
    """E-mail and plain password for signup/signin."""

    email: str
    password: str


@strawberry.input
class UpdateUserInput:
    """Partial update; omitted fields are left unchanged."""

    email: Optional[str] = None
    password: Optional[str] = None
