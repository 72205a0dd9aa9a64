"""User domain GraphQL queries."""

from typing import Any, List, Optional

import strawberry
from strawberry.types import Info

from application.user.services.users_service import UsersService
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from graphql_api.types_user import UserType
from infrastructure.user.current_user_middleware import SESSION_USER_KEY

_UNSET = object()


def get_users_service(info: Info) -> UsersService:
    users_service = info.context.get("users_service")
    if not users_service:
        raise RuntimeError("users_service not found in context")
    return users_service


async def resolve_current_user(info: Info) -> Optional[User]:
    """Signed-in user, preferring the one resolved by CurrentUserMiddleware."""
    request: Any = info.context.get("request")
    current = getattr(getattr(request, "state", None), "current_user", _UNSET)
    if current is not _UNSET:
        return current

    user_id = info.context.session.get(SESSION_USER_KEY)
    return await get_users_service(info).find_one(user_id)


@strawberry.type
class UserQueries:
    """User domain queries.

    Examples:
        query {
          user {
            whoami { id email }
            byId(id: 1) { email }
            byEmail(email: "test@test.com") { id }
          }
        }
    """

    @strawberry.field
    async def whoami(self, info: Info) -> Optional[UserType]:
        """Signed-in user, or null when signed out."""
        user = await resolve_current_user(info)
        return UserType.from_domain(user) if user else None

    @strawberry.field
    async def by_id(self, info: Info, id: int) -> UserType:
        """Get a single user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await get_users_service(info).find_one(id)
        if user is None:
            raise UserNotFoundError(id)
        return UserType.from_domain(user)

    @strawberry.field
    async def by_email(self, info: Info, email: str) -> List[UserType]:
        """Users registered with an e-mail."""
        users = await get_users_service(info).find(email)
        return [UserType.from_domain(user) for user in users]
