"""User domain GraphQL mutations."""

import strawberry
from strawberry.types import Info

from application.user.services.auth_service import AuthService
from graphql_api.resolvers.user.queries import get_users_service
from graphql_api.types_user import CredentialsInput, UpdateUserInput, UserType
from infrastructure.user.current_user_middleware import SESSION_USER_KEY


def get_auth_service(info: Info) -> AuthService:
    auth_service = info.context.get("auth_service")
    if not auth_service:
        raise RuntimeError("auth_service not found in context")
    return auth_service


@strawberry.type
class UserMutations:
    """User domain mutations.

    Signup and signin write the user id into the same cookie session
    the REST API uses.

    Examples:
        mutation {
          user {
            signup(input: { email: "test@test.com", password: "secret" }) {
              id
              email
            }
          }
        }
    """

    @strawberry.mutation
    async def signup(self, info: Info, input: CredentialsInput) -> UserType:
        """Create an account and sign it in.

        Raises:
            EmailInUseError: If the e-mail is taken
        """
        user = await get_auth_service(info).signup(input.email, input.password)
        info.context.session[SESSION_USER_KEY] = user.id
        return UserType.from_domain(user)

    @strawberry.mutation
    async def signin(self, info: Info, input: CredentialsInput) -> UserType:
        """Check credentials and sign the user in.

        Raises:
            UserNotFoundError: Unknown e-mail
            InvalidPasswordError: Wrong password
        """
        user = await get_auth_service(info).signin(input.email, input.password)
        info.context.session[SESSION_USER_KEY] = user.id
        return UserType.from_domain(user)

    @strawberry.mutation
    async def signout(self, info: Info) -> bool:
        """Forget the signed-in user; true if somebody was signed in."""
        return info.context.session.pop(SESSION_USER_KEY, None) is not None

    @strawberry.mutation
    async def update_user(self, info: Info, id: int, input: UpdateUserInput) -> UserType:
        """Change e-mail and/or password.

        Raises:
            UserNotFoundError: If no user has this id
            EmailInUseError: If the new e-mail is taken
        """
        user = await get_auth_service(info).change_credentials(
            id, email=input.email, password=input.password
        )
        return UserType.from_domain(user)

    @strawberry.mutation
    async def remove_user(self, info: Info, id: int) -> UserType:
        """Delete a user and return it.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await get_users_service(info).remove(id)
        return UserType.from_domain(user)
