"""GraphQL context factory for dependency injection.

Provides the user services and the HTTP request (for the session) to
every resolver through `info.context`.
"""

from typing import Any, MutableMapping, Optional

from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from api.dependencies import get_auth_service, get_users_service
from application.user.services.auth_service import AuthService
from application.user.services.users_service import UsersService


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Attributes:
        users_service: User lookup and management
        auth_service: Sign-up / sign-in
        request: Starlette request; strawberry sets it for HTTP calls,
            tests may pass any object with a `session` mapping
    """

    def __init__(
        self,
        users_service: UsersService,
        auth_service: AuthService,
        request: Optional[Any] = None,
    ) -> None:
        super().__init__()
        self.users_service = users_service
        self.auth_service = auth_service
        if request is not None:
            self.request = request

    @property
    def session(self) -> MutableMapping[str, Any]:
        """Session of the current request, an empty throwaway dict without one."""
        if self.request is None:
            return {}
        scope = getattr(self.request, "scope", None)
        if scope is not None and "session" not in scope:
            return {}
        return self.request.session

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Returns:
            Dependency instance or None if not found
        """
        return getattr(self, key, None)


async def get_graphql_context(
    request: Request,
    users_service: UsersService = Depends(get_users_service),
    auth_service: AuthService = Depends(get_auth_service),
) -> GraphQLContext:
    """Build the per-request context (used as GraphQLRouter context_getter)."""
    return GraphQLContext(
        users_service=users_service,
        auth_service=auth_service,
        request=request,
    )
