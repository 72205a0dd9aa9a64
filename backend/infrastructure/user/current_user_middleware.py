"""FastAPI middleware attaching the signed-in user to the request."""

import logging
from typing import Any, Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from application.user.services.users_service import UsersService

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


class CurrentUserMiddleware(BaseHTTPMiddleware):
    """Resolve `request.state.current_user` from the session.

    Reads `user_id` from the session set up by SessionMiddleware (which
    must wrap this middleware). A request without a session is treated
    like one with an empty session. Downstream handlers always find
    `request.state.current_user`, None when nobody is signed in.

    Examples:
        >>> app.add_middleware(CurrentUserMiddleware, users_service_provider=get_users_service)
        >>> app.add_middleware(SessionMiddleware, secret_key="...")
        >>> # In route handler:
        >>> user = request.state.current_user
    """

    def __init__(
        self,
        app: Any,
        users_service_provider: Callable[[], UsersService],
    ) -> None:
        """Initialize middleware.

        Args:
            app: ASGI application
            users_service_provider: Callable returning the UsersService to query
        """
        super().__init__(app)
        self.users_service_provider = users_service_provider

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Look up the session user, then hand over to the next handler."""
        request.state.current_user = await self.resolve_user(request)
        return await call_next(request)

    async def resolve_user(self, request: Request) -> Optional[Any]:
        session = request.scope.get("session") or {}
        user_id = session.get(SESSION_USER_KEY)
        if not user_id:
            return None

        user = await self.users_service_provider().find_one(user_id)
        if user is None:
            logger.info("current_user.stale_session", extra={"user_id": user_id})
        return user
