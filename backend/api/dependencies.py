"""Dependency providers for the HTTP and GraphQL surfaces.

Services are process-wide singletons built lazily from the configured
repository. Tests swap them through `app.dependency_overrides` or call
`reset_dependencies()` between runs.
"""

import logging
from typing import Any, MutableMapping, Optional

from fastapi import Depends, Request

from application.user.handlers.registry import register_user_event_handlers
from application.user.services.auth_service import AuthService
from application.user.services.users_service import UsersService
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import NotAuthenticatedError
from domain.user.core.ports.password_hasher import IPasswordHasher
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.current_user_middleware import SESSION_USER_KEY
from infrastructure.user.password_hasher import ScryptPasswordHasher
from infrastructure.user.repository_factory import get_user_repository, reset_user_repository

logger = logging.getLogger(__name__)

_event_bus: Optional[InMemoryEventBus] = None
_password_hasher: Optional[IPasswordHasher] = None
_users_service: Optional[UsersService] = None
_auth_service: Optional[AuthService] = None

_UNSET = object()


def get_event_bus() -> InMemoryEventBus:
    """Shared event bus with the user handlers subscribed."""
    global _event_bus

    if _event_bus is None:
        _event_bus = InMemoryEventBus()
        register_user_event_handlers(_event_bus)

    return _event_bus


def get_password_hasher() -> IPasswordHasher:
    global _password_hasher

    if _password_hasher is None:
        _password_hasher = ScryptPasswordHasher()

    return _password_hasher


def get_users_service() -> UsersService:
    global _users_service

    if _users_service is None:
        _users_service = UsersService(
            repository=get_user_repository(),
            event_bus=get_event_bus(),
        )

    return _users_service


def get_auth_service() -> AuthService:
    global _auth_service

    if _auth_service is None:
        _auth_service = AuthService(
            users_service=get_users_service(),
            password_hasher=get_password_hasher(),
            event_bus=get_event_bus(),
        )

    return _auth_service


def reset_dependencies() -> None:
    """Drop every singleton, including the repository (for testing)."""
    global _event_bus, _password_hasher, _users_service, _auth_service

    _event_bus = None
    _password_hasher = None
    _users_service = None
    _auth_service = None
    reset_user_repository()


def get_session(request: Request) -> MutableMapping[str, Any]:
    """Mutable session of the current request (requires SessionMiddleware)."""
    return request.session


async def get_current_user(
    request: Request,
    users_service: UsersService = Depends(get_users_service),
) -> Optional[User]:
    """Signed-in user or None.

    Reuses the user resolved by CurrentUserMiddleware when it ran;
    otherwise performs the same session lookup and caches the result
    on request.state for the rest of the request.
    """
    current = getattr(request.state, "current_user", _UNSET)
    if current is not _UNSET:
        return current

    session = request.scope.get("session") or {}
    user = await users_service.find_one(session.get(SESSION_USER_KEY))
    request.state.current_user = user
    return user


async def require_current_user(
    current_user: Optional[User] = Depends(get_current_user),
) -> User:
    """Guard: only signed-in users pass.

    Raises:
        NotAuthenticatedError: If nobody is signed in (mapped to 403)
    """
    if current_user is None:
        raise NotAuthenticatedError()
    return current_user
