"""REST API for user accounts: authentication and user management.

Mounted under /auth. Signing up or in stores the user id in the
cookie-backed session; signing out removes it.
"""

import logging
from typing import Any, List, MutableMapping, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import (
    get_auth_service,
    get_current_user,
    get_session,
    get_users_service,
    require_current_user,
)
from api.schemas import CreateUserRequest, UpdateUserRequest, UserResponse
from application.user.services.auth_service import AuthService
from application.user.services.users_service import UsersService
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from infrastructure.user.current_user_middleware import SESSION_USER_KEY

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["users"])


def parse_user_id(raw: str) -> int:
    """Convert a path id to int; anything else cannot name a user.

    Raises:
        UserNotFoundError: If raw is not a positive integer
    """
    try:
        user_id = int(raw)
    except (TypeError, ValueError):
        raise UserNotFoundError(raw) from None

    if user_id <= 0:
        raise UserNotFoundError(raw)
    return user_id


@router.get("/whoami", response_model=UserResponse)
async def who_am_i(current_user: User = Depends(require_current_user)) -> UserResponse:
    """Return the signed-in user (403 when signed out)."""
    return UserResponse.from_domain(current_user)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    session: MutableMapping[str, Any] = Depends(get_session),
    current_user: Optional[User] = Depends(get_current_user),
) -> Response:
    """Forget the signed-in user."""
    session.pop(SESSION_USER_KEY, None)
    logger.info(
        "auth.signout",
        extra={"user_id": current_user.id if current_user else None},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    body: CreateUserRequest,
    session: MutableMapping[str, Any] = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Create an account and sign it in.

    Raises:
        EmailInUseError: If the e-mail is taken (400)
    """
    user = await auth_service.signup(body.email, body.password)
    session[SESSION_USER_KEY] = user.id
    return UserResponse.from_domain(user)


@router.post("/signin", response_model=UserResponse)
async def sign_in(
    body: CreateUserRequest,
    session: MutableMapping[str, Any] = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Check credentials and store the user in the session.

    Raises:
        UserNotFoundError: Unknown e-mail (404)
        InvalidPasswordError: Wrong password (400)
    """
    user = await auth_service.signin(body.email, body.password)
    session[SESSION_USER_KEY] = user.id
    return UserResponse.from_domain(user)


@router.get("/{id}", response_model=UserResponse)
async def find_user(
    id: str,
    users_service: UsersService = Depends(get_users_service),
) -> UserResponse:
    """Get a single user by id.

    Raises:
        UserNotFoundError: If no user has this id (404)
    """
    user = await users_service.find_one(parse_user_id(id))
    if not user:
        raise UserNotFoundError(id)
    return UserResponse.from_domain(user)


@router.get("", response_model=List[UserResponse])
async def find_all_users(
    email: str = Query(...),
    users_service: UsersService = Depends(get_users_service),
) -> List[UserResponse]:
    """List users registered with an e-mail."""
    users = await users_service.find(email)
    return [UserResponse.from_domain(user) for user in users]


@router.patch("/{id}", response_model=UserResponse)
async def update_user(
    id: str,
    body: UpdateUserRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Change e-mail and/or password of a user.

    Raises:
        UserNotFoundError: If no user has this id (404)
        EmailInUseError: If the new e-mail is taken (400)
    """
    user = await auth_service.change_credentials(
        parse_user_id(id), email=body.email, password=body.password
    )
    return UserResponse.from_domain(user)


@router.delete("/{id}", response_model=UserResponse)
async def remove_user(
    id: str,
    users_service: UsersService = Depends(get_users_service),
) -> UserResponse:
    """Delete a user and return it.

    Raises:
        UserNotFoundError: If no user has this id (404)
    """
    user = await users_service.remove(parse_user_id(id))
    return UserResponse.from_domain(user)
