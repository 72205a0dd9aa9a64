"""Unit tests for the users REST routes.

Route functions are called directly with fake services injected in
place of the FastAPI dependencies.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api.schemas import CreateUserRequest, UpdateUserRequest, UserResponse
from api.users import (
    find_all_users,
    find_user,
    parse_user_id,
    remove_user,
    sign_in,
    sign_out,
    sign_up,
    update_user,
    who_am_i,
)
from domain.user.core.exceptions.user_errors import UserNotFoundError


@pytest.fixture
def user(make_user):
    return make_user(1, "asdf@asdf.com", "asdf")


@pytest.fixture
def users_service(user):
    """Users service fake returning one well-known user."""
    service = MagicMock()
    service.find_one = AsyncMock(return_value=user)
    service.find = AsyncMock(side_effect=lambda email: [user] if str(email) == str(user.email) else [])
    service.remove = AsyncMock(return_value=user)
    return service


@pytest.fixture
def auth_service(user):
    service = MagicMock()
    service.signin = AsyncMock(return_value=user)
    service.signup = AsyncMock(return_value=user)
    service.change_credentials = AsyncMock(return_value=user)
    return service


@pytest.mark.asyncio
async def test_find_all_users_returns_users_with_email(users_service):
    users = await find_all_users(email="asdf@asdf.com", users_service=users_service)

    assert len(users) == 1
    assert users[0].email == "asdf@asdf.com"


@pytest.mark.asyncio
async def test_find_user_returns_user(users_service):
    found = await find_user(id="1", users_service=users_service)

    assert found == UserResponse(id=1, email="asdf@asdf.com")
    users_service.find_one.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_find_user_raises_when_user_missing(users_service):
    users_service.find_one.return_value = None

    with pytest.raises(UserNotFoundError):
        await find_user(id="1", users_service=users_service)


@pytest.mark.asyncio
async def test_find_user_with_non_numeric_id_raises(users_service):
    with pytest.raises(UserNotFoundError):
        await find_user(id="abc", users_service=users_service)

    users_service.find_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_sign_in_updates_session_and_returns_user(auth_service):
    session = {}

    user = await sign_in(
        CreateUserRequest(email="asdf@asdf.com", password="asdf"),
        session=session,
        auth_service=auth_service,
    )

    assert user.id == 1
    assert session["user_id"] == 1


@pytest.mark.asyncio
async def test_sign_up_sets_session(auth_service):
    session = {}

    user = await sign_up(
        CreateUserRequest(email="ASDF@asdf.com", password="asdf"),
        session=session,
        auth_service=auth_service,
    )

    assert user.id == 1
    assert session == {"user_id": 1}
    auth_service.signup.assert_awaited_once_with("asdf@asdf.com", "asdf")


@pytest.mark.asyncio
async def test_sign_out_clears_session(user):
    session = {"user_id": 1}

    response = await sign_out(session=session, current_user=user)

    assert response.status_code == 204
    assert session == {}


@pytest.mark.asyncio
async def test_sign_out_when_signed_out():
    session = {}

    response = await sign_out(session=session, current_user=None)

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_who_am_i(user):
    assert await who_am_i(current_user=user) == UserResponse(id=1, email="asdf@asdf.com")


@pytest.mark.asyncio
async def test_update_user_delegates_to_auth_service(auth_service):
    body = UpdateUserRequest(password="newpassword")

    await update_user(id="1", body=body, auth_service=auth_service)

    auth_service.change_credentials.assert_awaited_once_with(1, email=None, password="newpassword")


@pytest.mark.asyncio
async def test_remove_user(users_service):
    removed = await remove_user(id="1", users_service=users_service)

    assert removed.id == 1
    users_service.remove.assert_awaited_once_with(1)


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5", ""])
def test_parse_user_id_rejects(raw):
    with pytest.raises(UserNotFoundError):
        parse_user_id(raw)


def test_parse_user_id():
    assert parse_user_id("42") == 42
