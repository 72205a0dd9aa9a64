"""Unit tests for domain error to HTTP mapping."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request

from api.errors import error_response_for, user_domain_error_handler
from domain.user.core.exceptions.user_errors import (
    EmailInUseError,
    EmptyPasswordError,
    InvalidEmailError,
    InvalidPasswordError,
    NotAuthenticatedError,
    UserDomainError,
    UserNotFoundError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (UserNotFoundError(1), (404, "user_not_found")),
        (EmailInUseError("a@b.io"), (400, "email_in_use")),
        (InvalidPasswordError(), (400, "invalid_password")),
        (EmptyPasswordError(), (400, "empty_password")),
        (InvalidEmailError("x", "bad"), (400, "invalid_email")),
        (NotAuthenticatedError(), (403, "forbidden")),
        (UserDomainError("other"), (400, "user_error")),
    ],
)
def test_error_response_for(error, expected):
    assert error_response_for(error) == expected


def test_subclass_uses_parent_mapping():
    class CustomNotFound(UserNotFoundError):
        pass

    assert error_response_for(CustomNotFound()) == (404, "user_not_found")


@pytest.mark.asyncio
async def test_handler_renders_json():
    request = MagicMock(spec=Request)
    request.url.path = "/auth/signin"

    response = await user_domain_error_handler(request, InvalidPasswordError())

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "invalid_password", "message": "bad password"}
