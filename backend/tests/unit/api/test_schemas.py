"""Unit tests for request/response models."""

import pytest
from pydantic import ValidationError

from api.schemas import CreateUserRequest, UpdateUserRequest, UserResponse


def test_create_request_normalizes_email():
    body = CreateUserRequest(email=" Test@Test.com ", password="secret")

    assert body.email == "test@test.com"


def test_create_request_rejects_invalid_email():
    with pytest.raises(ValidationError):
        CreateUserRequest(email="not-an-email", password="secret")


def test_create_request_requires_password():
    with pytest.raises(ValidationError):
        CreateUserRequest(email="test@test.com", password="")


def test_update_request_all_optional():
    body = UpdateUserRequest()

    assert body.email is None
    assert body.password is None


def test_user_response_hides_password(make_user):
    response = UserResponse.from_domain(make_user(3, "test@test.com", "salt.hash"))

    assert response.model_dump() == {"id": 3, "email": "test@test.com"}
