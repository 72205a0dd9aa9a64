"""Integration tests for InMemoryUserRepository."""

import pytest

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import EmailInUseError, UserNotFoundError
from domain.user.core.value_objects.email import Email
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    """Create in-memory user repository."""
    return InMemoryUserRepository()


def _new_user(email="test@test.com"):
    return User.create(Email(email), "salt.hash")


@pytest.mark.asyncio
async def test_add_assigns_ids(repository):
    first = await repository.add(_new_user("a@test.com"))
    second = await repository.add(_new_user("b@test.com"))

    assert (first.id, second.id) == (1, 2)
    assert repository.count() == 2


@pytest.mark.asyncio
async def test_add_persisted_user_rejected(repository):
    user = await repository.add(_new_user())

    with pytest.raises(ValueError):
        await repository.add(user)


@pytest.mark.asyncio
async def test_ids_not_reused_after_delete(repository):
    user = await repository.add(_new_user("a@test.com"))
    await repository.delete(user.id)

    other = await repository.add(_new_user("b@test.com"))

    assert other.id == 2


@pytest.mark.asyncio
async def test_find_by_id(repository):
    user = await repository.add(_new_user())

    assert await repository.find_by_id(user.id) == user
    assert await repository.find_by_id(99) is None


@pytest.mark.asyncio
async def test_find_by_email(repository):
    user = await repository.add(_new_user())

    assert await repository.find_by_email(Email("TEST@test.com")) == [user]
    assert await repository.find_by_email(Email("other@test.com")) == []


@pytest.mark.asyncio
async def test_save(repository):
    user = await repository.add(_new_user())
    user.change_email(Email("new@test.com"))

    await repository.save(user)

    assert (await repository.find_by_id(user.id)).email == Email("new@test.com")


@pytest.mark.asyncio
async def test_save_unknown_user(repository):
    with pytest.raises(UserNotFoundError):
        await repository.save(_new_user())


@pytest.mark.asyncio
async def test_delete_unknown_user(repository):
    with pytest.raises(UserNotFoundError):
        await repository.delete(1)


@pytest.mark.asyncio
async def test_clear(repository):
    await repository.add(_new_user())

    repository.clear()

    assert repository.count() == 0


@pytest.mark.asyncio
async def test_add_with_taken_email_rejected(repository):
    await repository.add(_new_user("Taken@test.com"))
    duplicate = _new_user("taken@test.com")

    with pytest.raises(EmailInUseError):
        await repository.add(duplicate)

    assert duplicate.id is None
    assert repository.count() == 1


@pytest.mark.asyncio
async def test_save_with_email_of_other_user_rejected(repository):
    await repository.add(_new_user("taken@test.com"))
    user = await repository.add(_new_user("mine@test.com"))

    user.change_email(Email("taken@test.com"))
    with pytest.raises(EmailInUseError):
        await repository.save(user)

    assert (await repository.find_by_id(user.id)).email == Email("mine@test.com")


@pytest.mark.asyncio
async def test_save_keeping_own_email(repository):
    user = await repository.add(_new_user())
    user.change_password("other.hash")

    await repository.save(user)

    assert (await repository.find_by_id(user.id)).password == "other.hash"


@pytest.mark.asyncio
async def test_unsaved_changes_not_visible(repository):
    user = await repository.add(_new_user())
    found = await repository.find_by_id(user.id)

    found.change_email(Email("new@test.com"))

    assert await repository.find_by_email(Email("new@test.com")) == []
