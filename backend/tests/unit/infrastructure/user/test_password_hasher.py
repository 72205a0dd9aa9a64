"""Unit tests for ScryptPasswordHasher."""

import pytest

from infrastructure.user.password_hasher import ScryptPasswordHasher


@pytest.fixture
def hasher() -> ScryptPasswordHasher:
    return ScryptPasswordHasher(n=1024)


class TestScryptPasswordHasher:
    """Test hashing and verification."""

    @pytest.mark.asyncio
    async def test_hash_format(self, hasher: ScryptPasswordHasher) -> None:
        stored = await hasher.hash("123password")

        salt, digest = stored.split(".")
        assert len(salt) == 16
        assert len(digest) == 64
        int(salt, 16)
        int(digest, 16)

    @pytest.mark.asyncio
    async def test_same_password_different_salts(self, hasher: ScryptPasswordHasher) -> None:
        assert await hasher.hash("123password") != await hasher.hash("123password")

    @pytest.mark.asyncio
    async def test_verify(self, hasher: ScryptPasswordHasher) -> None:
        stored = await hasher.hash("123password")

        assert await hasher.verify("123password", stored) is True
        assert await hasher.verify("wrong", stored) is False

    @pytest.mark.asyncio
    async def test_verify_with_other_cost_fails(self, hasher: ScryptPasswordHasher) -> None:
        stored = await hasher.hash("123password")

        assert await ScryptPasswordHasher(n=2048).verify("123password", stored) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored", ["", "nodot", ".abcd", "salt.", "salt.not-hex"])
    async def test_verify_malformed_hash(self, hasher: ScryptPasswordHasher, stored: str) -> None:
        assert await hasher.verify("123password", stored) is False
