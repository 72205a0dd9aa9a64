"""Scrypt-based password hasher."""

import asyncio
import hashlib
import hmac
import secrets

from domain.user.core.ports.password_hasher import IPasswordHasher

SALT_BYTES = 8
KEY_LENGTH = 32

# scrypt cost parameters (n=2**14, r=8, p=1 needs ~16 MiB)
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1


class ScryptPasswordHasher(IPasswordHasher):
    """Salted scrypt hashing with "<salt>.<hash>" hex output.

    The KDF runs in a worker thread so it does not block the event loop.

    Examples:
        >>> hasher = ScryptPasswordHasher()
        >>> stored = await hasher.hash("123password")
        >>> salt, digest = stored.split(".")
        >>> len(salt), len(digest)
        (16, 64)
        >>> await hasher.verify("123password", stored)
        True
    """

    def __init__(
        self,
        n: int = SCRYPT_N,
        r: int = SCRYPT_R,
        p: int = SCRYPT_P,
        key_length: int = KEY_LENGTH,
    ) -> None:
        self.n = n
        self.r = r
        self.p = p
        self.key_length = key_length

    async def hash(self, password: str) -> str:
        salt = secrets.token_hex(SALT_BYTES)
        digest = await asyncio.to_thread(self._derive, password, salt)
        return f"{salt}.{digest.hex()}"

    async def verify(self, password: str, stored: str) -> bool:
        salt, sep, stored_hex = stored.partition(".")
        if not sep or not salt or not stored_hex:
            return False

        try:
            expected = bytes.fromhex(stored_hex)
        except ValueError:
            return False

        digest = await asyncio.to_thread(self._derive, password, salt)
        return hmac.compare_digest(digest, expected)

    def _derive(self, password: str, salt: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self.n,
            r=self.r,
            p=self.p,
            dklen=self.key_length,
        )
