"""Password hasher port (interface)."""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Salted one-way password hashing.

    Stored values have the form "<salt>.<hash>" so the salt travels
    with the hash and no separate column is needed.
    """

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Hash a plain password with a fresh random salt.

        Args:
            password: Plain text password

        Returns:
            "<salt>.<hash>" string
        """
        pass

    @abstractmethod
    async def verify(self, password: str, stored: str) -> bool:
        """Check a plain password against a stored "<salt>.<hash>".

        Returns:
            True on match, False on mismatch or malformed stored value
        """
        pass
