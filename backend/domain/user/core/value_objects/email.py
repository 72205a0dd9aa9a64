"""Email value object."""

import re
from dataclasses import dataclass

from domain.user.core.exceptions.user_errors import InvalidEmailError

MAX_EMAIL_LENGTH = 254

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email:
    """E-mail address value object.

    The address is the login identifier of a user, so it is
    normalized (surrounding whitespace stripped, lower-cased)
    before any comparison or lookup.

    Examples:
        >>> Email(" Test@Example.COM ").value
        'test@example.com'

        >>> Email("test@example.com").domain
        'example.com'

    Raises:
        InvalidEmailError: If the address is empty, malformed or too long
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the address."""
        if not isinstance(self.value, str):
            raise InvalidEmailError(repr(self.value), "must be a string")

        normalized = self.value.strip().lower()
        if not normalized:
            raise InvalidEmailError(self.value, "cannot be empty")

        if len(normalized) > MAX_EMAIL_LENGTH:
            raise InvalidEmailError(
                normalized, f"too long ({len(normalized)} chars, max {MAX_EMAIL_LENGTH})"
            )

        if not _EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(normalized, "expected format <local>@<domain>.<tld>")

        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        """Part of the address after the '@'."""
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"Email('{self.value}')"
