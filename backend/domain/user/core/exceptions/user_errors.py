"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: object = None):
        """Initialize with the identifier that was looked up.

        Args:
            identifier: User id or e-mail that was not found (optional)
        """
        self.identifier = identifier
        super().__init__("user not found")


class EmailInUseError(UserDomainError):
    """Another account is already registered with this e-mail."""

    def __init__(self, email: str):
        """Initialize with the conflicting e-mail.

        Args:
            email: Address that is already taken
        """
        self.email = email
        super().__init__("email in use")


class InvalidPasswordError(UserDomainError):
    """Supplied password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__("bad password")


class InvalidEmailError(UserDomainError, ValueError):
    """E-mail address is malformed."""

    def __init__(self, email: str, reason: str):
        """Initialize with invalid e-mail and reason.

        Args:
            email: Invalid e-mail value
            reason: Reason why it's invalid
        """
        self.email = email
        self.reason = reason
        super().__init__(f"Invalid email '{email}': {reason}")


class NotAuthenticatedError(UserDomainError):
    """Operation requires a signed-in user."""

    def __init__(self) -> None:
        super().__init__("not signed in")


class EmptyPasswordError(UserDomainError, ValueError):
    """A password must contain at least one character."""

    def __init__(self) -> None:
        super().__init__("password cannot be empty")
