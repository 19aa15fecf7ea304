"""User-resolution error definitions."""


class ResolutionError(Exception):
    """Base class for errors raised while resolving the current user."""


class UserNotFoundError(ResolutionError):
    """Raised when no identity matches the requested username."""

    username: str | None

    def __init__(self, username: str | None, message: str | None = None) -> None:
        if message is None:
            message = f"User ({username}) not found"
        super().__init__(message)
        self.username = username


class AuthenticationRequiredError(UserNotFoundError):
    """Raised when there is neither a user parameter nor an authenticated user."""

    def __init__(self) -> None:
        super().__init__(
            None,
            "Authentication required: no user parameter and no authenticated user",
        )


class MissingUsernameError(ResolutionError, ValueError):
    """Raised when an explicit username is required but blank or missing."""

    def __init__(self) -> None:
        super().__init__("A non-blank username is required")
