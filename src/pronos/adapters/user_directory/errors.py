"""Errors raised by writable user directories."""


class DirectoryError(Exception):
    """Base class for user directory errors."""


class DuplicateUsernameError(DirectoryError):
    """Raised when adding a user whose username is already taken (any case)."""

    username: str

    def __init__(self, username: str) -> None:
        super().__init__(f"Username ({username}) is already taken")
        self.username = username
