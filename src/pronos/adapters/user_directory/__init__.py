"""User directory adapters."""

from .errors import DirectoryError, DuplicateUsernameError
from .memory import InMemoryUserDirectory
from .sqlalchemy_directory import SqlAlchemyUserDirectory

__all__ = [
    "DirectoryError",
    "DuplicateUsernameError",
    "InMemoryUserDirectory",
    "SqlAlchemyUserDirectory",
]
