"""Resolution of the current user.

Resolution order for `UserResolver.resolve_with_fallback`:

1. The explicit username parameter, when it is not blank. It always wins:
   ambient authentication is not consulted on this path, even on a miss.
2. Otherwise, the username of the ambient authenticated caller.

Either way a single directory lookup is made with the username exactly as
supplied, and a miss raises `UserNotFoundError`. There is no further fallback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import (
    AuthenticationRequiredError,
    MissingUsernameError,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from pronos.domain.model import Identity
    from pronos.interfaces.authentication import AuthenticationSource
    from pronos.interfaces.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class UserResolver:
    """Resolve identities from an explicit username or the ambient caller."""

    def __init__(
        self, directory: UserDirectory, authentication: AuthenticationSource
    ) -> None:
        self.directory = directory
        self.authentication = authentication

    def _lookup(self, username: str) -> Identity:
        logger.debug("Looking up user %s", username)
        if (identity := self.directory.find_by_username_ignore_case(username)) is None:
            logger.warning("User %s not found in directory", username)
            raise UserNotFoundError(username)
        return identity

    def resolve_by_name(self, username: str | None) -> Identity:
        """Resolve the identity named by an explicit username.

        Args:
            username: Username to look up, passed to the directory unmodified.

        Returns:
            The matching identity.

        Raises:
            MissingUsernameError: If `username` is None or blank.
            UserNotFoundError: If the directory has no such user.
        """
        if username is None or not username.strip():
            raise MissingUsernameError
        return self._lookup(username)

    def resolve_current(self) -> Identity:
        """Resolve the identity of the ambient authenticated caller.

        Raises:
            AuthenticationRequiredError: If nobody is authenticated.
            UserNotFoundError: If the caller is unknown to the directory.
        """
        if (username := self.authentication.current_username()) is None:
            logger.warning("No authenticated user and no user parameter")
            raise AuthenticationRequiredError
        logger.debug("Using authenticated user %s", username)
        return self._lookup(username)

    def resolve_with_fallback(self, username: str | None = None) -> Identity:
        """Resolve the current user, preferring the explicit parameter.

        Args:
            username: Optional username parameter. Blank values count as absent.

        Returns:
            The resolved identity.

        Raises:
            AuthenticationRequiredError: If no parameter is given and nobody
                is authenticated.
            UserNotFoundError: If the selected username is unknown.
        """
        if username is not None and username.strip():
            logger.debug("Using user parameter %s", username)
            return self._lookup(username)
        return self.resolve_current()

    def resolve_id_by_name(self, username: str | None) -> str:
        """Return the id of the identity named by `username`."""
        return self.resolve_by_name(username).id

    def resolve_id_with_fallback(self, username: str | None = None) -> str:
        """Return the id of the current user (see `resolve_with_fallback`)."""
        return self.resolve_with_fallback(username).id

    def is_user_authenticated(self) -> bool:
        """Return True if the ambient source currently yields a username."""
        return self.authentication.current_username() is not None
