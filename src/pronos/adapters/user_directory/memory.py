"""In-memory UserDirectory implementation for tests and demos."""

from __future__ import annotations

from collections.abc import Iterable

from pronos.domain.model import Identity, username_key
from pronos.interfaces.user_directory import UserDirectory

from .errors import DuplicateUsernameError


class InMemoryUserDirectory(UserDirectory):
    """Non-durable user directory keyed by `username_key`."""

    def __init__(self, identities: Iterable[Identity] = ()) -> None:
        self._users: dict[str, Identity] = {}
        for identity in identities:
            self.add(identity)

    def __len__(self) -> int:
        return len(self._users)

    def add(self, identity: Identity) -> None:
        """Store a new identity.

        Raises:
            DuplicateUsernameError: If the username is taken, ignoring case.
        """
        key = username_key(identity.username)
        if key in self._users:
            raise DuplicateUsernameError(identity.username)
        self._users[key] = identity

    def find_by_username_ignore_case(self, username: str) -> Identity | None:
        return self._users.get(username_key(username))
