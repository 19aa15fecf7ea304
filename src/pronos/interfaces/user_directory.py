"""Defines the user directory port.

A user directory maps usernames to identities. The service layer only ever
looks users up by name; how identities are stored (and how they get there) is
an adapter concern.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pronos.domain.model import Identity

# pylint: disable=too-few-public-methods


class UserDirectory(abc.ABC):
    """Lookup of identities by username."""

    @abc.abstractmethod
    def find_by_username_ignore_case(self, username: str) -> Identity | None:
        """Find an identity by its username.

        Args:
            username: The username exactly as supplied by the caller.

        Returns:
            The matching identity, or None if no user has that username.

        Note:
            The match is case-insensitive. Implementers must not expect
            callers to normalize `username`; folding case is their job.
        """
