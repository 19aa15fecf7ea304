"""Interfaces for the ambient authentication source.

The hosting framework knows who is calling; the service layer only needs the
caller's username. `AuthenticationSource` decouples the two: adapters expose
whatever the framework provides as an `Authentication`, and the base class
turns that into an optional username.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

ANONYMOUS_PRINCIPAL = "anonymousUser"


@dataclass(frozen=True)
class Authentication:
    """Authentication handle supplied by the hosting environment.

    Attributes:
        name: Principal name, if any.
        authenticated: Whether the principal has been authenticated.
    """

    name: str | None
    authenticated: bool = True

    @property
    def username(self) -> str | None:
        """Return the principal name if it identifies an authenticated user.

        Unauthenticated handles, blank names and the anonymous principal do
        not identify anyone.
        """
        if not self.authenticated or self.name is None or not self.name.strip():
            return None
        if self.name == ANONYMOUS_PRINCIPAL:
            return None
        return self.name


class AuthenticationSource(abc.ABC):
    """Contract for obtaining the current caller's authentication."""

    @abc.abstractmethod
    def current_authentication(self) -> Authentication | None:
        """Return the current authentication handle, or None if absent."""

    def current_username(self) -> str | None:
        """Return the current caller's username, or None if unauthenticated."""
        if (auth := self.current_authentication()) is None:
            return None
        return auth.username
