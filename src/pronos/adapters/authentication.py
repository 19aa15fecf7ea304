"""Ambient authentication sources.

- `AnonymousAuthenticationSource`: nobody is ever authenticated.
- `StaticAuthenticationSource`: a fixed caller (CLI ``--as-user`` / ``PRONOS_USER``).
- `ContextAuthenticationSource`: a context-local security context, set by the
  hosting framework for the duration of a request. Backed by `contextvars`, so
  each thread or asyncio task sees its own caller.
- `ChainedAuthenticationSource`: asks several sources in order, e.g. a test
  header, then a bearer token, then the security context.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

from pronos.interfaces.authentication import Authentication, AuthenticationSource

# pylint: disable=too-few-public-methods


class AnonymousAuthenticationSource(AuthenticationSource):
    """Authentication source for which nobody is authenticated."""

    def current_authentication(self) -> Authentication | None:
        return None


class StaticAuthenticationSource(AuthenticationSource):
    """Authentication source that always reports the same caller."""

    def __init__(self, username: str) -> None:
        self._authentication = Authentication(name=username)

    def current_authentication(self) -> Authentication | None:
        return self._authentication


class ContextAuthenticationSource(AuthenticationSource):
    """Context-local security context.

    Each instance owns its own context variable, so two sources never see each
    other's callers.

    Example:
        ```python
        source = ContextAuthenticationSource()
        with source.authenticate("Thibaut"):
            source.current_username()  # "Thibaut"
        source.current_username()  # None
        ```
    """

    def __init__(self) -> None:
        self._current: contextvars.ContextVar[Authentication | None] = (
            contextvars.ContextVar(f"pronos_authentication_{id(self):x}", default=None)
        )

    def current_authentication(self) -> Authentication | None:
        return self._current.get()

    def set(self, authentication: Authentication | None) -> contextvars.Token:
        """Replace the current authentication; returns a token for `reset`."""
        return self._current.set(authentication)

    def reset(self, token: contextvars.Token) -> None:
        """Restore the authentication that was current before `set`."""
        self._current.reset(token)

    def clear(self) -> None:
        """Forget the current authentication."""
        self._current.set(None)

    @contextmanager
    def authenticate(
        self, username: str, authenticated: bool = True
    ) -> Iterator[Authentication]:
        """Authenticate `username` for the duration of the ``with`` block."""
        authentication = Authentication(name=username, authenticated=authenticated)
        token = self.set(authentication)
        try:
            yield authentication
        finally:
            self.reset(token)


class ChainedAuthenticationSource(AuthenticationSource):
    """Ask each source in turn; the first one that yields a username wins."""

    def __init__(self, *sources: AuthenticationSource) -> None:
        self.sources = sources

    def current_authentication(self) -> Authentication | None:
        for source in self.sources:
            auth = source.current_authentication()
            if auth is not None and auth.username is not None:
                return auth
        return None
