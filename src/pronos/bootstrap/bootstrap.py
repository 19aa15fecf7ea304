"""Wire the user resolver to its directory and authentication source."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pronos import config
from pronos.adapters.authentication import (
    ChainedAuthenticationSource,
    ContextAuthenticationSource,
    StaticAuthenticationSource,
)
from pronos.adapters.db.engine import make_engine
from pronos.adapters.id_generators import UUIDv4Generator
from pronos.adapters.user_directory import SqlAlchemyUserDirectory
from pronos.interfaces.authentication import AuthenticationSource
from pronos.interfaces.id_generator import IdGenerator
from pronos.service_layer.user_resolver import UserResolver

logger = logging.getLogger(__name__)

#: Process-wide security context. Hosting frameworks authenticate callers
#: here for the duration of a request.
SECURITY_CONTEXT = ContextAuthenticationSource()


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application components."""

    directory: SqlAlchemyUserDirectory
    authentication: AuthenticationSource
    resolver: UserResolver
    id_generator: IdGenerator


def build_user_directory(url: str) -> SqlAlchemyUserDirectory:
    """Build a SQL-backed user directory for the given database URL."""
    return SqlAlchemyUserDirectory(make_engine(url))


def build_authentication_source(username: str | None = None) -> AuthenticationSource:
    """Build the ambient authentication source.

    A configured `username` takes precedence over the shared security context.
    """
    if username is None:
        return SECURITY_CONTEXT
    return ChainedAuthenticationSource(
        StaticAuthenticationSource(username), SECURITY_CONTEXT
    )


def bootstrap(username: str | None = None, url: str | None = None) -> AppContainer:
    """Bootstrap the resolver from configuration.

    Args:
        username: Ambient caller; defaults to `PRONOS_USER`. Surrounding
            whitespace is stripped and a blank name means no caller.
        url: Database URL; defaults to `PRONOS_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `PRONOS_DB_URL` is unset.
    """
    if username is None:
        username = config.get_ambient_user()
    else:
        username = config.normalize_ambient_user(username)
    directory = build_user_directory(url or config.get_db_url())
    authentication = build_authentication_source(username)
    logger.debug("Bootstrapped resolver (ambient user: %s)", username or "<none>")

    return AppContainer(
        directory=directory,
        authentication=authentication,
        resolver=UserResolver(directory, authentication),
        id_generator=UUIDv4Generator(),
    )
