"""PRONOS users CLI.

Commands
- ``pronos users add USERNAME [--email EMAIL]`` — register a user.
- ``pronos users show USERNAME``               — look a user up by name.
- ``pronos users whoami [--user NAME]``        — resolve the current user.

``whoami`` applies the resolver's precedence: ``--user`` wins; otherwise the
ambient identity from ``--as-user`` / ``PRONOS_USER`` is used.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from sqlalchemy.exc import OperationalError

from pronos.adapters.user_directory import DuplicateUsernameError
from pronos.bootstrap import AppContainer, bootstrap
from pronos.domain.model import Identity
from pronos.domain.validation import is_valid_email, is_not_empty
from pronos.service_layer.errors import ResolutionError

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, get_checked_url
from .helpers import success

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

SCHEMA_MISSING_MSG = "The users table is missing. " + UPGRADE_SCHEMA_INSTRUCTIONS


def _container(username: str | None = None) -> AppContainer:
    return bootstrap(username=username, url=get_checked_url())


def _run(action: Callable[[], Identity]) -> Identity:
    """Run a directory-backed action, turning known failures into CLI errors."""
    try:
        return action()
    except ResolutionError as e:
        raise click.ClickException(str(e)) from e
    except OperationalError as e:
        logger.debug("Directory query failed: %s", e)
        raise click.ClickException(SCHEMA_MISSING_MSG) from e


def _echo_identity(identity: Identity) -> None:
    click.echo(f"id       : {identity.id}")
    click.echo(f"username : {identity.username}")
    click.echo(f"email    : {identity.email or '-'}")


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """User directory commands."""


@users.command()
@click.argument("username")
@click.option("--email", help="Contact email address.")
def add(username: str, email: str | None) -> None:
    """Register a new user."""
    if not is_not_empty(username):
        raise click.BadParameter("Username must not be blank.", param_hint="USERNAME")
    if email is not None and not is_valid_email(email):
        raise click.BadParameter(f"{email!r} is not a valid email.", param_hint="--email")

    app = _container()
    identity = Identity(
        id=app.id_generator.new_id(),
        username=username,
        email=email.strip() if email is not None else None,
    )

    def _add() -> Identity:
        try:
            app.directory.add(identity)
        except DuplicateUsernameError as e:
            raise click.ClickException(str(e)) from e
        return identity

    _run(_add)
    logger.info("Registered user %s (%s)", identity.username, identity.id)
    success(f"User {identity.username} registered.")
    click.echo(identity.id)


@users.command()
@click.argument("username")
def show(username: str) -> None:
    """Show the user named USERNAME (case-insensitive)."""
    app = _container()
    _echo_identity(_run(lambda: app.resolver.resolve_by_name(username)))


@users.command()
@click.option("--user", "user_param", help="Explicit user; takes precedence.")
@click.option(
    "--as-user",
    "ambient_user",
    envvar="PRONOS_USER",
    show_envvar=True,
    help="Ambient authenticated user.",
)
def whoami(user_param: str | None, ambient_user: str | None) -> None:
    """Resolve the current user."""
    app = _container(ambient_user)
    _echo_identity(_run(lambda: app.resolver.resolve_with_fallback(user_param)))
