"""PRONOS ``check-email`` command.

Prints one ``EMAIL: valid|invalid`` line per argument and exits with status 1
when any address is invalid.
"""

import logging

import click

from pronos.domain.validation import is_valid_email

logger = logging.getLogger(__name__)


@click.command(name="check-email")
@click.argument("emails", metavar="EMAIL...", nargs=-1, required=True)
@click.pass_context
def check_email(ctx: click.Context, emails: tuple[str, ...]) -> None:
    """Check that each EMAIL is a well-formed address."""
    invalid = 0
    for email in emails:
        valid = is_valid_email(email)
        if not valid:
            invalid += 1
        click.echo(f"{email}: {'valid' if valid else 'invalid'}")

    logger.debug("Checked %d email(s), %d invalid", len(emails), invalid)
    if invalid:
        ctx.exit(1)
