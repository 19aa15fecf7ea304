"""Value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """A resolved user record.

    Identities are created by a user directory and are immutable from the
    point of view of the service layer.
    """

    id: str
    username: str
    email: str | None = None


def username_key(username: str) -> str:
    """Return the form under which usernames are compared.

    Two usernames name the same user when their keys are equal. Case is
    folded with `str.casefold`, so ``"Élodie"`` and ``"ÉLODIE"`` collide;
    whitespace and accents are kept.
    """
    return username.casefold()
