"""Terminal message helpers for the PRONOS CLI.

Messages go to stderr so stdout stays machine-readable, and fall back to
ASCII markers on terminals that cannot encode emoji.
"""

import click

WARN_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(glyphs: tuple[str, str]) -> str:
    """Return the emoji of an ``(emoji, fallback)`` pair if stderr can show it."""
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph(WARN_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
