"""Terminal message helpers for the company-track CLI.

Status lines (warnings, confirmations, errors) go to stderr with a glyph
that falls back to ASCII when the terminal cannot encode emoji. The menu,
listings and headings go to stdout.
"""

import click

GLYPHS = {
    # name: (emoji, ascii fallback)
    "caution": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(name: str) -> str:
    """Pick the glyph to print for a message kind.

    Args:
        name (str): A key of `GLYPHS` ("caution", "success" or "error").

    Returns:
        str: The emoji when stderr can encode it, else its ASCII fallback.
    """
    emoji, fallback = GLYPHS[name]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Department 'engineering' already exists.``
    """
    click.secho(f"{glyph('caution')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Report written to report.json``
    """
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)


def heading(text: str) -> None:
    """Print a bold, underlined heading to stdout, preceded by a blank line."""
    click.echo()
    click.secho(text, bold=True, underline=True)
