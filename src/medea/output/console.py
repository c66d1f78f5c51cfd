"""Rich Console factory and theme for medea output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. Color is decided once at
startup and passed in; the console never inspects the real terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MEDEA_THEME = Theme(
    {
        "medea.error": "bold red",
        "medea.code": "red",
        "medea.heading": "bold",
        "medea.valid": "green",
        "medea.invalid": "bold red",
        "medea.unchecked": "yellow",
        "medea.key": "dim",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles. Off for pipes and tests.
        width: Override terminal width. Long lines are never wrapped.
    """
    return Console(
        file=StringIO(),
        theme=MEDEA_THEME,
        force_terminal=color,
        no_color=not color,
        color_system="standard" if color else None,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
