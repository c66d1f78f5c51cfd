"""Run settings: global CLI flags resolved once at startup.

medea reads no configuration files. The only environment input is
terminal capability detection, which Rich performs (TTY check,
``NO_COLOR``, ``TERM=dumb``) when ``--colors/--no-colors`` is not given.
Results go to stdout while errors and logs go to stderr, so color is
resolved separately for each stream.
"""

from __future__ import annotations

from typing import IO, Any

from pydantic import BaseModel
from rich.console import Console


def detect_color(stream: IO[str] | None = None, *, stderr: bool = False) -> bool:
    """Whether *stream* can render ANSI colors.

    Without an explicit *stream*, stdout is checked, or stderr when
    *stderr* is set.
    """
    console = Console(file=stream) if stream is not None else Console(stderr=stderr)
    return console.is_terminal and not console.no_color and console.color_system is not None


class MedeaSettings(BaseModel):
    """Global CLI flags, frozen after construction.

    Stored on the :class:`~medea.commands._context.AppContext` and never
    mutated; the output layer receives a derived ``OutputSettings``.
    """

    model_config = {"frozen": True}

    colors: bool = False
    stderr_colors: bool = False
    trim: bool = False
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        colors: bool | None = None,
        stream: IO[str] | None = None,
        err_stream: IO[str] | None = None,
        **cli_flags: Any,
    ) -> MedeaSettings:
        """Construct settings from a CLI invocation.

        *colors* is tri-state: ``None`` means detect from *stream* and
        *err_stream* independently, a bool forces both.
        """
        if colors is None:
            return cls(
                colors=detect_color(stream),
                stderr_colors=detect_color(err_stream, stderr=True),
                **cli_flags,
            )
        return cls(colors=colors, stderr_colors=colors, **cli_flags)
