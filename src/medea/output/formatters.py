"""Rich/JSON output helpers.

The CLI renders ToolResult for humans (plain text, optionally colored)
or machines (--json). The formatter layer adapts ToolResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from medea.output.renderers import render_result

if TYPE_CHECKING:
    from medea.services.result import ToolResult


class OutputSettings(BaseModel):
    """Read-only output context computed once per run.

    ``color`` styles results on stdout, ``error_color`` styles failures
    on stderr.
    """

    model_config = {"frozen": True}

    json_output: bool = False
    color: bool = False
    error_color: bool = False
    trim: bool = False
    verbose: bool = False


def format_result(result: ToolResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ToolResult for display.

    Args:
        result: The tool result to format.
        settings: Output context; defaults to plain text without color.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    color = settings.color if result.ok else settings.error_color
    return render_result(result, color=color, verbose=settings.verbose)
