"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Runs tool strategies and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import click

from medea.output.formatters import OutputSettings, format_result
from medea.services.input import InputSource

if TYPE_CHECKING:
    from medea.config.settings import MedeaSettings
    from medea.services.base import BaseTool
    from medea.services.result import ToolResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: MedeaSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from medea.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            color=settings.stderr_colors,
        )

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> AppContext:
        """Build a context from the root group's parsed parameters."""
        from medea.config.settings import MedeaSettings

        return cls(MedeaSettings.from_cli(**params))

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            color=self.settings.colors,
            error_color=self.settings.stderr_colors,
            trim=self.settings.trim,
            verbose=self.settings.verbose,
        )

    def run(self, tool: BaseTool, raw: Mapping[str, Any]) -> None:
        """Validate, execute and emit one tool invocation."""
        explicit = raw.get(tool.input_option) if tool.input_option else None
        source = InputSource(explicit, sys.stdin.buffer)
        self.emit(tool.run(raw, source))

    def emit(self, result: ToolResult) -> None:
        """Format and output a ToolResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Raw byte payloads are written unchanged.
        * Failure: writes to stderr, exits with 2 for usage errors and
          1 for processing errors.
        """
        settings = self.output_settings
        if result.ok and not settings.json_output and "raw" in result.data:
            stream = sys.stdout.buffer
            stream.write(result.data["raw"])
            stream.flush()
            return

        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output, nl=not settings.trim)
        else:
            logger.debug("Exiting with %d after %s", result.exit_code, result.op)
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)
