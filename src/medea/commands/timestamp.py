"""Command: timestamp parsing and conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.timestamps import TimestampTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "ts",
    cls=MedeaCommand,
    examples="""\
  $ medea ts -n --format iso
  $ medea ts 1234567890
  2009-02-13T23:31:30+00:00

  $ echo 1234567890 | medea ts -z Europe/Paris
  2009-02-14T00:31:30+01:00

  $ medea ts "2009-02-14T00:31:30+01:00" -f unix
  1234567890

  # negative epochs go after -- so they are not read as options
  $ medea ts -- -86400
  1969-12-31T00:00:00+00:00

  $ medea ts "13/02/2009 23:31" --it "%d/%m/%Y %H:%M" --iz America/Toronto -t "%Y-%m-%d %H:%M %Z\"""",
)
@TimestampTool.options
@click.pass_obj
def timestamp(app: AppContext, **raw: Any) -> None:
    """Parse and convert timestamps.

    Read a timestamp and convert it to the desired format. Both string
    (ISO 8601) and epoch (unix) timestamps are supported as input, and
    the type is detected automatically. TIMESTAMP defaults to standard
    input when omitted.
    """
    app.run(TimestampTool(), raw)
