"""Command: UUID generation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.uuids import UuidTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "uuid",
    cls=MedeaCommand,
    examples="""\
  # one random (v4) uuid
  medea uuid

  # five time-based uuids in upper case
  medea uuid -V 1 -c 5 -u""",
)
@UuidTool.options
@click.pass_obj
def uuid_cmd(app: AppContext, **raw: Any) -> None:
    """Generate UUIDs, one per line."""
    app.run(UuidTool(), raw)
