"""Command: random bytes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.random_bytes import RandomTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "rnd",
    cls=MedeaCommand,
    examples="""\
  # generate 32 random bytes and output as uppercase hex string
  medea rnd -f hex -u 32

  # generate 128 random bytes and output as base64 string
  medea rnd -f b64 128

  # write 16 raw bytes to a file
  medea rnd -f raw 16 > key.bin""",
)
@RandomTool.options
@click.pass_obj
def random_cmd(app: AppContext, **raw: Any) -> None:
    """Generate random bytes of data."""
    app.run(RandomTool(), raw)
