"""Command: number and byte conversion between bases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.base_convert import BaseConvertTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "base",
    cls=MedeaCommand,
    examples="""\
  # convert decimal to hex
  medea base -t hex -u 12345

  # convert base64 to ascii
  medea base -f b64 -t ascii VGhlIHF1aWNrIGJyb3duIGZveCBqdW1wcyBvdmVyIDEzIGxhenkgZG9ncy4=

  # convert individual bytes from hex to binary
  medea base -f hex -t bin AB CD 01 23""",
)
@BaseConvertTool.options
@click.pass_obj
def base_convert(app: AppContext, **raw: Any) -> None:
    """Convert numbers between different bases.

    Convert the input number to another number base. Input may be
    supplied as a single value, or a space-delimited list of bytes.
    INPUT defaults to standard input when omitted.
    """
    app.run(BaseConvertTool(), raw)
