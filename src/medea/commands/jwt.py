"""Command: JWT decoding, verification and creation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.jwt import JwtTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "jwt",
    cls=MedeaCommand,
    examples="""\
  # inspect a token
  medea jwt "$TOKEN"

  # inspect and verify a token
  medea jwt "$TOKEN" -k secret

  # create a token signed with a base64 key
  medea jwt --encode '{"sub": "1234567890"}' -k c2VjcmV0 -f b64 -a hs512""",
)
@JwtTool.options
@click.pass_obj
def jwt(app: AppContext, **raw: Any) -> None:
    """Decode, verify and create JSON web tokens.

    INPUT is the token to decode, or the JSON payload to encode, and
    defaults to standard input when omitted.
    """
    app.run(JwtTool(), raw)
