"""Command: cryptographic hashes and HMACs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from medea.commands._base import MedeaCommand
from medea.services.hashing import HashTool

if TYPE_CHECKING:
    from medea.commands._context import AppContext


@click.command(
    "hash",
    cls=MedeaCommand,
    examples="""\
  # generate an md5 hash
  $ medea hash "this is some data"
  1463f25d10e363181d686d2484a9eab6

  # generate an uppercase sha256 hmac from file contents
  $ medea hash "$(cat data.txt)" --hmac "$(cat secret.txt)" -ua sha256

  # hash piped data as base64
  $ printf 'foo' | medea hash -a sha1 -t b64""",
)
@HashTool.options
@click.pass_obj
def hash_cmd(app: AppContext, **raw: Any) -> None:
    """Generate cryptographic hashes.

    Read data and generate a hash value, optionally using an hmac key.
    DATA defaults to standard input when omitted.
    """
    app.run(HashTool(), raw)
