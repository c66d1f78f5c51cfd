"""Root CLI group for medea with global flags and command registration."""

from __future__ import annotations

import click

from medea import __version__
from medea.commands import register_commands
from medea.commands._base import MedeaGroup
from medea.commands._context import AppContext
from medea.config.settings import MedeaSettings


@click.group(
    "medea",
    cls=MedeaGroup,
    invoke_without_command=True,
    examples="""\
  medea hash "some data" -a sha256
  medea uuid -c 3
  medea ts -n
  medea rnd 16 -f b64
  medea base -f hex -t bin ff
  medea jwt "$TOKEN" -k secret""",
)
@click.version_option(version=__version__, prog_name="medea")
@click.option(
    "--colors/--no-colors",
    "colors",
    default=None,
    help="Force colored output on or off. Detected from the terminal by default.",
)
@click.option("--trim", is_flag=True, help="Omit the trailing newline after output.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    colors: bool | None,
    trim: bool,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """medea: a collection of small tools for developers.

    Hashes, UUIDs, timestamps, random bytes, base conversion and JWTs.
    Input is taken from the command line or, when omitted, from stdin.
    """
    settings = MedeaSettings.from_cli(
        colors=colors,
        trim=trim,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
