"""Command: ``medea help [SUBCOMMAND]``."""

from __future__ import annotations

import click

from medea.commands._base import MedeaCommand
from medea.services.errors import ErrorCode, InvocationError
from medea.services.result import ToolResult


@click.command(
    "help",
    cls=MedeaCommand,
    examples="""\
  medea help
  medea help hash
  medea help timestamp""",
)
@click.argument("subcommand", required=False)
@click.pass_context
def help_cmd(ctx: click.Context, subcommand: str | None) -> None:
    """Show help for medea or one of its subcommands."""
    parent = ctx.find_root()
    group = parent.command
    if not isinstance(group, click.Group):
        raise click.UsageError("help must be invoked as a medea subcommand", ctx)

    if subcommand is None:
        click.echo(group.get_help(parent))
        return

    cmd = group.get_command(parent, subcommand)
    if cmd is None:
        exc = InvocationError(
            ErrorCode.UNKNOWN_COMMAND,
            f"unknown command '{subcommand}'",
            command=subcommand,
        )
        ctx.obj.emit(ToolResult.failure("help", exc))
        return

    with click.Context(cmd, info_name=cmd.name, parent=parent) as sub_ctx:
        click.echo(cmd.get_help(sub_ctx))
    examples = getattr(cmd, "examples", None)
    if examples:
        click.echo("\nExamples:\n")
        click.echo(examples)
