"""Custom Click base classes with --examples and alias support.

Provides MedeaCommand and MedeaGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
MedeaGroup also resolves command aliases and reports unknown commands
through the same error path as every tool failure.
"""

from __future__ import annotations

from typing import Any

import click

from medea.services.errors import ErrorCode, InvocationError
from medea.services.result import ToolResult


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class MedeaCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class MedeaGroup(click.Group):
    """Click Group subclass with ``--examples``, aliases and uniform errors.

    Sets ``command_class = MedeaCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = MedeaCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases: dict[str, str] = {}
        if examples:
            _add_examples_option(self, examples)

    def add_alias(self, alias: str, name: str) -> None:
        self.aliases[alias] = name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if (
            not cmd_name.startswith("-")
            and self.get_command(ctx, cmd_name) is None
            and not ctx.resilient_parsing
        ):
            exc = InvocationError(
                ErrorCode.UNKNOWN_COMMAND,
                f"unknown command '{cmd_name}'",
                command=cmd_name,
            )
            from medea.commands._context import AppContext

            AppContext.from_params(ctx.params).emit(ToolResult.failure("dispatch", exc))
        name, cmd, rest = super().resolve_command(ctx, args)
        # Report the canonical name, not the alias typed by the user.
        return (cmd.name if cmd else name), cmd, rest
