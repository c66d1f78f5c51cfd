"""Subcommand modules for medea.

Provides register_commands() which uses deferred imports to keep
``medea --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from medea.commands._base import MedeaGroup


def register_commands(cli: MedeaGroup) -> None:
    """Register every tool command, its aliases and ``help`` on the root group."""
    from medea.commands.base_convert import base_convert
    from medea.commands.hash import hash_cmd
    from medea.commands.help_cmd import help_cmd
    from medea.commands.jwt import jwt
    from medea.commands.random_cmd import random_cmd
    from medea.commands.timestamp import timestamp
    from medea.commands.uuid_cmd import uuid_cmd

    cli.add_command(hash_cmd)
    cli.add_command(uuid_cmd)
    cli.add_command(timestamp)
    cli.add_command(random_cmd)
    cli.add_command(base_convert)
    cli.add_command(jwt)
    cli.add_command(help_cmd)

    cli.add_alias("timestamp", "ts")
    cli.add_alias("random", "rnd")
    cli.add_alias("base-convert", "base")
