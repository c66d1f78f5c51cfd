"""Tests for --examples flag on CLI commands.

Parametrized to cover every command that defines examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from medea.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["medea hash", "medea jwt"]),
    (["hash", "--examples"], ["--hmac", "sha256"]),
    (["uuid", "--examples"], ["-V 1"]),
    (["ts", "--examples"], ["--it", "Europe/Paris", "medea ts -- -86400"]),
    (["timestamp", "--examples"], ["medea ts"]),
    (["rnd", "--examples"], ["-f b64"]),
    (["base", "--examples"], ["-f hex -t bin"]),
    (["jwt", "--examples"], ["--encode"]),
    (["help", "--examples"], ["medea help hash"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples") or "root"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"'{kw}' missing from {args} examples"


def test_examples_does_not_read_stdin(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["hash", "--examples"], input="payload")
    assert result.exit_code == 0
    assert "acbd18db" not in result.output
