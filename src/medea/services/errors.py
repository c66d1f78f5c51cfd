"""Invocation error taxonomy shared by the validator, resolver and tools.

INVARIANT: Every failure of a run is one InvocationError with one ErrorCode.
Usage errors exit with 2, processing errors with 1.
"""

from __future__ import annotations

from enum import Enum
from typing import IO, Any

import click


class ErrorCode(str, Enum):
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    MISSING_OPTION = "MISSING_OPTION"
    CONFLICTING_OPTIONS = "CONFLICTING_OPTIONS"
    INVALID_VALUE = "INVALID_VALUE"
    EMPTY_INPUT = "EMPTY_INPUT"
    DECODE_ERROR = "DECODE_ERROR"


USAGE_ERRORS: frozenset[ErrorCode] = frozenset(
    {
        ErrorCode.UNKNOWN_COMMAND,
        ErrorCode.MISSING_OPTION,
        ErrorCode.CONFLICTING_OPTIONS,
        ErrorCode.INVALID_VALUE,
    }
)

EXIT_PROCESSING_ERROR = 1
EXIT_USAGE_ERROR = 2


def exit_code_for(code: ErrorCode | str) -> int:
    """Map an error code to the process exit status."""
    try:
        code = ErrorCode(code)
    except ValueError:
        return EXIT_PROCESSING_ERROR
    return EXIT_USAGE_ERROR if code in USAGE_ERRORS else EXIT_PROCESSING_ERROR


class InvocationError(click.ClickException):
    """A tagged failure that aborts the current run.

    Subclasses ``click.ClickException`` so errors raised outside a tool
    (e.g. while resolving the subcommand) are still reported by click's
    standalone handling with the right exit status.
    """

    def __init__(self, code: ErrorCode, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.detail = detail
        self.exit_code = exit_code_for(code)

    def format_message(self) -> str:
        return f"error[{self.code.value}]: {self.message}"

    def show(self, file: IO[Any] | None = None) -> None:
        click.echo(self.format_message(), file=file, err=file is None)


def missing_option(name: str) -> InvocationError:
    return InvocationError(
        ErrorCode.MISSING_OPTION,
        f"missing required option '{name}'",
        option=name,
    )


def conflicting_options(first: str, second: str) -> InvocationError:
    return InvocationError(
        ErrorCode.CONFLICTING_OPTIONS,
        f"'{first}' cannot be used together with '{second}'",
        options=[first, second],
    )


def invalid_value(name: str, value: Any, reason: str) -> InvocationError:
    return InvocationError(
        ErrorCode.INVALID_VALUE,
        f"invalid value {value!r} for '{name}': {reason}",
        option=name,
        value=str(value),
    )


def decode_error(message: str, **detail: Any) -> InvocationError:
    return InvocationError(ErrorCode.DECODE_ERROR, message, **detail)


def empty_input(message: str = "no input supplied") -> InvocationError:
    return InvocationError(ErrorCode.EMPTY_INPUT, message)
