"""Declarative option schemas and fail-fast validation.

A tool declares its options once as an :class:`OptionSchema`. The schema
both decorates the click command (every value is collected raw) and
validates the collected values before the tool runs:

1. required options present        → ``MISSING_OPTION``
2. no mutually exclusive pair used → ``CONFLICTING_OPTIONS``
3. values convert and fit          → ``INVALID_VALUE``

INVARIANT: validation never touches the input payload.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, TypeVar

import click
from pydantic import BaseModel, model_validator

from medea.services.errors import conflicting_options, invalid_value, missing_option

F = TypeVar("F", bound=Callable[..., Any])


class Arity(str, Enum):
    FLAG = "flag"
    SINGLE = "single"
    MULTI = "multi"


class OptionSpec(BaseModel):
    """One recognized option (or positional argument) of a subcommand."""

    model_config = {"frozen": True}

    name: str
    decls: tuple[str, ...] = ()
    arity: Arity = Arity.SINGLE
    positional: bool = False
    default: Any = None
    required: bool = False
    conflicts: frozenset[str] = frozenset()
    choices: tuple[str, ...] | None = None
    value_type: Literal["str", "int"] = "str"
    min_value: int | None = None
    max_value: int | None = None
    help: str = ""
    metavar: str | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> OptionSpec:
        if self.positional and self.arity is Arity.FLAG:
            raise ValueError(f"positional '{self.name}' cannot be a flag")
        if not self.positional and not self.decls:
            raise ValueError(f"option '{self.name}' needs at least one declaration")
        return self

    @property
    def label(self) -> str:
        """User-facing name used in error messages."""
        if self.positional:
            return self.metavar or self.name.upper()
        return max(self.decls, key=len)

    def is_supplied(self, value: Any) -> bool:
        if self.arity is Arity.FLAG:
            return bool(value)
        if self.arity is Arity.MULTI:
            return bool(value)
        return value is not None

    def convert(self, value: Any) -> Any:
        if self.arity is Arity.FLAG:
            return bool(value)
        if self.arity is Arity.MULTI:
            return tuple(self._convert_one(v) for v in value)
        return self._convert_one(value)

    def _convert_one(self, value: Any) -> Any:
        if self.value_type == "int":
            try:
                number = int(str(value).strip())
            except ValueError:
                raise invalid_value(self.label, value, "expected an integer") from None
            if self.min_value is not None and number < self.min_value:
                raise invalid_value(self.label, value, f"must be at least {self.min_value}")
            if self.max_value is not None and number > self.max_value:
                raise invalid_value(self.label, value, f"must be at most {self.max_value}")
            return number

        text = str(value)
        if self.choices is not None:
            normalized = text.lower()
            if normalized not in self.choices:
                raise invalid_value(self.label, value, f"expected one of {', '.join(self.choices)}")
            return normalized
        return text

    def _help_text(self) -> str:
        parts = [self.help] if self.help else []
        if self.default is not None and self.arity is not Arity.FLAG:
            parts.append(f"[default: {self.default}]")
        if self.required:
            parts.append("[required]")
        return " ".join(parts)

    def _metavar(self) -> str | None:
        if self.metavar:
            return self.metavar
        if self.choices:
            return "[" + "|".join(self.choices) + "]"
        return None

    def as_decorator(self) -> Callable[[F], F]:
        """Build the click decorator that collects this option raw."""
        if self.positional:
            return click.argument(
                self.name,
                nargs=-1 if self.arity is Arity.MULTI else 1,
                required=False,
                metavar=self.metavar or self.name.upper(),
            )
        if self.arity is Arity.FLAG:
            return click.option(
                *self.decls, self.name, is_flag=True, default=False, help=self._help_text()
            )
        return click.option(
            *self.decls,
            self.name,
            default=None,
            multiple=self.arity is Arity.MULTI,
            metavar=self._metavar(),
            help=self._help_text(),
        )


class OptionSchema:
    """Ordered collection of :class:`OptionSpec` for one subcommand."""

    def __init__(self, *specs: OptionSpec) -> None:
        self.specs: tuple[OptionSpec, ...] = specs
        self._by_name = {spec.name: spec for spec in specs}
        if len(self._by_name) != len(specs):
            raise ValueError("duplicate option names in schema")
        for spec in specs:
            unknown = spec.conflicts - self._by_name.keys()
            if unknown:
                raise ValueError(f"'{spec.name}' conflicts with unknown options {sorted(unknown)}")

    def __getitem__(self, name: str) -> OptionSpec:
        return self._by_name[name]

    def __iter__(self):
        return iter(self.specs)

    def __call__(self, func: F) -> F:
        """Decorate a click command function with every option in the schema."""
        for spec in reversed(self.specs):
            func = spec.as_decorator()(func)
        return func

    def supplied(self, raw: Mapping[str, Any]) -> list[str]:
        return [spec.name for spec in self.specs if spec.is_supplied(raw.get(spec.name))]

    def validate(self, raw: Mapping[str, Any]) -> Mapping[str, Any]:
        """Validate raw values and return the read-only option set.

        Fails fast on the first violation.
        """
        supplied = set(self.supplied(raw))

        for spec in self.specs:
            if spec.required and spec.name not in supplied:
                raise missing_option(spec.label)

        for spec in self.specs:
            if spec.name not in supplied:
                continue
            for other in sorted(spec.conflicts):
                if other in supplied:
                    raise conflicting_options(spec.label, self._by_name[other].label)

        values: dict[str, Any] = {}
        for spec in self.specs:
            if spec.name in supplied:
                values[spec.name] = spec.convert(raw[spec.name])
            elif spec.arity is Arity.FLAG:
                values[spec.name] = bool(spec.default)
            elif spec.arity is Arity.MULTI:
                values[spec.name] = tuple(spec.default or ())
            else:
                values[spec.name] = spec.default
        return MappingProxyType(values)
