"""Timestamp tool: parse epoch or ISO 8601 input and re-render it.

Input detection is automatic. An all-digit value (optionally negative)
is epoch seconds, anything else is a date string parsed with
``datetime.fromisoformat`` or the ``--it`` template. Naive date strings
are interpreted in the ``--iz`` zone, UTC when none is given.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from medea.services.base import BaseTool
from medea.services.errors import invalid_value
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

NUMERIC_TIMESTAMP = re.compile(r"^-?[0-9]+$")
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

FORMATS: dict[str, str | None] = {
    "iso": None,
    "unix": None,
    "date": "%x",
    "time": "%X",
    "datetime": "%c",
}


def resolve_zone(name: str | None, option: str) -> tzinfo | None:
    """Look up an IANA zone name; ``None`` passes through."""
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise invalid_value(option, name, "unknown timezone") from None


def parse_timestamp(text: str, *, zone: tzinfo | None = None, template: str | None = None) -> datetime:
    """Parse *text* into an aware UTC datetime."""
    text = text.strip()
    if NUMERIC_TIMESTAMP.match(text):
        try:
            return EPOCH + timedelta(seconds=int(text))
        except OverflowError:
            raise invalid_value("TIMESTAMP", text, "epoch value out of range") from None

    try:
        if template is not None:
            parsed = datetime.strptime(text, template)
        else:
            parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise invalid_value("TIMESTAMP", text, str(exc)) from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone or UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        raise invalid_value("TIMESTAMP", text, "out of range") from None


def format_timestamp(
    ts: datetime,
    *,
    fmt: str = "iso",
    template: str | None = None,
    zone: tzinfo | None = None,
) -> str:
    """Render an aware datetime in *zone* (UTC by default)."""
    try:
        local = ts.astimezone(zone or UTC)
    except OverflowError:
        raise invalid_value("--oz", str(zone), "timestamp out of range in this timezone") from None
    if template is not None:
        try:
            return local.strftime(template)
        except ValueError as exc:
            raise invalid_value("--template", template, str(exc)) from None
    if fmt == "unix":
        return str((ts - EPOCH) // timedelta(seconds=1))
    if fmt == "iso":
        return local.isoformat()
    return local.strftime(FORMATS[fmt] or "")


class TimestampTool(BaseTool):
    name = "timestamp"
    input_option = "timestamp"
    options = OptionSchema(
        OptionSpec(name="timestamp", positional=True, help="Epoch seconds or ISO 8601 timestamp"),
        OptionSpec(
            name="now",
            decls=("-n", "--now"),
            arity=Arity.FLAG,
            conflicts=frozenset({"timestamp", "input_timezone", "input_template"}),
            help="Use the current time instead of reading input.",
        ),
        OptionSpec(
            name="input_timezone",
            decls=("--iz",),
            metavar="TZ",
            help="Timezone of naive input timestamps.",
        ),
        OptionSpec(
            name="input_template",
            decls=("--it",),
            metavar="TEMPLATE",
            help="strptime template for parsing input.",
        ),
        OptionSpec(
            name="output_timezone",
            decls=("-z", "--oz"),
            metavar="TZ",
            help="Timezone of the output.",
        ),
        OptionSpec(
            name="template",
            decls=("-t", "--template"),
            metavar="TEMPLATE",
            conflicts=frozenset({"format"}),
            help="strftime template for formatting output.",
        ),
        OptionSpec(
            name="format",
            decls=("-f", "--format"),
            choices=tuple(FORMATS),
            default="iso",
            help="Standard output format. Can be used instead of --template.",
        ),
    )

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        input_zone = resolve_zone(options["input_timezone"], "--iz")
        output_zone = resolve_zone(options["output_timezone"], "--oz")

        if options["now"]:
            ts = self._clock().astimezone(UTC)
        else:
            text = source.require_text("timestamp")
            ts = parse_timestamp(text, zone=input_zone, template=options["input_template"])

        rendered = format_timestamp(
            ts,
            fmt=options["format"],
            template=options["template"],
            zone=output_zone,
        )
        return {"epoch": (ts - EPOCH) // timedelta(seconds=1), "text": [rendered]}
