"""UUID tool: time-based (v1) and random (v4) identifiers."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from typing import Any

from medea.services.base import BaseTool
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

MAX_COUNT = 10_000

GENERATORS: dict[str, Callable[[], uuid.UUID]] = {
    "1": uuid.uuid1,
    "4": uuid.uuid4,
}


def generate(version: str, count: int) -> list[uuid.UUID]:
    """Generate *count* independent UUIDs of the given *version*."""
    make = GENERATORS[version]
    return [make() for _ in range(count)]


class UuidTool(BaseTool):
    name = "uuid"
    options = OptionSchema(
        OptionSpec(
            name="version",
            decls=("-V", "--version"),
            choices=tuple(GENERATORS),
            default="4",
            help="UUID version: 1 (time-based) or 4 (random).",
        ),
        OptionSpec(
            name="count",
            decls=("-c", "--count"),
            value_type="int",
            min_value=1,
            max_value=MAX_COUNT,
            default=1,
            metavar="N",
            help="Number of UUIDs to generate.",
        ),
        OptionSpec(
            name="upper",
            decls=("-u", "--upper"),
            arity=Arity.FLAG,
            help="Use upper case characters.",
        ),
    )

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        values = [str(u) for u in generate(options["version"], options["count"])]
        if options["upper"]:
            values = [v.upper() for v in values]
        return {"version": int(options["version"]), "text": values}
