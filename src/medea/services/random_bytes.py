"""Random tool: cryptographically secure random bytes."""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from typing import Any

from medea.services._helpers import to_b64, to_hex
from medea.services.base import BaseTool
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

MAX_BYTES = 1 << 20


class RandomTool(BaseTool):
    name = "random"
    options = OptionSchema(
        OptionSpec(
            name="count",
            positional=True,
            required=True,
            value_type="int",
            min_value=0,
            max_value=MAX_BYTES,
            metavar="COUNT_BYTES",
            help="Number of bytes to generate",
        ),
        OptionSpec(
            name="format",
            decls=("-f", "--format"),
            choices=("hex", "b64", "raw"),
            default="hex",
            help="Output format.",
        ),
        OptionSpec(
            name="upper",
            decls=("-u", "--upper"),
            arity=Arity.FLAG,
            help="Use upper case characters for hex output.",
        ),
    )

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        data = secrets.token_bytes(options["count"])
        if options["format"] == "raw":
            return {"raw": data}
        if options["format"] == "b64":
            return {"text": [to_b64(data)]}
        return {"text": [to_hex(data, upper=options["upper"])]}
