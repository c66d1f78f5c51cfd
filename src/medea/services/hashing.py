"""Hash tool: digests and HMACs of the input payload."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

from medea.services._helpers import to_b64, to_hex
from medea.services.base import BaseTool
from medea.services.errors import conflicting_options
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

# CLI algorithm name -> hashlib constructor name
ALGORITHMS: dict[str, str] = {
    "md5": "md5",
    "sha1": "sha1",
    "sha224": "sha224",
    "sha256": "sha256",
    "sha384": "sha384",
    "sha512": "sha512",
    "sha3-256": "sha3_256",
    "sha3-512": "sha3_512",
}

OUTPUT_FORMATS = ("hex", "b64")


def digest(data: bytes, algorithm: str, *, key: bytes | None = None) -> bytes:
    """Hash *data* with *algorithm*, keyed as an HMAC when *key* is given."""
    name = ALGORITHMS[algorithm]
    if key is not None:
        return hmac.new(key, data, name).digest()
    return hashlib.new(name, data).digest()


class HashTool(BaseTool):
    name = "hash"
    input_option = "data"
    options = OptionSchema(
        OptionSpec(name="data", positional=True, help="Data to be hashed"),
        OptionSpec(
            name="algorithm",
            decls=("-a", "--algorithm"),
            choices=tuple(ALGORITHMS),
            default="md5",
            help="Hashing algorithm.",
        ),
        OptionSpec(
            name="to",
            decls=("-t", "--to"),
            choices=OUTPUT_FORMATS,
            default="hex",
            help="Output format.",
        ),
        OptionSpec(
            name="hmac",
            decls=("--hmac",),
            metavar="KEY",
            help="Key for generating hmac hashes.",
        ),
        OptionSpec(
            name="upper",
            decls=("-u", "--upper"),
            arity=Arity.FLAG,
            help="Use upper case characters for hex output.",
        ),
    )

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        if options["upper"] and options["to"] != "hex":
            raise conflicting_options("--upper", f"--to {options['to']}")

        key = options["hmac"].encode("utf-8") if options["hmac"] is not None else None
        raw = digest(source.read(), options["algorithm"], key=key)
        if options["to"] == "b64":
            text = to_b64(raw)
        else:
            text = to_hex(raw, upper=options["upper"])
        return {
            "algorithm": options["algorithm"],
            "hmac": key is not None,
            "text": [text],
        }
