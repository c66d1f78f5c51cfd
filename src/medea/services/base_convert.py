"""Base conversion tool: move numbers and byte strings between encodings.

Rules:
- one input is a single number (or byte string); ascii input is always
  treated as one string.
- several inputs are a list of bytes, so each must fit 0..255:
  bin at most 8 bits, hex exactly 2 characters, dec 0..255.
  b64 and ascii inputs are concatenated.
- ascii output must be printable (32..126).
- hex input is case-insensitive.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from medea.services._helpers import from_b64, to_b64, to_hex
from medea.services.base import BaseTool
from medea.services.errors import decode_error
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

_BINARY = re.compile(r"^[01]+$")
_DECIMAL = re.compile(r"^[0-9]+$")
_HEX = re.compile(r"^[0-9A-Fa-f]*$")


def _int_to_bytes(number: int) -> bytes:
    return number.to_bytes(max(1, (number.bit_length() + 7) // 8), "big")


class Converter:
    """Reads strings into bytes and writes bytes back out as strings."""

    name: ClassVar[str] = ""

    def to_bytes(self, values: list[str]) -> bytes:
        raise NotImplementedError

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        raise NotImplementedError


class AsciiConverter(Converter):
    name = "ascii"

    def to_bytes(self, values: list[str]) -> bytes:
        return "".join(values).encode("utf-8")

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        for byte in data:
            if byte < 32 or byte > 126:
                raise decode_error(
                    "byte value(s) out of range for printable characters, "
                    "should be between 32 and 126",
                    byte=byte,
                )
        return [data.decode("ascii")]


class BinConverter(Converter):
    name = "bin"

    def to_bytes(self, values: list[str]) -> bytes:
        for value in values:
            if not value:
                raise decode_error("must have at least 1 bit per byte")
            if not _BINARY.match(value):
                bad = next(c for c in value if c not in "01")
                raise decode_error(f"unexpected bit: {bad!r}")
            if len(value) > 8 and len(values) > 1:
                raise decode_error(f"cannot have more than 8 bits per byte: {value!r}")

        if len(values) == 1:
            bits = values[0]
            return int(bits, 2).to_bytes((len(bits) + 7) // 8, "big")
        return bytes(int(value, 2) for value in values)

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        parts = [format(byte, "08b") for byte in data]
        return ["".join(parts)] if concat else parts


class DecConverter(Converter):
    name = "dec"

    def to_bytes(self, values: list[str]) -> bytes:
        if len(values) == 1:
            if not _DECIMAL.match(values[0]):
                raise decode_error(
                    f"unexpected input {values[0]!r}, the number must be a valid unsigned integer"
                )
            return _int_to_bytes(int(values[0]))

        out = bytearray()
        for value in values:
            if not _DECIMAL.match(value) or int(value) > 255:
                raise decode_error(f"{value}: each byte must be an unsigned 8-bit number")
            out.append(int(value))
        return bytes(out)

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        if concat:
            return [str(int.from_bytes(data, "big"))]
        return [str(byte) for byte in data]


class B64Converter(Converter):
    name = "b64"

    def to_bytes(self, values: list[str]) -> bytes:
        return from_b64("".join(values))

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        return [to_b64(data)]


class HexConverter(Converter):
    name = "hex"

    def to_bytes(self, values: list[str]) -> bytes:
        for value in values:
            if len(values) > 1 and len(value) != 2:
                raise decode_error(f"unexpected number of characters in byte: {value!r}")
            if len(value) % 2 != 0:
                raise decode_error(
                    "input contains partial bytes, input length should be a multiple of 2"
                )
            if not _HEX.match(value):
                bad = next(c for c in value if c not in "0123456789abcdefABCDEF")
                raise decode_error(f"unexpected character: {bad!r}")
        return bytes.fromhex("".join(values))

    def to_strings(self, data: bytes, concat: bool) -> list[str]:
        if concat:
            return [to_hex(data)]
        return [to_hex(bytes([byte])) for byte in data]


CONVERTERS: dict[str, Converter] = {
    c.name: c
    for c in (BinConverter(), HexConverter(), B64Converter(), AsciiConverter(), DecConverter())
}


def convert(values: list[str], source: str, target: str, *, upper: bool = False) -> str:
    """Convert *values* read as *source* into the *target* representation."""
    data = CONVERTERS[source].to_bytes(values)
    parts = CONVERTERS[target].to_strings(data, concat=len(values) == 1)
    if target == "hex" and upper:
        parts = [p.upper() for p in parts]
    return " ".join(parts)


class BaseConvertTool(BaseTool):
    name = "base"
    options = OptionSchema(
        OptionSpec(
            name="input",
            positional=True,
            arity=Arity.MULTI,
            metavar="INPUT...",
            help="Number or bytes to be converted",
        ),
        OptionSpec(
            name="source",
            decls=("-f", "--from"),
            choices=tuple(CONVERTERS),
            default="dec",
            metavar="FORMAT",
            help="Input format (bin, hex, b64, ascii, dec).",
        ),
        OptionSpec(
            name="target",
            decls=("-t", "--to"),
            choices=tuple(CONVERTERS),
            default="dec",
            metavar="FORMAT",
            help="Output format (bin, hex, b64, ascii, dec).",
        ),
        OptionSpec(
            name="upper",
            decls=("-u", "--upper"),
            arity=Arity.FLAG,
            help="Use upper case characters for hex output.",
        ),
    )

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        values = list(options["input"])
        if not values:
            text = source.require_text()
            if options["source"] == "ascii":
                values = [text.rstrip("\r\n")]
            else:
                values = text.split()

        output = convert(values, options["source"], options["target"], upper=options["upper"])
        return {"from": options["source"], "to": options["target"], "text": [output]}
