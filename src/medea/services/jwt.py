"""JWT tool: decode (and optionally verify) or create HMAC-signed tokens.

Supported algorithms are HS1 (HMAC-SHA1), HS256 and HS512. Tokens are
three base64url segments without padding; header and payload JSON are
minified with sorted keys when encoding.
"""

from __future__ import annotations

import hmac
import json
from collections.abc import Mapping
from typing import Any

from medea.services._helpers import from_b64, from_b64url, to_b64url
from medea.services.base import BaseTool
from medea.services.errors import InvocationError, decode_error, invalid_value, missing_option
from medea.services.input import InputSource
from medea.services.options import Arity, OptionSchema, OptionSpec

# CLI algorithm name -> (header "alg" value, hashlib name)
ALGORITHMS: dict[str, tuple[str, str]] = {
    "hs1": ("HS1", "sha1"),
    "hs256": ("HS256", "sha256"),
    "hs512": ("HS512", "sha512"),
}
_BY_HEADER = {header: digest for header, digest in ALGORITHMS.values()}

SIGNATURE_VALID = "signature is valid"
SIGNATURE_INVALID = "signature is not valid"
SIGNATURE_UNCHECKED = "signature not validated (no signing key provided)"


def _minify(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False).encode(
        "utf-8"
    )


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        raise decode_error(f"unable to parse json value: `{text}`") from None


def sign(header_segment: str, payload_segment: str, key: bytes, digest: str) -> str:
    """Return the base64url HMAC signature over ``header.payload``."""
    message = f"{header_segment}.{payload_segment}".encode("ascii")
    return to_b64url(hmac.new(key, message, digest).digest())


def encode_token(payload: Any, key: bytes, algorithm: str = "hs256") -> str:
    alg_name, digest = ALGORITHMS[algorithm]
    header_segment = to_b64url(_minify({"alg": alg_name, "typ": "JWT"}))
    payload_segment = to_b64url(_minify(payload))
    signature = sign(header_segment, payload_segment, key, digest)
    return f"{header_segment}.{payload_segment}.{signature}"


def _decode_segment(segment: str) -> Any:
    raw = from_b64url(segment)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise decode_error(f"segment is not valid UTF-8: {segment!r}") from None
    return parse_json(text)


def decode_token(token: str) -> tuple[dict[str, Any], Any, str]:
    """Split *token* into ``(header, payload, signature)``.

    Raises:
        InvocationError: ``DECODE_ERROR`` for a malformed token.
    """
    parts = token.strip().split(".")
    if len(parts) != 3:
        raise decode_error("token does not contain the correct number of parts", parts=len(parts))

    header = _decode_segment(parts[0])
    if not isinstance(header, dict):
        raise decode_error("token header is not a JSON object")
    payload = _decode_segment(parts[1])
    return header, payload, parts[2]


def header_digest(header: Mapping[str, Any]) -> str:
    """Validate the header structure and return its hashlib digest name."""
    typ = header.get("typ")
    if not isinstance(typ, str):
        raise decode_error("missing type")
    if typ not in ("JWT", "jwt"):
        raise decode_error(f"unexpected type: {typ!r}")

    alg = header.get("alg")
    if not isinstance(alg, str):
        raise decode_error("missing algorithm")
    if alg not in _BY_HEADER:
        raise decode_error(f"unexpected algorithm: {alg!r}")
    return _BY_HEADER[alg]


def verify_token(token: str, key: bytes) -> bool:
    header, _, signature = decode_token(token)
    digest = header_digest(header)
    header_segment, payload_segment, _ = token.strip().split(".")
    expected = sign(header_segment, payload_segment, key, digest)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


class JwtTool(BaseTool):
    name = "jwt"
    input_option = "input"
    options = OptionSchema(
        OptionSpec(
            name="input",
            positional=True,
            help="Token to be decoded, or payload to be encoded",
        ),
        OptionSpec(
            name="decode",
            decls=("--decode",),
            arity=Arity.FLAG,
            conflicts=frozenset({"encode"}),
            help="Decode a token (default).",
        ),
        OptionSpec(
            name="encode",
            decls=("--encode",),
            arity=Arity.FLAG,
            help="Encode a JSON payload into a signed token.",
        ),
        OptionSpec(
            name="signing_key",
            decls=("-k", "--signing-key"),
            metavar="KEY",
            help="Signing key.",
        ),
        OptionSpec(
            name="key_format",
            decls=("-f", "--from"),
            choices=("ascii", "b64"),
            default="ascii",
            help="Encoding format of signing key.",
        ),
        OptionSpec(
            name="algorithm",
            decls=("-a", "--algorithm"),
            choices=tuple(ALGORITHMS),
            default="hs256",
            help="Signing algorithm used with --encode.",
        ),
    )

    def op_name(self, raw: Mapping[str, Any]) -> str:
        return "jwt_encode" if raw.get("encode") else "jwt_decode"

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        key = self._key_bytes(options)

        if options["encode"]:
            if key is None:
                raise missing_option("--signing-key")
            payload = parse_json(source.require_text("payload"))
            token = encode_token(payload, key, options["algorithm"])
            return {"algorithm": ALGORITHMS[options["algorithm"]][0], "text": [token]}

        token = source.require_text("token").strip()
        header, payload, signature = decode_token(token)
        header_digest(header)
        if key is None:
            verified = None
            status = SIGNATURE_UNCHECKED
        else:
            verified = verify_token(token, key)
            status = SIGNATURE_VALID if verified else SIGNATURE_INVALID
        return {
            "header": header,
            "payload": payload,
            "signature": signature,
            "verified": verified,
            "signature_status": status,
        }

    @staticmethod
    def _key_bytes(options: Mapping[str, Any]) -> bytes | None:
        key = options["signing_key"]
        if key is None:
            return None
        if options["key_format"] == "b64":
            try:
                return from_b64(key)
            except InvocationError:
                raise invalid_value("--signing-key", key, "not valid base64") from None
        return key.encode("utf-8")
