"""Shared byte/text codec helpers for the tool services."""

from __future__ import annotations

import base64
import binascii

from medea.services.errors import decode_error


def to_hex(data: bytes, *, upper: bool = False) -> str:
    text = data.hex()
    return text.upper() if upper else text


def to_b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_b64(text: str) -> bytes:
    """Decode standard base64, ignoring embedded whitespace."""
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise decode_error(f"invalid base64 input: {exc}") from None


def to_b64url(data: bytes) -> str:
    """Unpadded URL-safe base64, as used by JWT segments."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def from_b64url(text: str) -> bytes:
    stripped = text.rstrip("=")
    if len(stripped) % 4 == 1:
        raise decode_error(f"invalid base64url segment length: {text!r}")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise decode_error(f"invalid base64url segment {text!r}: {exc}") from None
