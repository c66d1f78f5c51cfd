"""Input resolution: explicit argument first, then standard input.

INVARIANT: The payload is read at most once and only on demand, so a run
rejected by option validation never consumes stdin.
"""

from __future__ import annotations

import logging
from typing import IO

from medea.services.errors import decode_error, empty_input

logger = logging.getLogger(__name__)


class InputSource:
    """Lazily resolve the subject data of a tool.

    Args:
        explicit: Value taken from the command line, if any.
        stream: Binary stream to fall back to (normally stdin).
    """

    def __init__(self, explicit: str | bytes | None = None, stream: IO[bytes] | None = None) -> None:
        self._explicit = explicit
        self._stream = stream
        self._payload: bytes | None = None
        self.reads = 0

    @property
    def consumed(self) -> bool:
        """Whether the payload has been resolved."""
        return self._payload is not None

    def read(self) -> bytes:
        """Return the payload, reading the stream the first time only."""
        if self._payload is None:
            self._payload = self._resolve()
        return self._payload

    def read_text(self) -> str:
        try:
            return self.read().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise decode_error(f"input is not valid UTF-8: {exc.reason}") from None

    def require_non_empty(self, what: str = "input") -> bytes:
        data = self.read()
        if not data.strip():
            raise empty_input(f"no {what} supplied")
        return data

    def require_text(self, what: str = "input") -> str:
        """Non-empty payload decoded as UTF-8."""
        self.require_non_empty(what)
        return self.read_text()

    def _resolve(self) -> bytes:
        if self._explicit is not None:
            if isinstance(self._explicit, bytes):
                return self._explicit
            return self._explicit.encode("utf-8")
        if self._stream is None:
            return b""
        if _is_interactive(self._stream):
            raise empty_input("no input supplied and stdin is an interactive terminal")
        self.reads += 1
        try:
            data = self._stream.read()
        except ValueError:
            # closed stream
            return b""
        logger.debug("Read %d bytes from stdin", len(data))
        return data


def _is_interactive(stream: IO[bytes]) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False
