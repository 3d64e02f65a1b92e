"""Standard-input implementation of :class:`~pw_cookies.core.protocols.InputSource`."""

from __future__ import annotations

import sys
from typing import TextIO


class StdinSource:
    """Reads everything from a text stream, ``sys.stdin`` by default.

    The stream is looked up at read time so tests can swap ``sys.stdin``.
    Bytes are decoded as UTF-8 regardless of the locale; invalid
    sequences become U+FFFD.  A stream that never reaches end-of-file
    blocks forever.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    def read_all(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        raw = getattr(stream, "buffer", None)
        if raw is None:
            # In-memory text streams (io.StringIO) have no byte layer.
            return stream.read()
        return raw.read().decode("utf-8", errors="replace")
