"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on the concrete
stdin/file adapters in ``infra``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class InputSource(Protocol):
    """Contract for where save mode reads its JSON text from."""

    def read_all(self) -> str:
        """Block until end-of-stream and return everything read."""
        ...  # pragma: no cover


class StateSink(Protocol):
    """Contract for where save mode persists the serialized state."""

    def write(self, path: str | Path, text: str) -> Path:
        """Write *text* to *path*, replacing any existing file.

        Returns
        -------
        Path
            The absolute path that was written.
        """
        ...  # pragma: no cover
