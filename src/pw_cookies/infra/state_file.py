"""Filesystem implementation of :class:`~pw_cookies.core.protocols.StateSink`.

Rules
-----
* Paths are resolved against the current working directory.
* Existing files are overwritten without confirmation.
* ``OSError`` is NOT caught here — an unwritable path is a genuine
  failure and surfaces through the CLI's unexpected-error boundary.
"""

from __future__ import annotations

from pathlib import Path


def resolve_output_path(path: str | Path) -> Path:
    """Return *path* as an absolute, normalised :class:`Path`."""
    return Path(path).resolve()


class StateFileSink:
    """Writes serialized state as UTF-8 bytes."""

    def write(self, path: str | Path, text: str) -> Path:
        # Encode first so an encoding error cannot truncate an existing file.
        data = text.encode("utf-8")
        full_path = resolve_output_path(path)
        full_path.write_bytes(data)
        return full_path
