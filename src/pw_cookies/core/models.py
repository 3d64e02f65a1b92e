"""Domain models for pw-cookies.

Both models are **frozen** dataclasses with no I/O.  ``StorageState``
wraps whatever JSON value was read; nothing about its shape is enforced.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pw_cookies.exceptions import MissingExpectedKeysWarning

COOKIES_KEY: str = "cookies"
ORIGINS_KEY: str = "origins"


def _count_entries(value: Any, key: str) -> int:
    """Length of ``value[key]`` when it is an array, else ``0``."""
    if not isinstance(value, dict):
        return 0
    entries = value.get(key)
    if not isinstance(entries, list):
        return 0
    return len(entries)


# ---------------------------------------------------------------------------
# Storage state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StorageState:
    """A parsed browser storage-state snapshot.

    ``value`` is any JSON value; a well-formed snapshot is an object
    with ``cookies`` and ``origins`` arrays.
    """

    value: Any
    """The parsed JSON value, persisted verbatim."""

    @property
    def cookie_count(self) -> int:
        return _count_entries(self.value, COOKIES_KEY)

    @property
    def origin_count(self) -> int:
        return _count_entries(self.value, ORIGINS_KEY)

    @property
    def has_expected_keys(self) -> bool:
        """``True`` when the value is an object with either expected key."""
        if not isinstance(self.value, dict):
            return False
        return COOKIES_KEY in self.value or ORIGINS_KEY in self.value


# ---------------------------------------------------------------------------
# Save outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SaveResult:
    """What was written by a save-mode invocation."""

    path: Path
    """Absolute path of the written file."""

    cookie_count: int

    origin_count: int

    warnings: tuple[MissingExpectedKeysWarning, ...] = ()
    """Non-fatal issues found while parsing; the file was still written."""
