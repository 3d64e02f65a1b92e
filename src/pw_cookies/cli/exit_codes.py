"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known PwCookiesError was caught (empty input, invalid JSON)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped, e.g. the output path is unwritable."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
