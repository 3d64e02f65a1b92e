"""Custom exception hierarchy for pw-cookies.

Every fatal, user-visible condition maps to a subclass of
:class:`PwCookiesError` so the CLI error boundary can render a clean
message and return a well-known exit code.

Hierarchy
---------
PwCookiesError
├── EmptyInputError
└── InvalidJsonError

UserWarning
└── MissingExpectedKeysWarning   (non-fatal)
"""

from __future__ import annotations


class PwCookiesError(Exception):
    """Base exception for all pw-cookies errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Save-mode input -------------------------------------------------------

class EmptyInputError(PwCookiesError):
    """Raised when standard input is empty or whitespace-only."""


class InvalidJsonError(PwCookiesError):
    """Raised when standard input is not parseable JSON."""


# --- Non-fatal ---------------------------------------------------------------

class MissingExpectedKeysWarning(UserWarning):
    """Parsed JSON has neither a ``cookies`` nor an ``origins`` key.

    Returned (never raised) by the core layer; the CLI prints it and
    still writes the file.
    """
