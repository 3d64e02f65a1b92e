"""Core save-state service — parse, check and persist storage state.

The parsing helpers are pure.  :class:`StateService` orchestrates a
save-mode run by pulling text from an :class:`InputSource` and pushing
the re-serialized JSON into a :class:`StateSink`, both injected at
construction time.

Guarantees
----------
* Nothing is written unless the input parsed successfully.
* The written JSON deep-equals the input JSON.
* No ``print()`` — warnings are returned to the caller.
"""

from __future__ import annotations

import json
import math
from pathlib import Path

from pw_cookies.core.models import SaveResult, StorageState
from pw_cookies.core.protocols import InputSource, StateSink
from pw_cookies.exceptions import (
    EmptyInputError,
    InvalidJsonError,
    MissingExpectedKeysWarning,
)

DEFAULT_OUTPUT: str = "auth-state.json"
"""Output file used when ``--save`` is given without a path."""

JSON_INDENT: int = 2

SAVE_USAGE: str = "echo '{\"cookies\":[]}' | pw-cookies --save"


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> None:
    raise ValueError(f"Unexpected non-standard JSON constant {name}")


def _parse_finite_float(token: str) -> float:
    """Parse a JSON number, refusing ones that overflow to infinity."""
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"Number {token} is out of range")
    return value


def parse_storage_state(text: str) -> StorageState:
    """Parse *text* into a :class:`StorageState`.

    Raises
    ------
    EmptyInputError
        If *text* is empty or whitespace-only.
    InvalidJsonError
        If *text* is not valid JSON, uses ``NaN``/``Infinity``, or holds a
        number too large to write back as JSON.
    """
    if not text.strip():
        raise EmptyInputError("No JSON input received", hint=f"Usage: {SAVE_USAGE}")
    try:
        value = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except ValueError as exc:
        # JSONDecodeError is a ValueError subclass.
        raise InvalidJsonError(f"Invalid JSON input: {exc}") from exc
    return StorageState(value=value)


def check_expected_keys(state: StorageState) -> MissingExpectedKeysWarning | None:
    """Return a warning when *state* has neither ``cookies`` nor ``origins``."""
    if state.has_expected_keys:
        return None
    return MissingExpectedKeysWarning(
        "Input does not look like a storageState object",
    )


def serialize_storage_state(state: StorageState) -> str:
    """Serialize with 2-space indentation and no trailing newline."""
    return json.dumps(state.value, indent=JSON_INDENT, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

class StateService:
    """Reads a storage state from *source* and writes it to *sink*.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`InputSource` protocol.
    sink:
        Any object satisfying the :class:`StateSink` protocol.
    """

    def __init__(self, source: InputSource, sink: StateSink) -> None:
        self._source: InputSource = source
        self._sink: StateSink = sink

    def save(self, output_path: str | Path = DEFAULT_OUTPUT) -> SaveResult:
        """Read all input, validate it, and write it to *output_path*.

        Filesystem errors from the sink propagate unchanged.

        Raises
        ------
        EmptyInputError
            If the input is empty or whitespace-only.
        InvalidJsonError
            If the input is not valid JSON.
        """
        state = parse_storage_state(self._source.read_all())
        warning = check_expected_keys(state)

        written = self._sink.write(output_path, serialize_storage_state(state))
        return SaveResult(
            path=written,
            cookie_count=state.cookie_count,
            origin_count=state.origin_count,
            warnings=(warning,) if warning is not None else (),
        )
