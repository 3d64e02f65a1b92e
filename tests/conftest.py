"""Shared pytest fixtures for the pw-cookies test suite.

Guidelines
----------
* No test writes outside ``tmp_path``.
* Standard input is replaced with an in-memory stream, never read for real.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | bytes], None]:
    """Return a helper that replaces ``sys.stdin`` with the given input.

    The stream is byte-backed like a real pipe.  Its text layer is ASCII so
    any test relying on locale decoding instead of UTF-8 fails loudly.
    """

    def _feed(data: str | bytes) -> None:
        raw = data.encode("utf-8") if isinstance(data, str) else data
        stream = io.TextIOWrapper(io.BytesIO(raw), encoding="ascii")
        monkeypatch.setattr(sys, "stdin", stream)

    return _feed
