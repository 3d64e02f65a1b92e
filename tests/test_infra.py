"""Tests for the stdin source and state-file sink (infra/)."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from pw_cookies.infra.state_file import StateFileSink, resolve_output_path
from pw_cookies.infra.stdin_source import StdinSource


class TestStdinSource:
    def test_reads_explicit_stream_to_end(self) -> None:
        source = StdinSource(io.StringIO('{"a":\n1}'))
        assert source.read_all() == '{"a":\n1}'

    def test_defaults_to_sys_stdin_at_read_time(
        self, feed_stdin: Callable[[str | bytes], None],
    ) -> None:
        source = StdinSource()
        feed_stdin("late")
        assert source.read_all() == "late"

    def test_decodes_bytes_as_utf8(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO("café".encode("utf-8")), encoding="ascii")
        assert StdinSource(stream).read_all() == "café"

    def test_invalid_utf8_becomes_replacement_char(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"caf\xe9"), encoding="ascii")
        assert StdinSource(stream).read_all() == "caf\ufffd"


class TestResolveOutputPath:
    def test_relative_path_made_absolute(self, workdir: Path) -> None:
        resolved = resolve_output_path("myfile.json")
        assert resolved.is_absolute()
        assert resolved == workdir.resolve() / "myfile.json"

    def test_absolute_path_unchanged(self, tmp_path: Path) -> None:
        target = tmp_path.resolve() / "state.json"
        assert resolve_output_path(target) == target


class TestStateFileSink:
    def test_writes_utf8_text(self, tmp_path: Path) -> None:
        target = tmp_path / "state.json"
        written = StateFileSink().write(target, '{"v": "✓"}')
        assert written == target.resolve()
        assert target.read_text(encoding="utf-8") == '{"v": "✓"}'

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "state.json"
        target.write_text("old content that is longer", encoding="utf-8")
        StateFileSink().write(target, "{}")
        assert target.read_text(encoding="utf-8") == "{}"

    def test_unencodable_text_leaves_existing_file_intact(self, tmp_path: Path) -> None:
        target = tmp_path / "state.json"
        target.write_text("{}", encoding="utf-8")
        with pytest.raises(UnicodeEncodeError):
            StateFileSink().write(target, '{"v": "\udce9"}')
        assert target.read_text(encoding="utf-8") == "{}"

    def test_missing_directory_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            StateFileSink().write(tmp_path / "nope" / "state.json", "{}")
