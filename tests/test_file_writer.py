"""
Tests for idempotent file writing.

Tests critical features:
- Skipping writes when content is unchanged
- Always writing when the target is missing or unreadable
- Surfacing write failures as SinkWriteError
"""

from pathlib import Path

import pytest

from mdcode.errors import SinkWriteError
from mdcode.utils import ConditionalWriter, write_if_different


class TestWriteIfDifferentInMemory:
    """Test the write decision against injected fakes."""

    def test_missing_file_is_written(self, memory_fs):
        """Test that a path that does not exist yet is always written."""
        written = write_if_different("out/main.go", "package main", memory_fs.read, memory_fs.write)

        assert written is True
        assert memory_fs.writes == [Path("out/main.go")]
        assert memory_fs.files[Path("out/main.go")] == b"package main"

    def test_missing_file_written_even_when_empty(self, memory_fs):
        """Test that absence forces a write regardless of content."""
        assert write_if_different("empty.css", "", memory_fs.read, memory_fs.write) is True
        assert memory_fs.files[Path("empty.css")] == b""

    def test_second_identical_call_is_noop(self, memory_fs):
        """Test that two identical calls perform exactly one write."""
        writer = ConditionalWriter(memory_fs.read, memory_fs.write)

        assert writer.write_if_different("main.go", "package main") is True
        assert writer.write_if_different("main.go", "package main") is False
        assert len(memory_fs.writes) == 1

    def test_different_content_overwrites(self, memory_fs):
        """Test that changed content replaces the existing file."""
        memory_fs.files[Path("app.js")] = b"let a = 1;"
        writer = ConditionalWriter(memory_fs.read, memory_fs.write)

        assert writer.write_if_different("app.js", "let a = 2;") is True
        assert memory_fs.files[Path("app.js")] == b"let a = 2;"

    def test_unreadable_file_falls_through_to_write(self, memory_fs):
        """Test that any read error is treated like a missing file."""
        def denied(path):
            raise PermissionError(str(path))

        writer = ConditionalWriter(denied, memory_fs.write)

        assert writer.write_if_different("locked.go", "package main") is True
        assert memory_fs.writes == [Path("locked.go")]

    def test_write_failure_raises_sink_write_error(self, memory_fs):
        """Test that a failing write capability surfaces as SinkWriteError."""
        def broken(path, data):
            raise OSError("disk full")

        writer = ConditionalWriter(memory_fs.read, broken)

        with pytest.raises(SinkWriteError) as exc_info:
            writer.write_if_different("main.go", "package main")

        assert "disk full" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestWriteIfDifferentOnDisk:
    """Test the default filesystem capabilities."""

    def test_creates_intermediate_directories(self, tmp_path):
        """Test that missing parent directories are created."""
        target = tmp_path / "a" / "b" / "style.css"

        assert write_if_different(target, "body {}") is True
        assert target.read_text() == "body {}"

    def test_unchanged_file_keeps_mtime(self, tmp_path):
        """Test that an up-to-date file is not touched."""
        target = tmp_path / "main.go"
        target.write_text("package main")
        before = target.stat().st_mtime_ns

        assert write_if_different(target, "package main") is False
        assert target.stat().st_mtime_ns == before

    def test_write_into_file_path_fails(self, tmp_path):
        """Test that an impossible destination raises SinkWriteError."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")

        with pytest.raises(SinkWriteError):
            write_if_different(blocker / "main.go", "package main")
