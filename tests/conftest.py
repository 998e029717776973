from pathlib import Path

import pytest


class MemoryFileSystem:
    """In-memory read/write capabilities that record every call."""

    def __init__(self):
        self.files = {}
        self.reads = []
        self.writes = []

    def read(self, path):
        self.reads.append(Path(path))
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write(self, path, data):
        self.writes.append(Path(path))
        self.files[Path(path)] = data


@pytest.fixture
def memory_fs():
    """Fresh in-memory filesystem for each test."""
    return MemoryFileSystem()
