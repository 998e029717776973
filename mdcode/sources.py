"""
Markdown input sources.

A ReaderFile is anything that can return the bytes of a named file. It plays
the role of an embedded filesystem: package data shipped inside a wheel, a
zip archive, or a plain dict in tests.
"""

from importlib import resources
from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class ReaderFile(Protocol):
    """Abstract file reader (package resources or any custom provider)."""

    def read_file(self, name: str) -> bytes:
        ...


class ResourceReader:
    """ReaderFile backed by the data files of an importable package."""

    def __init__(self, package: str):
        self.package = package

    def read_file(self, name: str) -> bytes:
        return resources.files(self.package).joinpath(name).read_bytes()


class MappingReader:
    """In-memory ReaderFile; missing names raise FileNotFoundError."""

    def __init__(self, files: Mapping[str, bytes]):
        self.files = dict(files)

    def read_file(self, name: str) -> bytes:
        try:
            return self.files[name]
        except KeyError:
            raise FileNotFoundError(name) from None
