"""
Idempotent file writing.

Writes generated code to disk only when the file is missing or its content
differs, so regenerating unchanged output leaves timestamps untouched.

Reading and writing go through injected callables, which lets tests (and
callers with virtual filesystems) swap in in-memory fakes.
"""

from pathlib import Path
from typing import Callable, Optional, Union
import logging

from mdcode.errors import SinkWriteError

logger = logging.getLogger(__name__)

ReadFunc = Callable[[Path], bytes]
WriteFunc = Callable[[Path, bytes], None]


def read_file(path: Path) -> bytes:
    """Read a file from the local filesystem."""
    return Path(path).read_bytes()


def write_file(path: Path, data: bytes) -> None:
    """Write a file to the local filesystem, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


class ConditionalWriter:
    """Write content only when it differs from what is already stored."""

    def __init__(
        self,
        read_func: Optional[ReadFunc] = None,
        write_func: Optional[WriteFunc] = None
    ):
        """
        Initialize conditional writer.

        Args:
            read_func: Callable returning the current bytes at a path
                       (default: read from local filesystem)
            write_func: Callable storing bytes at a path
                        (default: write to local filesystem, creating directories)
        """
        self.read_func = read_func or read_file
        self.write_func = write_func or write_file

    def write_if_different(self, path: Union[str, Path], content: str) -> bool:
        """
        Write ``content`` to ``path`` unless the file already holds it.

        A failed read (missing file, permission error, ...) is treated the
        same as differing content: the write is attempted and any real
        problem surfaces there.

        Args:
            path: Destination file path
            content: Text to write (UTF-8 encoded)

        Returns:
            True if the file was written, False if it was already up to date

        Raises:
            SinkWriteError: If the write fails
        """
        path = Path(path)
        data = content.encode("utf-8")

        try:
            existing = self.read_func(path)
        except OSError as e:
            logger.debug(f"Could not read {path} ({e}), writing")
        else:
            if existing == data:
                logger.info(f"File {path} already up to date, skipping write")
                return False

        try:
            self.write_func(path, data)
        except OSError as e:
            raise SinkWriteError(str(path), e) from e

        logger.info(f"Written file {path}")
        return True


def write_if_different(
    path: Union[str, Path],
    content: str,
    read_func: Optional[ReadFunc] = None,
    write_func: Optional[WriteFunc] = None
) -> bool:
    """
    Convenience function to conditionally write a single file.

    Args:
        path: Destination file path
        content: Text to write
        read_func: Optional read capability (default: local filesystem)
        write_func: Optional write capability (default: local filesystem)

    Returns:
        True if the file was written, False if unchanged

    Example:
        >>> write_if_different(Path("out/main.go"), "package main")
        True
        >>> write_if_different(Path("out/main.go"), "package main")
        False
    """
    return ConditionalWriter(read_func, write_func).write_if_different(path, content)
