"""Exceptions raised by mdcode.

Every failure of an extraction run surfaces as a subclass of MdcodeError so
callers can catch the whole family at once. I/O failures keep the original
OSError as ``__cause__``.
"""

from typing import Optional


class MdcodeError(Exception):
    """Base class for all mdcode errors."""


class ConfigurationError(MdcodeError):
    """Destination or input source missing when extraction is requested."""


class UnsupportedTypeError(MdcodeError):
    """Output file extension has no language tag mapping."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unsupported file extension: {extension or '(none)'}")


class SourceReadError(MdcodeError):
    """Reading the markdown source failed."""

    def __init__(self, source: str, reason: Optional[BaseException] = None):
        self.source = source
        message = f"reading source {source}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyExtractionError(MdcodeError):
    """The markdown contained no code blocks of the requested type."""

    def __init__(self, code_type: str):
        self.code_type = code_type
        super().__init__(f"no {code_type} code blocks found in markdown")


class SinkWriteError(MdcodeError):
    """Writing the output file failed."""

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        self.path = path
        message = f"writing output file {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)
