"""
mdcode - extract fenced code blocks from markdown into source files.

Main Components:
- Extractors: Code block extraction and output type detection
- Utils: Idempotent file writing
- Sources: Embedded/in-memory markdown readers
- MarkdownCodeExtractor: Orchestrates read -> extract -> write

Usage:
    from mdcode import MarkdownCodeExtractor

    result = MarkdownCodeExtractor(root_dir=".", destination="web") \\
        .input_path("README.md") \\
        .extract("main.js")
"""

from .errors import (
    MdcodeError,
    ConfigurationError,
    UnsupportedTypeError,
    SourceReadError,
    EmptyExtractionError,
    SinkWriteError,
)
from .extractors import extract_code_blocks, find_code_blocks, get_code_type
from .utils import ConditionalWriter, write_if_different
from .sources import ReaderFile, ResourceReader, MappingReader
from .schemas import ExtractionResult
from .extractor import MarkdownCodeExtractor

__all__ = [
    # Main extractor
    "MarkdownCodeExtractor",
    "ExtractionResult",

    # Core operations
    "extract_code_blocks",
    "find_code_blocks",
    "get_code_type",
    "ConditionalWriter",
    "write_if_different",

    # Input sources
    "ReaderFile",
    "ResourceReader",
    "MappingReader",

    # Errors
    "MdcodeError",
    "ConfigurationError",
    "UnsupportedTypeError",
    "SourceReadError",
    "EmptyExtractionError",
    "SinkWriteError",
]

__version__ = "0.1.0"
