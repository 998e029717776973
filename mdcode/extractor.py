"""
Markdown code extractor - main orchestration logic.

Ties together source reading, language detection, code block extraction and
idempotent writing. Configure one input source with the builder methods,
then call extract() once per output file:

    from mdcode import MarkdownCodeExtractor

    MarkdownCodeExtractor(root_dir=".", destination="web") \\
        .input_path("docs/README.md") \\
        .extract("main.go")
"""

from pathlib import Path, PurePath
from typing import Optional, Union
import logging

from mdcode.errors import (
    ConfigurationError,
    EmptyExtractionError,
    SourceReadError,
    UnsupportedTypeError,
)
from mdcode.extractors import CodeBlockExtractor, LanguageDetector, file_extension
from mdcode.extractors.code_extractor import BLOCK_SEPARATOR
from mdcode.schemas import ExtractionResult
from mdcode.sources import ReaderFile
from mdcode.utils.file_writer import ConditionalWriter, ReadFunc, WriteFunc

logger = logging.getLogger(__name__)


class MarkdownCodeExtractor:
    """
    Extract code blocks from a markdown source into output files.

    Exactly one input source is active at a time: each input_* method
    replaces whichever source was configured before it.
    """

    def __init__(
        self,
        root_dir: Union[str, Path],
        destination: Union[str, Path, None],
        read_func: Optional[ReadFunc] = None,
        write_func: Optional[WriteFunc] = None,
        language_detector: Optional[LanguageDetector] = None
    ):
        """
        Initialize markdown code extractor.

        Args:
            root_dir: Directory that input_path() paths are relative to
            destination: Output directory for generated files
            read_func: Read capability for path inputs and existing outputs
                       (default: local filesystem)
            write_func: Write capability for outputs (default: local filesystem)
            language_detector: Extension -> tag table (default: .go, .js, .css)
        """
        self.root_dir = Path(root_dir)
        self.destination = str(destination) if destination else ""
        self.writer = ConditionalWriter(read_func, write_func)
        self.language_detector = language_detector or LanguageDetector()

        self._input_path: Optional[str] = None
        self._input_bytes: Optional[bytes] = None
        self._input_embed: Optional[ReaderFile] = None
        self._input_embed_path = ""

    def _clear_inputs(self):
        self._input_path = None
        self._input_bytes = None
        self._input_embed = None
        self._input_embed_path = ""

    def input_path(self, path_file: Union[str, Path]) -> "MarkdownCodeExtractor":
        """Use a markdown file relative to root_dir as input."""
        self._clear_inputs()
        self._input_path = str(path_file)
        return self

    def input_bytes(self, content: Union[bytes, str]) -> "MarkdownCodeExtractor":
        """Use in-memory markdown content as input."""
        self._clear_inputs()
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._input_bytes = content
        return self

    def input_embed(self, reader: ReaderFile, path: str) -> "MarkdownCodeExtractor":
        """Use a file inside any ReaderFile implementation as input."""
        self._clear_inputs()
        self._input_embed = reader
        self._input_embed_path = path
        return self

    def extract(self, output_file: str) -> ExtractionResult:
        """
        Extract code blocks from the configured input and write them to output_file.

        The output file extension selects which code blocks are extracted
        (.go -> go, .js -> javascript, .css -> css). The file is written to
        ``destination / output_file`` only if its content changed.

        Args:
            output_file: Output file name, relative to destination
                         (a leading root or drive is dropped)

        Returns:
            ExtractionResult describing what was extracted and written

        Raises:
            ConfigurationError: Destination or input source not configured
            UnsupportedTypeError: Extension has no language mapping
            SourceReadError: Markdown source could not be read
            EmptyExtractionError: No matching code blocks were found
            SinkWriteError: Output file could not be written
        """
        if not self.destination:
            raise ConfigurationError(
                "destination not set; provide destination when creating MarkdownCodeExtractor"
            )

        # Resolve the code type before touching any file
        code_type = self.language_detector.get_code_type(output_file)
        if code_type is None:
            raise UnsupportedTypeError(file_extension(output_file))

        markdown = self._read_configured_source()

        extractor = CodeBlockExtractor(code_type)
        blocks = extractor.find_blocks(markdown)
        code = BLOCK_SEPARATOR.join(blocks)
        if not code:
            raise EmptyExtractionError(code_type)

        output_path = Path(self.destination) / self._relative_output(output_file)
        written = self.writer.write_if_different(output_path, code)

        logger.info(f"Extracted {code_type} code to {output_path}")

        return ExtractionResult(
            output_path=str(output_path),
            language=code_type,
            block_count=len(blocks),
            written=written,
            bytes_written=len(code.encode("utf-8")) if written else 0
        )

    @staticmethod
    def _relative_output(output_file: str) -> PurePath:
        # Drop any root or drive so the output always stays under destination
        path = PurePath(output_file)
        if path.anchor:
            return PurePath(*path.parts[1:])
        return path

    def _read_configured_source(self) -> str:
        """
        Read markdown content from the configured input.

        Byte input takes priority, then path input, then the embedded reader.
        """
        if self._input_bytes is not None:
            source, data = "bytes input", self._input_bytes

        elif self._input_path:
            full_path = self.root_dir / self._input_path
            source = f"file {full_path}"
            try:
                data = self.writer.read_func(full_path)
            except OSError as e:
                raise SourceReadError(source, e) from e

        elif self._input_embed is not None:
            source = f"embedded file {self._input_embed_path}"
            try:
                data = self._input_embed.read_file(self._input_embed_path)
            except (OSError, ImportError) as e:
                raise SourceReadError(source, e) from e

        else:
            raise ConfigurationError(
                "no input configured; call input_path, input_bytes, or input_embed before extract"
            )

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceReadError(source, e) from e
