"""
Output file type detection.

Maps the extension of the file being generated to the markdown language tag
whose code blocks should be extracted into it.
"""

from pathlib import PurePath
from typing import Dict, Optional


class LanguageDetector:
    """
    Resolve output file extensions to code block language tags.

    Supported outputs:
    - Go (.go -> go)
    - JavaScript (.js -> javascript)
    - CSS (.css -> css)
    """

    # Extension -> language tag used in ```<tag> fences
    EXTENSION_MAPPINGS = {
        '.go': 'go',
        '.js': 'javascript',
        '.css': 'css',
    }

    def __init__(self, mappings: Optional[Dict[str, str]] = None):
        self.mappings = dict(mappings) if mappings is not None else dict(self.EXTENSION_MAPPINGS)

    def get_code_type(self, output_file: str) -> Optional[str]:
        """
        Determine the code type from a file name.

        Args:
            output_file: Output file name or path (e.g. "main.go")

        Returns:
            Language tag, or None if the extension is not supported
        """
        return self.mappings.get(file_extension(output_file))

    def supported_extensions(self) -> Dict[str, str]:
        """Return a copy of the extension -> tag table."""
        return dict(self.mappings)


def file_extension(output_file: str) -> str:
    """
    Return the extension of the final path element, including the dot.

    Everything from the last "." counts, so ".go" -> ".go" and "main." -> ".".
    Unlike PurePath.suffix, a leading dot is not treated as a hidden-file prefix.
    """
    name = PurePath(output_file).name
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def get_code_type(output_file: str) -> Optional[str]:
    """Convenience wrapper around the default extension table."""
    return LanguageDetector().get_code_type(output_file)
