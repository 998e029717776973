"""
Code block extraction from markdown.

Collects the bodies of fenced code blocks tagged with a given language
(```go, ```javascript, ```css, ...) and concatenates them into a single
source string.

Matching is a flat regex pass over the raw text, not a markdown parse:
- A block opens with ``` immediately followed by the tag and a newline
- A block closes at the next ``` (non-greedy), whatever the content
- Blocks with other tags are skipped without interrupting the scan

Known limitation: the tag is embedded into the pattern as-is, without
re.escape(). Tags containing regex metacharacters match unpredictably.
"""

import re
from typing import List
import logging

logger = logging.getLogger(__name__)

# Separator placed between consecutive block bodies (one blank line)
BLOCK_SEPARATOR = "\n\n"


class CodeBlockExtractor:
    """
    Extract fenced code blocks of a single language tag.

    Example:
        >>> extractor = CodeBlockExtractor("go")
        >>> extractor.extract("```go\\nfunc A(){}\\n```")
        'func A(){}'
    """

    def __init__(self, code_type: str):
        """
        Initialize code block extractor.

        Args:
            code_type: Language tag following the opening backticks (e.g. "go")
        """
        if not code_type:
            raise ValueError("code_type must be a non-empty language tag")

        self.code_type = code_type
        self.pattern = self._build_pattern(code_type)

    @staticmethod
    def _build_pattern(code_type: str) -> "re.Pattern[str]":
        # DOTALL so the body capture spans newlines
        return re.compile(r"```" + code_type + r"\n(.*?)```", re.DOTALL)

    def find_blocks(self, markdown: str) -> List[str]:
        """
        Find all matching block bodies in document order.

        Args:
            markdown: Raw markdown text

        Returns:
            List of block bodies, each stripped of surrounding whitespace
        """
        blocks = [match.group(1).strip() for match in self.pattern.finditer(markdown)]

        logger.debug(f"Found {len(blocks)} {self.code_type} code blocks")
        return blocks

    def extract(self, markdown: str) -> str:
        """
        Extract and join all matching block bodies.

        Args:
            markdown: Raw markdown text

        Returns:
            Bodies joined with a blank line, or "" when nothing matched
        """
        return BLOCK_SEPARATOR.join(self.find_blocks(markdown))


def find_code_blocks(markdown: str, code_type: str) -> List[str]:
    """Return the stripped bodies of every ``code_type`` block in ``markdown``."""
    return CodeBlockExtractor(code_type).find_blocks(markdown)


def extract_code_blocks(markdown: str, code_type: str) -> str:
    """
    Convenience function to extract code of one language from markdown.

    Args:
        markdown: Raw markdown text
        code_type: Language tag to select (e.g. "go", "javascript", "css")

    Returns:
        Concatenated block bodies, or an empty string if none matched

    Example:
        >>> md = "text\\n```go\\nfunc A(){}\\n```\\nmore\\n```go\\nfunc B(){}\\n```\\n"
        >>> extract_code_blocks(md, "go")
        'func A(){}\\n\\nfunc B(){}'
    """
    return CodeBlockExtractor(code_type).extract(markdown)
