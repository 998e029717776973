"""Extraction components for mdcode."""

from .code_extractor import CodeBlockExtractor, extract_code_blocks, find_code_blocks
from .language_detector import LanguageDetector, file_extension, get_code_type

__all__ = [
    "CodeBlockExtractor",
    "extract_code_blocks",
    "find_code_blocks",
    "LanguageDetector",
    "get_code_type",
    "file_extension",
]
