"""Utility modules for mdcode."""

from .file_writer import ConditionalWriter, write_if_different

__all__ = ["ConditionalWriter", "write_if_different"]
