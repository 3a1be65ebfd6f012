"""Input components for txtepub.

This package reads source documents and derives their display titles.
"""

from .source_reader import derive_title, read_source_text

__all__ = ["derive_title", "read_source_text"]
