"""Text segmentation components for txtepub.

This package contains chapter boundary detection and the segmentation
heuristic that turns flat text into ordered chapters.
"""

from .boundaries import DEFAULT_BOUNDARY_PATTERN, build_boundary_pattern
from .segmenter import ChapterSegmenter, count_words

__all__ = [
    "ChapterSegmenter",
    "DEFAULT_BOUNDARY_PATTERN",
    "build_boundary_pattern",
    "count_words",
]
