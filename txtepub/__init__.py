"""Top-level package for txtepub.

This package converts flat plain-text books into EPUB 2 containers. The main
entry points are `convert` and `TextToEpubConverter`.
"""

from .errors import NoChaptersDetectedError, PipelineStageError
from .pipeline import TextToEpubConverter, convert

__all__ = [
    "NoChaptersDetectedError",
    "PipelineStageError",
    "TextToEpubConverter",
    "convert",
    "__version__",
]

__version__ = "0.1.0"
