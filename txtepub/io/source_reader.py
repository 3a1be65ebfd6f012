"""Source document reading.

Responsibilities:
- Load a flat text document into memory in one read.
- Derive the book title from the source file name.
"""

from __future__ import annotations

from pathlib import Path
import re

from ..errors import PipelineStageError

_TXT_SUFFIX_RE = re.compile(r"\.txt$", re.IGNORECASE)


def derive_title(path: Path) -> str:
    """Return the file name without a trailing `.txt` suffix (any case)."""

    return _TXT_SUFFIX_RE.sub("", path.name) or path.name


def read_source_text(path: Path) -> str:
    """Read a UTF-8 source document, tolerating a leading byte order mark."""

    if not path.exists():
        raise PipelineStageError(
            stage="read",
            detail=f"Source file not found: `{path}`.",
            hint="Pass an existing plain-text file.",
        )
    if not path.is_file():
        raise PipelineStageError(
            stage="read",
            detail=f"Source path is not a file: `{path}`.",
        )
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise PipelineStageError(
            stage="read",
            detail=f"Source file `{path}` is not valid UTF-8 text.",
            hint="Re-save the document as UTF-8 and rerun.",
        ) from exc
