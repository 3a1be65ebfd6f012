"""Chapter segmentation heuristic.

Responsibilities:
- Convert flat source text into ordered chapter records.
- Apply a minimum word threshold before a boundary line may open a chapter.
"""

from __future__ import annotations

import re

from ..errors import NoChaptersDetectedError
from ..models.datatypes import Chapter

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

DEFAULT_CHAPTER_TITLE = "Introduction"


def split_lines(text: str) -> list[str]:
    """Split text into lines on any newline convention."""

    return _LINE_BREAK_RE.split(text)


def count_words(line: str) -> int:
    """Count whitespace-delimited words, ignoring empty tokens."""

    return len(line.split())


class ChapterSegmenter:
    """Split raw text into chapter records using a boundary pattern."""

    def __init__(self, default_title: str = DEFAULT_CHAPTER_TITLE) -> None:
        self._default_title = default_title

    def segment(
        self,
        text: str,
        min_word_count: int,
        boundary_pattern: re.Pattern[str],
    ) -> list[Chapter]:
        """Segment text into chapters.

        A trimmed line matching `boundary_pattern` closes the current chapter
        only when at least `min_word_count` words were accumulated since the
        previous split; otherwise it is kept as ordinary content. Boundary
        lines become titles and never appear in chapter content.

        Raises:
            NoChaptersDetectedError: If no chapter could be produced.
        """

        chapters: list[Chapter] = []
        title = self._default_title
        content_lines: list[str] = []
        word_count = 0

        for line in split_lines(text):
            trimmed = line.strip()
            if boundary_pattern.search(trimmed) and word_count >= min_word_count:
                chapters.append(Chapter(title=title, content="".join(content_lines)))
                title = trimmed
                content_lines = []
                word_count = 0
            else:
                content_lines.append(line + "\n")
                word_count += count_words(line)

        content = "".join(content_lines)
        if content.strip():
            chapters.append(Chapter(title=title, content=content))

        if not chapters:
            raise NoChaptersDetectedError()
        return chapters
