"""Text-to-EPUB conversion orchestration.

Responsibilities:
- Run segment, identify, emit, and package stages strictly in order.
- Return finished archive bytes or raise; nothing partial leaks to callers.

Key types:
- `TextToEpubConverter`: orchestration facade.
- `convert`: caller-facing one-shot conversion.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..config import ConverterConfig
from ..epub.packager import EpubPackager
from ..identifiers import content_book_id, generate_book_id
from ..models.datatypes import BookMeta, Chapter, EpubPackage
from ..telemetry.logger import RunLogger
from ..text.boundaries import build_boundary_pattern
from ..text.segmenter import ChapterSegmenter
from .telemetry import PipelineTelemetryMixin

DEFAULT_TITLE = "Untitled"


class TextToEpubConverter(PipelineTelemetryMixin):
    """Coordinate all stages for a single conversion."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        run_logger: RunLogger | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize conversion settings and optional logging/identifier hooks.

        Args:
            config: Conversion settings; defaults to `ConverterConfig()`.
            run_logger: Optional structured stage logger.
            id_factory: Optional identifier source overriding `identifier_mode`.
        """

        self._config = config if config is not None else ConverterConfig()
        self._config.validate()
        self._run_logger = run_logger
        self._id_factory = id_factory
        self._segmenter = ChapterSegmenter(default_title=self._config.default_chapter_title)
        self._packager = EpubPackager()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def split_chapters(self, text: str) -> list[Chapter]:
        """Segment source text into chapters with the configured boundary rule."""

        return self._segmenter.segment(
            text,
            self._config.min_word_count,
            build_boundary_pattern(self._config.custom_delimiter),
        )

    def build_package(self, text: str, title: str = DEFAULT_TITLE) -> EpubPackage:
        """Run segment, identify, and emit stages and return ordered archive members."""

        chapters = self._run_stage(
            "segment",
            lambda: self.split_chapters(text),
            lambda result: {"chapters": len(result)},
        )
        identifier = self._run_stage("identify", lambda: self._identifier_for(chapters))
        meta = BookMeta(title=title, language=self._config.language, identifier=identifier)
        return self._run_stage(
            "emit",
            lambda: self._packager.package(meta, chapters),
            lambda result: {"members": len(result.artifacts)},
        )

    def convert(self, text: str, title: str = DEFAULT_TITLE) -> bytes:
        """Convert source text into EPUB archive bytes."""

        return self.archive(self.build_package(text, title))

    def archive(self, package: EpubPackage) -> bytes:
        """Run the package stage and return finished archive bytes."""

        return self._run_stage(
            "package",
            lambda: self._packager.to_bytes(package),
            lambda result: {"bytes": len(result)},
        )

    def _identifier_for(self, chapters: Sequence[Chapter]) -> str:
        """Return the package identifier for this conversion."""

        if self._id_factory is not None:
            return self._id_factory()
        if self._config.identifier_mode == "content":
            return content_book_id(chapters)
        return generate_book_id()


def convert(
    source_text: str,
    min_word_count: int | None = None,
    custom_delimiter: str | None = None,
    *,
    title: str = DEFAULT_TITLE,
    config: ConverterConfig | None = None,
) -> bytes:
    """Convert plain text into EPUB archive bytes.

    `min_word_count` and `custom_delimiter` override the matching `config`
    fields when given; other settings come from `config` or its defaults.

    Raises:
        NoChaptersDetectedError: If the text yields no chapters.
        ValueError: If the settings are invalid.
    """

    base = config if config is not None else ConverterConfig()
    effective = ConverterConfig(
        min_word_count=base.min_word_count if min_word_count is None else min_word_count,
        custom_delimiter=base.custom_delimiter if custom_delimiter is None else custom_delimiter,
        language=base.language,
        default_chapter_title=base.default_chapter_title,
        identifier_mode=base.identifier_mode,
    )
    return TextToEpubConverter(effective).convert(source_text, title)
