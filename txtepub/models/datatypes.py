"""Core datatypes shared across txtepub modules.

Responsibilities:
- Represent immutable records exchanged between conversion stages.
- Keep archive members explicit and ordered for deterministic packaging.

Key types:
- `Chapter`, `BookMeta`, `EpubArtifact`, and `EpubPackage`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter segmented from source text.

    Attributes:
        title: Default leading title or the trimmed boundary line.
        content: Accumulated untrimmed lines, each followed by a newline.
    """

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class BookMeta:
    """Package-level metadata created once per conversion.

    Attributes:
        title: Human-readable document title.
        language: Language tag written to the package manifest.
        identifier: Version-4 layout identifier shared by manifest and navigation map.
    """

    title: str
    language: str
    identifier: str


@dataclass(frozen=True, slots=True)
class EpubArtifact:
    """One archive member.

    Attributes:
        path: Member path inside the archive.
        data: Encoded member payload.
        compress: Whether the member is deflated (`False` means stored).
    """

    path: str
    data: bytes
    compress: bool = True


@dataclass(frozen=True, slots=True)
class EpubPackage:
    """Ordered archive members for one conversion.

    Attributes:
        meta: Package metadata embedded in the manifest and navigation map.
        chapters: Chapters rendered into the package, in reading order.
        artifacts: Archive members in write order.
    """

    meta: BookMeta
    chapters: tuple[Chapter, ...]
    artifacts: tuple[EpubArtifact, ...]

    def member_paths(self) -> tuple[str, ...]:
        """Return member paths in archive order."""

        return tuple(artifact.path for artifact in self.artifacts)
