"""EPUB archive assembly.

Responsibilities:
- Order archive members as readers expect (`mimetype` first, stored).
- Write the archive fully in memory and hand back only finished bytes.
"""

from __future__ import annotations

from collections.abc import Sequence
import io
import zipfile

from ..models.datatypes import BookMeta, Chapter, EpubArtifact, EpubPackage
from .documents import (
    NCX_DOCUMENT_NAME,
    PACKAGE_DOCUMENT_NAME,
    STYLESHEET_NAME,
    chapter_file_name,
    chapter_xhtml,
    container_xml,
    content_opf,
    styles_css,
    toc_ncx,
)

MIMETYPE_PATH = "mimetype"
MIMETYPE = "application/epub+zip"
CONTAINER_PATH = "META-INF/container.xml"
CONTENT_DIR = "OEBPS"


class EpubPackager:
    """Assemble emitted documents into a zip container."""

    # Zip epoch; member timestamps never vary between conversions.
    _MEMBER_DATE_TIME = (1980, 1, 1, 0, 0, 0)

    def package(self, meta: BookMeta, chapters: Sequence[Chapter]) -> EpubPackage:
        """Render every document once and return the ordered archive members."""

        artifacts = [
            EpubArtifact(path=MIMETYPE_PATH, data=MIMETYPE.encode("ascii"), compress=False),
            self._text_artifact(CONTAINER_PATH, container_xml()),
            self._text_artifact(
                f"{CONTENT_DIR}/{PACKAGE_DOCUMENT_NAME}", content_opf(meta, chapters)
            ),
            self._text_artifact(f"{CONTENT_DIR}/{NCX_DOCUMENT_NAME}", toc_ncx(meta, chapters)),
        ]
        for index, chapter in enumerate(chapters, start=1):
            artifacts.append(
                self._text_artifact(
                    f"{CONTENT_DIR}/{chapter_file_name(index)}", chapter_xhtml(chapter)
                )
            )
        artifacts.append(self._text_artifact(f"{CONTENT_DIR}/{STYLESHEET_NAME}", styles_css()))
        return EpubPackage(meta=meta, chapters=tuple(chapters), artifacts=tuple(artifacts))

    def to_bytes(self, package: EpubPackage) -> bytes:
        """Write package members into an in-memory zip archive and return its bytes."""

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            for artifact in package.artifacts:
                member = zipfile.ZipInfo(artifact.path, date_time=self._MEMBER_DATE_TIME)
                member.compress_type = (
                    zipfile.ZIP_DEFLATED if artifact.compress else zipfile.ZIP_STORED
                )
                member.external_attr = 0o644 << 16
                archive.writestr(member, artifact.data)
        return buffer.getvalue()

    @staticmethod
    def _text_artifact(path: str, text: str) -> EpubArtifact:
        """Encode a text document as a deflated UTF-8 member."""

        return EpubArtifact(path=path, data=text.encode("utf-8"), compress=True)
