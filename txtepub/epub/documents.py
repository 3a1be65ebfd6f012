"""EPUB document emitters.

Responsibilities:
- Render each structural artifact of the container as text.
- Keep chapter resource naming identical across manifest, spine, and NCX.
- Escape every user-supplied string before it is interpolated into markup.

All functions are pure; output depends only on their arguments.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.datatypes import BookMeta, Chapter
from ..text.segmenter import split_lines
from .escaping import escape_xml

PACKAGE_DOCUMENT_NAME = "content.opf"
NCX_DOCUMENT_NAME = "toc.ncx"
STYLESHEET_NAME = "styles.css"

_STYLES_CSS = (
    "body { font-family: serif; margin: 1em; } "
    "p { margin: 1em 0; } "
    "h1 { text-align: center; }"
)


def chapter_resource_id(index: int) -> str:
    """Return the manifest id for a 1-based chapter index."""

    return f"chapter{index}"


def chapter_file_name(index: int) -> str:
    """Return the content-directory file name for a 1-based chapter index."""

    return f"{chapter_resource_id(index)}.xhtml"


def container_xml() -> str:
    """Return the static container descriptor pointing to the package document."""

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
    <rootfiles>
        <rootfile full-path="OEBPS/{PACKAGE_DOCUMENT_NAME}" media-type="application/oebps-package+xml"/>
    </rootfiles>
</container>"""


def content_opf(meta: BookMeta, chapters: Sequence[Chapter]) -> str:
    """Return the OPF package document with metadata, manifest, and spine."""

    manifest_items = [
        f'<item id="ncx" href="{NCX_DOCUMENT_NAME}" media-type="application/x-dtbncx+xml"/>'
    ]
    spine_items: list[str] = []
    for index in range(1, len(chapters) + 1):
        resource_id = chapter_resource_id(index)
        manifest_items.append(
            f'<item id="{resource_id}" href="{chapter_file_name(index)}" '
            'media-type="application/xhtml+xml"/>'
        )
        spine_items.append(f'<itemref idref="{resource_id}"/>')

    manifest = "\n    ".join(manifest_items)
    spine = "\n    ".join(spine_items)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" unique-identifier="bookid" version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>{escape_xml(meta.title)}</dc:title>
    <dc:language>{escape_xml(meta.language)}</dc:language>
    <dc:identifier id="bookid">urn:uuid:{escape_xml(meta.identifier)}</dc:identifier>
  </metadata>
  <manifest>
    {manifest}
  </manifest>
  <spine toc="ncx">
    {spine}
  </spine>
</package>"""


def toc_ncx(meta: BookMeta, chapters: Sequence[Chapter]) -> str:
    """Return the flat NCX navigation map, one navPoint per chapter."""

    nav_points: list[str] = []
    for play_order, chapter in enumerate(chapters, start=1):
        nav_points.append(
            f"""<navPoint id="navPoint-{play_order}" playOrder="{play_order}">
      <navLabel><text>{escape_xml(chapter.title)}</text></navLabel>
      <content src="{chapter_file_name(play_order)}"/>
    </navPoint>"""
        )

    nav_map = "\n    ".join(nav_points)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <head><meta name="dtb:uid" content="urn:uuid:{escape_xml(meta.identifier)}"/></head>
  <docTitle><text>{escape_xml(meta.title)}</text></docTitle>
  <navMap>
    {nav_map}
  </navMap>
</ncx>"""


def _content_lines(content: str) -> list[str]:
    """Return original content lines without the final line terminator."""

    lines = split_lines(content)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def chapter_xhtml(chapter: Chapter) -> str:
    """Return the XHTML document for one chapter, one paragraph per line."""

    title = escape_xml(chapter.title)
    paragraphs = "\n".join(
        f"<p>{escape_xml(line)}</p>" for line in _content_lines(chapter.content)
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>{title}</title><link rel="stylesheet" type="text/css" href="{STYLESHEET_NAME}"/></head>
<body><h1>{title}</h1>
{paragraphs}
</body>
</html>"""


def styles_css() -> str:
    """Return the shared static stylesheet."""

    return _STYLES_CSS
