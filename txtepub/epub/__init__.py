"""EPUB document emitters and archive packaging."""

from .documents import (
    chapter_file_name,
    chapter_resource_id,
    chapter_xhtml,
    container_xml,
    content_opf,
    styles_css,
    toc_ncx,
)
from .escaping import escape_xml
from .packager import EpubPackager

__all__ = [
    "EpubPackager",
    "chapter_file_name",
    "chapter_resource_id",
    "chapter_xhtml",
    "container_xml",
    "content_opf",
    "escape_xml",
    "styles_css",
    "toc_ncx",
]
