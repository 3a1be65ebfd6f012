"""Unit tests for EPUB document emitters and XML escaping."""

from __future__ import annotations

import pytest

from tests.archive_helpers import NCX_NS, OPF_NS, XHTML_NS, parse_xml
from txtepub.epub.documents import (
    chapter_file_name,
    chapter_resource_id,
    chapter_xhtml,
    container_xml,
    content_opf,
    styles_css,
    toc_ncx,
)
from txtepub.epub.escaping import escape_xml
from txtepub.models.datatypes import BookMeta, Chapter

_META = BookMeta(
    title="Tom & Jerry's <Tale>",
    language="en",
    identifier="0f8c2b1e-5d3a-4c7b-9e21-7a6b5c4d3e2f",
)
_CHAPTERS = [
    Chapter(title="Introduction", content="First line.\n"),
    Chapter(title='Chapter 1 "Dawn"', content="a\n\nb\n"),
    Chapter(title="Chapter 2", content="c\n"),
]


def test_escape_xml_escapes_all_five_special_characters() -> None:
    assert escape_xml("<a href=\"x\">Tom & Jerry's</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#x27;s&lt;/a&gt;"
    )
    assert escape_xml("plain text") == "plain text"


def test_escape_xml_drops_characters_xml_cannot_carry() -> None:
    assert escape_xml("Page one\x0cPage two") == "Page onePage two"
    assert escape_xml("a\x00b\x1bc\x7fd") == "abc\x7fd"
    assert escape_xml("tab\there") == "tab\there"


def test_chapter_naming_is_one_based_and_shared() -> None:
    assert chapter_resource_id(1) == "chapter1"
    assert chapter_file_name(12) == "chapter12.xhtml"


def test_container_xml_points_to_package_document() -> None:
    root = parse_xml(container_xml())
    rootfile = root.find(
        "c:rootfiles/c:rootfile", {"c": "urn:oasis:names:tc:opendocument:xmlns:container"}
    )

    assert rootfile is not None
    assert rootfile.get("full-path") == "OEBPS/content.opf"
    assert rootfile.get("media-type") == "application/oebps-package+xml"
    assert container_xml() == container_xml()


def test_content_opf_lists_metadata_manifest_and_spine() -> None:
    root = parse_xml(content_opf(_META, _CHAPTERS))

    assert root.get("unique-identifier") == "bookid"
    assert root.get("version") == "2.0"
    assert root.findtext("opf:metadata/dc:title", namespaces=OPF_NS) == _META.title
    assert root.findtext("opf:metadata/dc:language", namespaces=OPF_NS) == "en"
    identifier = root.find("opf:metadata/dc:identifier", OPF_NS)
    assert identifier is not None
    assert identifier.get("id") == "bookid"
    assert identifier.text == f"urn:uuid:{_META.identifier}"

    items = root.findall("opf:manifest/opf:item", OPF_NS)
    assert [(item.get("id"), item.get("href")) for item in items] == [
        ("ncx", "toc.ncx"),
        ("chapter1", "chapter1.xhtml"),
        ("chapter2", "chapter2.xhtml"),
        ("chapter3", "chapter3.xhtml"),
    ]
    assert items[0].get("media-type") == "application/x-dtbncx+xml"
    assert {item.get("media-type") for item in items[1:]} == {"application/xhtml+xml"}

    spine = root.find("opf:spine", OPF_NS)
    assert spine is not None
    assert spine.get("toc") == "ncx"
    assert [ref.get("idref") for ref in spine.findall("opf:itemref", OPF_NS)] == [
        "chapter1",
        "chapter2",
        "chapter3",
    ]


def test_toc_ncx_has_one_ordered_nav_point_per_chapter() -> None:
    root = parse_xml(toc_ncx(_META, _CHAPTERS))

    uid = root.find("ncx:head/ncx:meta", NCX_NS)
    assert uid is not None
    assert uid.get("name") == "dtb:uid"
    assert uid.get("content") == f"urn:uuid:{_META.identifier}"
    assert root.findtext("ncx:docTitle/ncx:text", namespaces=NCX_NS) == _META.title

    nav_points = root.findall("ncx:navMap/ncx:navPoint", NCX_NS)
    assert [point.get("playOrder") for point in nav_points] == ["1", "2", "3"]
    assert [point.get("id") for point in nav_points] == [
        "navPoint-1",
        "navPoint-2",
        "navPoint-3",
    ]
    assert [
        point.findtext("ncx:navLabel/ncx:text", namespaces=NCX_NS) for point in nav_points
    ] == [chapter.title for chapter in _CHAPTERS]
    assert [point.find("ncx:content", NCX_NS).get("src") for point in nav_points] == [
        "chapter1.xhtml",
        "chapter2.xhtml",
        "chapter3.xhtml",
    ]


def test_chapter_xhtml_renders_heading_and_one_paragraph_per_line() -> None:
    root = parse_xml(chapter_xhtml(_CHAPTERS[1]))

    assert root.findtext("xhtml:head/xhtml:title", namespaces=XHTML_NS) == 'Chapter 1 "Dawn"'
    link = root.find("xhtml:head/xhtml:link", XHTML_NS)
    assert link is not None
    assert link.get("href") == "styles.css"
    assert root.findtext("xhtml:body/xhtml:h1", namespaces=XHTML_NS) == 'Chapter 1 "Dawn"'
    paragraphs = root.findall("xhtml:body/xhtml:p", XHTML_NS)
    assert [paragraph.text or "" for paragraph in paragraphs] == ["a", "", "b"]


def test_chapter_xhtml_renders_empty_chapter_as_single_empty_paragraph() -> None:
    root = parse_xml(chapter_xhtml(Chapter(title="Chapter 9", content="")))

    paragraphs = root.findall("xhtml:body/xhtml:p", XHTML_NS)
    assert len(paragraphs) == 1
    assert not paragraphs[0].text


@pytest.mark.parametrize("raw", ["<b>bold</b>", "Tom & Jerry", '"quoted"', "'single'"])
def test_emitters_never_leak_raw_user_markup(raw: str) -> None:
    meta = BookMeta(title=raw, language="en", identifier=_META.identifier)
    chapters = [Chapter(title=raw, content=f"{raw}\n")]

    documents = [
        content_opf(meta, chapters),
        toc_ncx(meta, chapters),
        chapter_xhtml(chapters[0]),
    ]

    for document in documents:
        assert raw not in document
        assert escape_xml(raw) in document
        parse_xml(document)


@pytest.mark.parametrize("raw", ["Page one\x0cPage two", "nul\x00byte", "bell\x07 & <tag>"])
def test_emitters_drop_control_characters_and_stay_well_formed(raw: str) -> None:
    meta = BookMeta(title=raw, language="en", identifier=_META.identifier)
    chapters = [Chapter(title=raw, content=f"{raw}\n")]

    opf = parse_xml(content_opf(meta, chapters))
    ncx = parse_xml(toc_ncx(meta, chapters))
    xhtml = parse_xml(chapter_xhtml(chapters[0]))

    cleaned = "".join(char for char in raw if char >= " ")
    assert opf.findtext("opf:metadata/dc:title", namespaces=OPF_NS) == cleaned
    assert ncx.findtext("ncx:docTitle/ncx:text", namespaces=NCX_NS) == cleaned
    assert xhtml.findtext("xhtml:body/xhtml:h1", namespaces=XHTML_NS) == cleaned
    assert xhtml.findtext("xhtml:body/xhtml:p", namespaces=XHTML_NS) == cleaned


def test_styles_css_is_static() -> None:
    assert styles_css() == styles_css()
    assert "body" in styles_css()
