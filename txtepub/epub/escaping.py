"""XML escaping for user-supplied text."""

from __future__ import annotations

import html
import re

# Complement of the XML 1.0 `Char` production: C0 controls other than tab,
# LF and CR, lone surrogates, U+FFFE and U+FFFF.
_XML_INVALID_CHARS_RE = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def strip_invalid_xml_chars(value: str) -> str:
    """Drop characters that no XML 1.0 document may contain, even escaped."""

    return _XML_INVALID_CHARS_RE.sub("", value)


def escape_xml(value: str) -> str:
    """Escape `&`, `<`, `>`, `"` and `'` for element text and attribute values.

    Characters outside the XML 1.0 character range (form feeds, NUL and other
    control characters) are removed first so the result always parses.
    """

    return html.escape(strip_invalid_xml_chars(value), quote=True)
