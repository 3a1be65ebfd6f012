"""Chapter boundary pattern construction.

Responsibilities:
- Provide the built-in keyword heading pattern (`Chapter 3`, `PART IV: ...`).
- Compile a custom delimiter into an anchored, case-insensitive literal match.
"""

from __future__ import annotations

import re

DEFAULT_BOUNDARY_PATTERN = re.compile(
    r"^(Chapter|Episode|Part)\s+(\d+|[IVXLC]+)(.*)$",
    re.IGNORECASE,
)


def build_boundary_pattern(custom_delimiter: str | None = None) -> re.Pattern[str]:
    """Return the boundary pattern for an optional custom delimiter.

    A non-empty delimiter matches only a line equal to it, ignoring case.
    An empty or missing delimiter selects `DEFAULT_BOUNDARY_PATTERN`.
    """

    if not custom_delimiter:
        return DEFAULT_BOUNDARY_PATTERN
    return re.compile(rf"^{re.escape(custom_delimiter)}$", re.IGNORECASE)
