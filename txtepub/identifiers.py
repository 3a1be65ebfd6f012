"""Package identifier generation.

Responsibilities:
- Produce version-4 layout identifiers for the EPUB unique identifier.
- Optionally derive a reproducible identifier from chapter content.
"""

from __future__ import annotations

from collections.abc import Sequence
from hashlib import sha256
import random
import time

from .models.datatypes import Chapter

_ID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def generate_book_id() -> str:
    """Return a 36-character version-4 layout identifier.

    Each hex digit mixes a wall-clock millisecond seed with a random offset.
    Once the clock seed is consumed, a microsecond performance-counter seed
    takes over. The variant digit is forced into `8`-`b`.
    """

    clock_seed = time.time_ns() // 1_000_000
    counter_seed = time.perf_counter_ns() // 1_000
    digits: list[str] = []

    for placeholder in _ID_TEMPLATE:
        if placeholder not in "xy":
            digits.append(placeholder)
            continue
        offset = random.random() * 16
        if clock_seed > 0:
            value = int(clock_seed + offset) % 16
            clock_seed //= 16
        else:
            value = int(counter_seed + offset) % 16
            counter_seed //= 16
        if placeholder == "y":
            value = (value & 0x3) | 0x8
        digits.append(f"{value:x}")

    return "".join(digits)


def content_book_id(chapters: Sequence[Chapter]) -> str:
    """Return a version-4 layout identifier derived from chapter content.

    Identical chapter sequences always map to the same identifier.
    """

    digest = sha256()
    for chapter in chapters:
        for part in (chapter.title, chapter.content):
            encoded = part.encode("utf-8")
            digest.update(len(encoded).to_bytes(8, "big"))
            digest.update(encoded)
    hex_digits = iter(digest.hexdigest())

    digits: list[str] = []
    for placeholder in _ID_TEMPLATE:
        if placeholder == "x":
            digits.append(next(hex_digits))
        elif placeholder == "y":
            digits.append(f"{(int(next(hex_digits), 16) & 0x3) | 0x8:x}")
        else:
            digits.append(placeholder)
    return "".join(digits)
