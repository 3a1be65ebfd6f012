"""Shared pytest fixtures for the full txtepub test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import sample_book_fixture_path as resolve_sample_book_fixture_path

EXAMPLE_TEXT = (
    "Hello world.\n"
    "Chapter 1\n"
    "This is chapter one with enough words to pass threshold.\n"
    "Chapter 2\n"
    "Short."
)


@pytest.fixture
def sample_book_fixture_path() -> Path:
    """Provide the plain-text book fixture path."""

    return resolve_sample_book_fixture_path()


@pytest.fixture
def example_text() -> str:
    """Provide a short source text with two built-in headings."""

    return EXAMPLE_TEXT


@pytest.fixture(autouse=True)
def _clear_txtepub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep `TXTEPUB_*` variables from the host environment out of tests."""

    for key in (
        "TXTEPUB_MIN_WORD_COUNT",
        "TXTEPUB_DELIMITER",
        "TXTEPUB_LANGUAGE",
        "TXTEPUB_DEFAULT_CHAPTER_TITLE",
        "TXTEPUB_IDENTIFIER_MODE",
    ):
        monkeypatch.delenv(key, raising=False)
