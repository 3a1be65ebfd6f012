"""Chapters command tests for chapter listing output."""

from pathlib import Path

from typer.testing import CliRunner

from txtepub.cli import app


def test_chapters_command_lists_detected_titles(sample_book_fixture_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["chapters", str(sample_book_fixture_path), "--min-words", "10"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "1. Introduction",
        "2. Chapter 1 The Storm",
        "3. Chapter 2 The Letter",
    ]


def test_chapters_command_shows_word_counts(tmp_path: Path, example_text: str) -> None:
    runner = CliRunner()
    source = tmp_path / "book.txt"
    source.write_text(example_text, encoding="utf-8")

    result = runner.invoke(
        app, ["chapters", str(source), "--min-words", "2", "--word-counts"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "1. Introduction (2 words)",
        "2. Chapter 1 (10 words)",
        "3. Chapter 2 (1 word)",
    ]


def test_chapters_command_reports_no_chapters(tmp_path: Path) -> None:
    runner = CliRunner()
    source = tmp_path / "empty.txt"
    source.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["chapters", str(source)])

    assert result.exit_code == 1
    assert "chapters failed at stage `segment`: No chapters detected." in result.output
