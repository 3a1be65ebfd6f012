"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and chapter listing rows.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import Chapter
from .text.segmenter import count_words


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_chapter_list(chapters: list[Chapter], show_word_counts: bool = False) -> None:
    """Print compact 1-based chapter index/title rows."""

    for index, chapter in enumerate(chapters, start=1):
        if show_word_counts:
            words = count_words(chapter.content)
            unit = "word" if words == 1 else "words"
            typer.echo(f"{index}. {chapter.title} ({words} {unit})")
        else:
            typer.echo(f"{index}. {chapter.title}")
