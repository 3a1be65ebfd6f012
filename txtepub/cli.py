"""Command-line interface for txtepub.

Responsibilities:
- Expose user-facing commands for text-to-EPUB conversion.
- Convert CLI arguments into `ConverterConfig` and run the converter.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_chapter_list, exit_with_command_error
from .config import ConfigLoader, ConverterConfig
from .errors import PipelineStageError
from .io.source_reader import derive_title, read_source_text
from .parsing import normalize_optional_string
from .pipeline import TextToEpubConverter
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="txtepub",
    no_args_is_help=True,
    help="Convert plain-text books into EPUB containers.",
)


def _load_yaml_config(
    config_path: Path | None, base: ConverterConfig | None = None
) -> ConverterConfig | None:
    """Load a YAML config file over `base` when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path, base=base)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _load_env_config() -> ConverterConfig:
    """Load `TXTEPUB_*` environment defaults and map failures to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the offending `TXTEPUB_*` variable.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    min_words: int | None,
    delimiter: str | None,
    language: str | None = None,
    identifier_mode: str | None = None,
) -> ConverterConfig:
    """Resolve effective config: environment, then YAML keys, then CLI overrides."""

    env_config = _load_env_config()
    loaded_config = _load_yaml_config(config_file, base=env_config)
    base_config = loaded_config if loaded_config is not None else env_config

    if delimiter is not None:
        resolved_delimiter = normalize_optional_string(delimiter) or ""
    else:
        resolved_delimiter = base_config.custom_delimiter
    config = ConverterConfig(
        min_word_count=min_words if min_words is not None else base_config.min_word_count,
        custom_delimiter=resolved_delimiter,
        language=normalize_optional_string(language) or base_config.language,
        default_chapter_title=base_config.default_chapter_title,
        identifier_mode=(
            normalize_optional_string(identifier_mode) or base_config.identifier_mode
        ).lower(),
    )
    try:
        config.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Use `txtepub convert --help` for accepted option values.",
        ) from exc
    return config


MinWordsOption = Annotated[
    int | None,
    typer.Option(
        "--min-words",
        min=0,
        help="Words required since the previous split before a heading opens a chapter.",
    ),
]
DelimiterOption = Annotated[
    str | None,
    typer.Option(
        "--delimiter",
        help="Literal chapter heading line (case-insensitive). Default: Chapter/Episode/Part N.",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with conversion defaults."),
]


@app.command("convert")
def convert_command(
    input_txt: Annotated[Path, typer.Argument(help="Path to source plain-text file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output EPUB path (default: input name with `.epub`)."),
    ] = None,
    min_words: MinWordsOption = None,
    delimiter: DelimiterOption = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Book title (default: input file name without `.txt`)."),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", help="Language tag written to the package manifest."),
    ] = None,
    identifier_mode: Annotated[
        str | None,
        typer.Option(
            "--identifier-mode",
            help="`random` for a fresh identifier per run, `content` to derive it from chapters.",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Convert a plain-text file into an EPUB archive."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            min_words=min_words,
            delimiter=delimiter,
            language=language,
            identifier_mode=identifier_mode,
        )
        source_text = read_source_text(input_txt)
        resolved_title = normalize_optional_string(title) or derive_title(input_txt)
        output_path = out if out is not None else input_txt.with_suffix(".epub")

        converter = TextToEpubConverter(config, run_logger=RunLogger())
        package = converter.build_package(source_text, resolved_title)
        payload = converter.archive(package)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)
    except Exception as exc:
        exit_with_command_error("convert", exc)

    typer.echo(f"EPUB: {output_path}")
    typer.echo(f"Title: {package.meta.title}")
    typer.echo(f"Chapters: {len(package.chapters)}")
    typer.echo(f"Identifier: urn:uuid:{package.meta.identifier}")


@app.command("chapters")
def chapters_command(
    input_txt: Annotated[Path, typer.Argument(help="Path to source plain-text file.")],
    min_words: MinWordsOption = None,
    delimiter: DelimiterOption = None,
    word_counts: Annotated[
        bool,
        typer.Option("--word-counts", help="Show the word count of each chapter."),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """List detected chapter titles without writing an EPUB."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            min_words=min_words,
            delimiter=delimiter,
        )
        chapters = TextToEpubConverter(config).split_chapters(read_source_text(input_txt))
    except Exception as exc:
        exit_with_command_error("chapters", exc)

    echo_chapter_list(chapters, show_word_counts=word_counts)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
