"""Configuration model and loaders for txtepub.

Responsibilities:
- Define conversion settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ConverterConfig`: normalized settings for one conversion.
- `ConfigLoader`: static construction helpers for `ConverterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_non_negative_int
from .text.segmenter import DEFAULT_CHAPTER_TITLE

DEFAULT_LANGUAGE = "en"
IDENTIFIER_MODES = frozenset({"random", "content"})


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Settings for one text-to-EPUB conversion.

    Attributes:
        min_word_count: Words required since the previous split before a
            boundary line may open a new chapter. Zero always splits.
        custom_delimiter: Literal boundary line (case-insensitive); empty
            selects the built-in `Chapter/Episode/Part <number>` pattern.
        language: Language tag written to the package manifest.
        default_chapter_title: Title of the leading unlabeled segment.
        identifier_mode: `random` for a fresh identifier per conversion,
            `content` for one derived from the chapter sequence.
    """

    min_word_count: int = 0
    custom_delimiter: str = ""
    language: str = DEFAULT_LANGUAGE
    default_chapter_title: str = DEFAULT_CHAPTER_TITLE
    identifier_mode: str = "random"

    def validate(self) -> None:
        """Validate configuration values before conversion."""

        if isinstance(self.min_word_count, bool) or not isinstance(self.min_word_count, int):
            raise ValueError("`min_word_count` must be a non-negative integer.")
        if self.min_word_count < 0:
            raise ValueError("`min_word_count` must be a non-negative integer.")
        if not isinstance(self.custom_delimiter, str):
            raise ValueError("`custom_delimiter` must be a string.")
        self._require_non_empty(self.language, "language")
        self._require_non_empty(self.default_chapter_title, "default_chapter_title")
        if self.identifier_mode not in IDENTIFIER_MODES:
            supported = ", ".join(sorted(IDENTIFIER_MODES))
            raise ValueError(
                f"Unsupported `identifier_mode` value `{self.identifier_mode}`; "
                f"supported: {supported}."
            )

    @staticmethod
    def _require_non_empty(value: str, field_name: str) -> None:
        """Validate that string fields are not empty."""

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for creating `ConverterConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "min_word_count",
            "custom_delimiter",
            "language",
            "default_chapter_title",
            "identifier_mode",
        }
    )

    @staticmethod
    def from_yaml(path: Path, base: ConverterConfig | None = None) -> ConverterConfig:
        """Create a validated config from a YAML file.

        Keys the file does not set keep their value from `base` (built-in
        defaults when omitted), so environment values can sit underneath.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", base=base
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ConverterConfig:
        """Create a validated config from `TXTEPUB_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        raw_min_words = normalize_optional_string(env_map.get("TXTEPUB_MIN_WORD_COUNT"))
        min_word_count = (
            0
            if raw_min_words is None
            else parse_non_negative_int(raw_min_words, "TXTEPUB_MIN_WORD_COUNT")
        )
        config = ConverterConfig(
            min_word_count=min_word_count,
            custom_delimiter=normalize_optional_string(env_map.get("TXTEPUB_DELIMITER")) or "",
            language=(
                normalize_optional_string(env_map.get("TXTEPUB_LANGUAGE")) or DEFAULT_LANGUAGE
            ),
            default_chapter_title=(
                normalize_optional_string(env_map.get("TXTEPUB_DEFAULT_CHAPTER_TITLE"))
                or DEFAULT_CHAPTER_TITLE
            ),
            identifier_mode=(
                normalize_optional_string(env_map.get("TXTEPUB_IDENTIFIER_MODE")) or "random"
            ).lower(),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: ConverterConfig | None = None,
    ) -> ConverterConfig:
        """Build a validated config from a payload layered over `base` values.

        Keys absent from the payload keep the corresponding `base` value.
        """

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = base if base is not None else ConverterConfig()

        min_word_count = defaults.min_word_count
        if payload.get("min_word_count") is not None:
            min_word_count = parse_non_negative_int(payload["min_word_count"], "min_word_count")

        custom_delimiter = defaults.custom_delimiter
        if "custom_delimiter" in payload:
            custom_delimiter = ConfigLoader._optional_string(payload, "custom_delimiter") or ""

        config = ConverterConfig(
            min_word_count=min_word_count,
            custom_delimiter=custom_delimiter,
            language=ConfigLoader._optional_string(payload, "language") or defaults.language,
            default_chapter_title=(
                ConfigLoader._optional_string(payload, "default_chapter_title")
                or defaults.default_chapter_title
            ),
            identifier_mode=(
                ConfigLoader._optional_string(payload, "identifier_mode")
                or defaults.identifier_mode
            ).lower(),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])
