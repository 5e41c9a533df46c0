"""Configuration loader for the result normalizer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .rules import SUMMARY_COLUMNS, TARGET_ENCODING


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


def _get_columns(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = _get_env(key)
    if value is None:
        return default
    columns = tuple(part.strip() for part in value.split(",") if part.strip())
    if not columns:
        raise ValueError(f"Environment variable {key} must list at least one column")
    return columns


def _get_encoding(key: str, default: str) -> str:
    value = _get_env(key, default)
    try:
        "".encode(value)
    except LookupError as exc:
        raise ValueError(f"Environment variable {key} names an unknown encoding") from exc
    return value


@dataclass(slots=True)
class Settings:
    translation_table: Optional[Path] = None
    summary_columns: Tuple[str, ...] = SUMMARY_COLUMNS
    output_encoding: str = TARGET_ENCODING
    strict_duplicates: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    translation_table = _get_env("TALLY_TRANSLATION_TABLE")

    return Settings(
        translation_table=Path(translation_table) if translation_table else None,
        summary_columns=_get_columns("TALLY_SUMMARY_COLUMNS", SUMMARY_COLUMNS),
        output_encoding=_get_encoding("TALLY_OUTPUT_ENCODING", TARGET_ENCODING),
        strict_duplicates=_get_bool("TALLY_STRICT_DUPLICATES", False),
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
    )
