"""
Centralized application settings.

Defaults can be set from ``gitremotes.toml`` (or the file named by
``GITREMOTES_CONFIG_PATH``) and from ``GITREMOTES_*`` environment variables;
command line flags take precedence over both.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore[attr-defined]

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger import resolve_level
from .rendering.formats import OutputFormat


class AppSettings(BaseSettings):
    """Project-wide settings loaded from env or TOML files."""

    model_config = SettingsConfigDict(
        env_prefix="GITREMOTES_",
        extra="ignore",
    )

    tree: bool = False
    follow_symlinks: bool = False
    output_format: OutputFormat = OutputFormat.PLAIN
    json_indent: int = 2
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("json_indent")
    @classmethod
    def _check_indent(cls, value: int) -> int:
        if value < 0:
            raise ValueError("json_indent must not be negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        resolve_level(value)
        return value


_CONFIG_ENV_VAR = "GITREMOTES_CONFIG_PATH"
_DEFAULT_CONFIG_FILE = Path("gitremotes.toml")


def _load_toml_config() -> Dict[str, Any]:
    """Load configuration from the primary TOML file on disk."""
    candidates: List[Path] = []
    config_override = os.getenv(_CONFIG_ENV_VAR)
    if config_override:
        candidates.append(Path(config_override))
    candidates.append(_DEFAULT_CONFIG_FILE)

    for candidate in candidates:
        if candidate.is_file():
            with candidate.open("rb") as handle:
                return tomllib.load(handle)
    return {}


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _flatten_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Translate grouped TOML sections into AppSettings keyword arguments."""
    data: Dict[str, Any] = {}

    search = raw.get("search", {})
    if "tree" in search:
        data["tree"] = bool(search["tree"])
    if "follow_symlinks" in search:
        data["follow_symlinks"] = bool(search["follow_symlinks"])

    output = raw.get("output", {})
    if _blank_to_none(output.get("format")) is not None:
        data["output_format"] = output["format"]
    if "json_indent" in output:
        data["json_indent"] = int(output["json_indent"])

    logging_section = raw.get("logging", {})
    if _blank_to_none(logging_section.get("level")) is not None:
        data["log_level"] = logging_section["level"]
    if "file" in logging_section:
        data["log_file"] = _blank_to_none(logging_section["file"])

    return data


def load_settings() -> AppSettings:
    raw = _load_toml_config()
    flattened = _flatten_config(raw)
    return AppSettings(**flattened)


settings = load_settings()
