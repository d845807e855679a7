"""Output formats understood by the renderers."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """The output format to use."""

    PLAIN = "plain"
    YAML = "yaml"
    JSON = "json"
