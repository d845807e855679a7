"""Installed version of gitremotes, read from the distribution metadata."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

_DISTRIBUTION = "gitremotes"


@lru_cache(maxsize=1)
def get_version() -> str:
    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
