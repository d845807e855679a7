"""
Exception hierarchy shared by the discovery, rendering and CLI layers.

Every failure aborts the scan; callers catch ``GitRemotesError`` at the
outermost layer and turn it into an exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .paths import display_path


class GitRemotesError(Exception):
    """Base class for all errors raised by gitremotes."""


class InvalidRootError(GitRemotesError):
    """The search root does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"The specified path {reason}: {display_path(path)}")


class ConfigReadError(GitRemotesError):
    """A ``.git/config`` file exists but could not be opened or decoded."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None) -> None:
        self.path = path
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Error parsing {display_path(path)}{detail}")


class TraversalError(GitRemotesError):
    """A directory could not be enumerated or a child path relativized."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {display_path(path)}")


class RenderError(GitRemotesError):
    """The selected output serializer could not encode the result tree."""


__all__ = [
    "GitRemotesError",
    "InvalidRootError",
    "ConfigReadError",
    "TraversalError",
    "RenderError",
]
