"""
Repository scan workflow orchestration.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..discovery import ResultNode, build_tree
from ..errors import InvalidRootError
from ..logger import get_logger
from ..rendering import OutputFormat, render
from ..settings import AppSettings, settings as default_settings

log = get_logger(__name__)


@dataclass
class ScanRequest:
    root: Path
    recursive: bool = False
    follow_symlinks: bool = False


@dataclass
class ScanResult:
    tree: ResultNode
    repositories: int
    elapsed_seconds: float


def count_repositories(node: ResultNode) -> int:
    """Number of nodes in the tree that declare at least one remote."""
    own = 1 if node.remotes else 0
    return own + sum(count_repositories(child) for child in node.children)


def validate_root(root: Path) -> Path:
    """Ensure the search root exists and is a directory."""
    try:
        exists = root.exists()
        is_dir = exists and root.is_dir()
    except OSError as exc:
        raise InvalidRootError(root, f"is not a directory or cannot be accessed ({exc.strerror or exc})") from exc
    if not exists:
        raise InvalidRootError(root, "does not exist and is not a directory")
    if not is_dir:
        raise InvalidRootError(root, "is not a directory")
    return root


class ScannerService:
    """Validates the search root, builds the tree and renders it."""

    def __init__(self, app_settings: Optional[AppSettings] = None) -> None:
        self.settings = app_settings or default_settings

    def scan(self, request: ScanRequest) -> ScanResult:
        root = validate_root(request.root)
        log.info(
            "scan_started",
            root=str(root),
            recursive=request.recursive,
            follow_symlinks=request.follow_symlinks,
        )
        started = time.perf_counter()
        tree = build_tree(root, request.recursive, follow_symlinks=request.follow_symlinks)
        elapsed = time.perf_counter() - started
        result = ScanResult(
            tree=tree,
            repositories=count_repositories(tree),
            elapsed_seconds=elapsed,
        )
        log.info(
            "scan_completed",
            root=str(root),
            repositories=result.repositories,
            elapsed=round(elapsed, 3),
        )
        return result

    def render(self, result: ScanResult, output_format: Optional[OutputFormat] = None) -> str:
        fmt = output_format or self.settings.output_format
        return render(result.tree, fmt, json_indent=self.settings.json_indent)
