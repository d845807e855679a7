"""
Directory walk that assembles the ``ResultNode`` tree.

The walk is a depth-first recursion over ``os.scandir`` in enumeration order.
Subtrees that carry neither remotes nor children are pruned; the root node is
always returned.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, List, Optional

from ..errors import TraversalError
from ..logger import get_logger
from .config_parser import try_extract_remotes
from .models import ResultNode

log = get_logger(__name__)


def build_tree(
    root_directory: Path,
    recursive: bool,
    follow_symlinks: bool = False,
) -> ResultNode:
    """
    Build the result tree rooted at ``root_directory``.

    Parameters
    ----------
    root_directory:
        Existing directory to scan. Its path is stored on the root node as given.
    recursive:
        When True every subdirectory is searched; otherwise only the direct
        subdirectories of the root are inspected.
    follow_symlinks:
        Descend into symlinked directories. Cycles are broken by skipping a
        directory already present on the current descent path.
    """
    root_directory = Path(root_directory)
    ancestors: FrozenSet[Path] = frozenset()
    if follow_symlinks:
        ancestors = frozenset({root_directory.resolve()})
    return _build_node(root_directory, recursive, follow_symlinks, ancestors)


def _build_node(
    directory: Path,
    recursive: bool,
    follow_symlinks: bool,
    ancestors: FrozenSet[Path],
) -> ResultNode:
    remotes = try_extract_remotes(directory)
    children: List[ResultNode] = []

    for subdirectory in _iter_subdirectories(directory, follow_symlinks):
        relative = _relative_to(subdirectory, directory)
        if recursive:
            resolved = _descent_key(subdirectory, follow_symlinks)
            if resolved is not None and resolved in ancestors:
                log.debug("symlink_cycle_skipped", path=str(subdirectory))
                continue
            subtree = _build_node(
                subdirectory,
                True,
                follow_symlinks,
                ancestors | {resolved} if resolved is not None else ancestors,
            )
            if subtree.is_empty():
                log.debug("directory_pruned", path=str(subdirectory))
                continue
            children.append(
                ResultNode(path=relative, remotes=subtree.remotes, children=subtree.children)
            )
        else:
            child_remotes = try_extract_remotes(subdirectory)
            if child_remotes is not None:
                children.append(ResultNode(path=relative, remotes=child_remotes))

    return ResultNode(path=directory, remotes=remotes or {}, children=children)


def _iter_subdirectories(directory: Path, follow_symlinks: bool) -> List[Path]:
    """List direct subdirectories in enumeration order."""
    subdirectories: List[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_symlink() and not follow_symlinks:
                    if entry.is_dir():
                        log.debug("symlink_skipped", path=entry.path)
                    continue
                if entry.is_dir():
                    subdirectories.append(directory / entry.name)
    except OSError as exc:
        raise TraversalError(directory, f"Failed to read directory ({exc.strerror or exc})") from exc
    return subdirectories


def _relative_to(child: Path, parent: Path) -> Path:
    try:
        return child.relative_to(parent)
    except ValueError as exc:
        raise TraversalError(child, f"Cannot express path relative to {parent}") from exc


def _descent_key(directory: Path, follow_symlinks: bool) -> Optional[Path]:
    if not follow_symlinks:
        return None
    try:
        return directory.resolve()
    except OSError as exc:
        raise TraversalError(directory, "Failed to resolve directory") from exc
