"""
Result tree produced by a repository scan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ..paths import display_path


@dataclass
class ResultNode:
    """
    A directory with a ``.git/config`` file and/or repositories beneath it.

    The root node keeps the search path as given; every other node stores its
    path relative to its immediate parent node.
    """

    path: Path
    remotes: Dict[str, str] = field(default_factory=dict)
    children: List["ResultNode"] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.remotes and not self.children

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable form; empty ``remotes``/``children`` are omitted."""
        payload: Dict[str, Any] = {"path": display_path(self.path)}
        if self.remotes:
            payload["remotes"] = dict(self.remotes)
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload
