"""
Repository discovery package.

Locates ``.git/config`` files beneath a search root and assembles the
resulting tree of remotes.
"""
from .config_parser import parse_git_config, parse_remote_lines, try_extract_remotes
from .models import ResultNode
from .tree_builder import build_tree

__all__ = [
    "ResultNode",
    "build_tree",
    "parse_git_config",
    "parse_remote_lines",
    "try_extract_remotes",
]
