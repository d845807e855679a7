"""
Renderers turning a ``ResultNode`` tree into text.
"""

from __future__ import annotations

import json
from typing import List

import yaml

from ..errors import RenderError
from ..discovery.models import ResultNode
from ..paths import display_path
from .formats import OutputFormat

_INDENT = "  "


def render_plain(node: ResultNode) -> str:
    """Indented, human-readable tree."""
    lines: List[str] = []
    _append_plain(node, 0, lines)
    return "\n".join(lines)


def _append_plain(node: ResultNode, indent: int, lines: List[str]) -> None:
    lines.append(f"{_INDENT * indent}path: {display_path(node.path)}")
    if node.remotes:
        lines.append(f"{_INDENT * (indent + 1)}remotes:")
        for name, url in node.remotes.items():
            lines.append(f"{_INDENT * (indent + 1)}{_INDENT}{name}: {url}")
    if node.children:
        lines.append(f"{_INDENT * indent}children:")
        for child in node.children:
            _append_plain(child, indent + 1, lines)


def render_yaml(node: ResultNode) -> str:
    try:
        return yaml.safe_dump(
            node.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise RenderError(f"Failed to serialize result as YAML: {exc}") from exc


def render_json(node: ResultNode, indent: int = 2) -> str:
    try:
        return json.dumps(node.to_dict(), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Failed to serialize result as JSON: {exc}") from exc


def render(node: ResultNode, output_format: OutputFormat, json_indent: int = 2) -> str:
    """Render ``node`` in the requested format."""
    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.PLAIN:
        return render_plain(node)
    if output_format is OutputFormat.YAML:
        return render_yaml(node)
    return render_json(node, indent=json_indent)
