"""
Output rendering for discovered repository trees.
"""
from .formats import OutputFormat
from .renderers import render, render_json, render_plain, render_yaml

__all__ = ["OutputFormat", "render", "render_json", "render_plain", "render_yaml"]
