"""Rendu HTML des pages advertorial."""
from .css import PAGE_SCRIPT, PAGE_STYLE, escape_attr, hex_to_rgba
from .html import RenderOptions, render, render_one

__all__ = [
    "RenderOptions", "render", "render_one",
    "PAGE_STYLE", "PAGE_SCRIPT", "escape_attr", "hex_to_rgba",
]
