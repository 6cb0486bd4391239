"""Briques transverses : identifiants de blocs + résolution des textes."""
from .ids import BlockIdGenerator, next_id, to_base36
from .copy import IfDescription, escape_html, handleize, resolve, resolve_placeholders, lookup

__all__ = [
    "BlockIdGenerator", "next_id", "to_base36",
    "IfDescription", "escape_html", "handleize", "resolve", "resolve_placeholders", "lookup",
]
