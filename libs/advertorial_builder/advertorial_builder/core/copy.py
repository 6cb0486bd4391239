"""
Résolution des textes de templates (copy) pour les générateurs déterministes.

"@benefits.0.headline"  → valeur brute de la table de copy (str, list, dict…)
"Try {product} Now"     → placeholders résolus via le contexte
"{@hook}<br><br>…"      → référence de copy insérée dans une chaîne
IfDescription(a, b)     → a si une description produit est fournie, sinon b
Placeholders sans correspondance → laissés intacts.
"""
import re
from typing import Any, NamedTuple, Optional

_PLACEHOLDER      = re.compile(r"\{(@?[\w.]+)\}")
_ONLY_PLACEHOLDER = re.compile(r"\{(\w+)\}")

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

# Marqueur : le champ est retiré du bloc (placeholder seul sans valeur)
OMIT = object()


class IfDescription(NamedTuple):
    then: Any
    otherwise: Any = ""


def escape_html(text: Optional[str]) -> str:
    """Échappe les 5 métacaractères HTML (une seule passe, pas de double échappement)."""
    return (text or "").translate(_HTML_ESCAPES)


def lookup(path: str, table: dict) -> Any:
    """
    Navigation dans la table de copy : "benefits.0.headline"
    → table["benefits"][0]["headline"]. Clé absente → "[missing:path]".
    """
    node: Any = table
    for part in path.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        elif isinstance(node, (list, tuple)) and part.isdigit() and int(part) < len(node):
            node = node[int(part)]
        else:
            return f"[missing:{path}]"
    return node


def resolve_placeholders(text: str, context: Optional[dict] = None, table: Optional[dict] = None) -> str:
    """Remplace {key} par context[key] et {@path} par le texte de copy correspondant."""
    if not text or (not context and table is None):
        return text
    context = context or {}

    def replacer(match):
        key = match.group(1)
        if key.startswith("@"):
            if table is None:
                return match.group(0)
            value = lookup(key[1:], table)
            if not isinstance(value, str):
                return f"[missing:{key[1:]}]"
            return resolve_placeholders(value, context, table)
        value = context.get(key)
        return match.group(0) if value is None else str(value)

    return _PLACEHOLDER.sub(replacer, text)


def resolve(value: Any, table: Optional[dict] = None, context: Optional[dict] = None) -> Any:
    """Parcourt récursivement un slot (dict/list/str) et résout refs + placeholders."""
    context = context or {}

    if isinstance(value, IfDescription):
        chosen = value.then if context.get("description") else value.otherwise
        return resolve(chosen, table, context)

    if isinstance(value, str):
        if value.startswith("@") and table is not None:
            return resolve(lookup(value[1:], table), table, context)
        only = _ONLY_PLACEHOLDER.fullmatch(value)
        if only and only.group(1) in context and context[only.group(1)] is None:
            return OMIT
        return resolve_placeholders(value, context, table)

    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            resolved = resolve(item, table, context)
            if resolved is not OMIT:
                out[key] = resolved
        return out

    if isinstance(value, (list, tuple)):
        items = (resolve(item, table, context) for item in value)
        return [item for item in items if item is not OMIT]

    return value


_NON_HANDLE = re.compile(r"[^a-z0-9]+")


def handleize(text: str, max_length: int = 50) -> str:
    """Handle de page / produit : "Glow Serum (30 ml)" → "glow-serum-30-ml"."""
    return _NON_HANDLE.sub("-", (text or "").lower()).strip("-")[:max_length].rstrip("-")
