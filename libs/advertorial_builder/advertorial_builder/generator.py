"""
Générateur déterministe : archétype + angle + produit → liste ordonnée de blocs.

Même entrée (et même `today`) → même sortie, aux ids près. Le titre et la
description sont échappés une seule fois avant interpolation.
"""
import datetime
import logging
from typing import Callable, List, NamedTuple, Optional

from .archetypes import ANGLES, ARCHETYPES
from .blocks import BaseBlock, parse_block
from .core.copy import escape_html, resolve, resolve_placeholders
from .core.ids import next_id
from .factory import format_long_date

log = logging.getLogger(__name__)

DEFAULT_ARCHETYPE = "story"


class GeneratedPage(NamedTuple):
    title: str
    blocks: List[BaseBlock]


def _archetype(archetype: str) -> dict:
    spec = ARCHETYPES.get(archetype)
    if spec is None:
        raise ValueError(f"Archétype inconnu : {archetype!r}. Registry : {list(ARCHETYPES)}")
    return spec


def _angle(spec: dict, angle: Optional[str]) -> str:
    angle = angle or spec["default_angle"]
    if angle not in ANGLES:
        raise ValueError(f"Angle inconnu : {angle!r}. Attendu : {list(ANGLES)}")
    return angle


def build_context(
    product_title: str,
    product_description: str = "",
    product_image: Optional[str] = None,
    today: Optional[datetime.date] = None,
) -> dict:
    """Contexte des placeholders — valeurs déjà échappées."""
    day  = today or datetime.date.today()
    desc = escape_html((product_description or "").strip())
    return {
        "product":           escape_html(product_title),
        "description":       desc,
        "description_lead":  f"{desc} " if desc else "",
        "description_break": f"<br><br>{desc}" if desc else "",
        "description_para":  f"{desc}<br><br>" if desc else "",
        "date":              format_long_date(day),
        "date_numeric":      f"{day.month}/{day.day}/{day.year}",
        "product_image":     escape_html(product_image) if product_image else None,
    }


def generate(
    product_title: str,
    product_description: str = "",
    archetype: str = DEFAULT_ARCHETYPE,
    angle: Optional[str] = None,
    *,
    product_image: Optional[str] = None,
    ids: Optional[Callable[[], str]] = None,
    today: Optional[datetime.date] = None,
) -> List[BaseBlock]:
    """
    Instancie le squelette de l'archétype pour l'angle donné (défaut : angle
    de l'archétype). Archétype ou angle inconnu → ValueError.
    """
    spec    = _archetype(archetype)
    angle   = _angle(spec, angle)
    table   = spec["copy"].get(angle, {})
    context = build_context(product_title, product_description, product_image, today)
    new_id  = ids or next_id

    blocks: List[BaseBlock] = []
    for slot in spec["skeleton"]:
        angles = slot.get("angles")
        if angles is not None and angle not in angles:
            continue
        data = resolve({k: v for k, v in slot.items() if k != "angles"}, table, context)
        data["id"] = new_id()
        blocks.append(parse_block(data))

    log.info("Advertorial généré : %s/%s — %d blocs", archetype, angle, len(blocks))
    return blocks


def generate_title(product_title: str, archetype: str = DEFAULT_ARCHETYPE, angle: Optional[str] = None) -> str:
    """Titre de page — titre produit brut (non échappé), stocké tel quel."""
    spec   = _archetype(archetype)
    angle  = _angle(spec, angle)
    titles = spec.get("titles")
    if not titles:
        return f"{product_title} Advertorial"
    return resolve_placeholders(titles[angle], {"title": product_title})


def generate_page(
    product_title: str,
    product_description: str = "",
    archetype: str = DEFAULT_ARCHETYPE,
    angle: Optional[str] = None,
    *,
    product_image: Optional[str] = None,
    ids: Optional[Callable[[], str]] = None,
    today: Optional[datetime.date] = None,
) -> GeneratedPage:
    return GeneratedPage(
        title=generate_title(product_title, archetype, angle),
        blocks=generate(
            product_title, product_description, archetype, angle,
            product_image=product_image, ids=ids, today=today,
        ),
    )


def list_archetypes() -> List[dict]:
    return [
        {
            "id":            spec["id"],
            "name":          spec["name"],
            "description":   spec["description"],
            "default_angle": spec["default_angle"],
        }
        for spec in ARCHETYPES.values()
    ]
