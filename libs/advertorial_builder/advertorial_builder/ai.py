"""
Génération IA : un appel Claude → tableau JSON de blocs → réparation.

Validation lâche : les dicts réparés sont renvoyés tels quels (forme wire) ;
le rendu ignore ensuite ce qu'il ne sait pas afficher.
"""
import json
import logging
import re
from typing import Callable, List, Optional, Sequence

import anthropic
from pydantic import BaseModel

from . import config
from .core.copy import handleize
from .core.ids import next_id
from .errors import MalformedResponse, ModelCallError
from .prompts import DR_STRUCTURE, build_system_prompt, build_user_message
from .style_presets import DEFAULT_PRESET, get_preset

log = logging.getLogger(__name__)

_FENCE_OPEN  = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")


class ProductInfo(BaseModel):
    """Données produit transmises au modèle (champs vides → ligne omise)."""
    title: str
    handle: str = ""
    description: str = ""
    target_customer: str = ""
    mechanism: str = ""
    proof: str = ""
    image_urls: List[str] = []
    instructions: str = ""


# ── Parsing ──────────────────────────────────────────────────────────────────

def strip_code_fences(text: str) -> str:
    text = (text or "").strip()
    text = _FENCE_OPEN.sub("", text)
    text = _FENCE_CLOSE.sub("", text)
    return text.strip()


def parse_model_response(text: str) -> list:
    """Texte brut du modèle → liste JSON. Sinon MalformedResponse (extrait brut joint)."""
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"JSON invalide renvoyé par le modèle : {e}", raw=text)
    if not isinstance(data, list):
        raise MalformedResponse(f"Tableau JSON attendu, reçu {type(data).__name__}", raw=text)
    return data


def repair_blocks(items: list, ids: Optional[Callable[[], str]] = None) -> List[dict]:
    """
    Normalise un tableau de blocs venant du modèle :
    - éléments non-dict ou sans `type` texte → retirés
    - `id` absent, vide, non texte ou dupliqué → remplacé par un id frais
    Idempotent : repair(repair(x)) == repair(x).
    """
    new_id = ids or next_id
    seen: set = set()
    out: List[dict] = []

    for i, item in enumerate(items):
        if not isinstance(item, dict):
            log.warning("Bloc IA #%d ignoré : objet attendu, reçu %s", i, type(item).__name__)
            continue
        if not isinstance(item.get("type"), str) or not item["type"]:
            log.warning("Bloc IA #%d ignoré : type absent", i)
            continue

        block = dict(item)
        block_id = block.get("id")
        if not isinstance(block_id, str) or not block_id or block_id in seen:
            block["id"] = new_id()
            while block["id"] in seen:
                block["id"] = new_id()
            log.warning("Bloc IA #%d (%s) : id %r remplacé par %s", i, block["type"], block_id, block["id"])
        seen.add(block["id"])
        out.append(block)

    return out


# ── Appel modèle ─────────────────────────────────────────────────────────────

def _first_text(message) -> str:
    for part in getattr(message, "content", None) or []:
        if getattr(part, "type", None) == "text":
            return part.text
    raise MalformedResponse("Le modèle n'a renvoyé aucun contenu texte")


def generate_via_model(
    product: ProductInfo,
    style_preset: str = DEFAULT_PRESET,
    structure: Optional[Sequence[str]] = None,
    *,
    client=None,
    ids: Optional[Callable[[], str]] = None,
) -> List[dict]:
    """
    Génère une page complète via Claude. Un seul appel, pas de retry.

    Lève ConfigurationError (clé absente), ModelCallError (échec d'appel),
    MalformedResponse (pas de texte, JSON invalide, pas un tableau).
    """
    preset = get_preset(style_preset)
    if client is None:
        client = anthropic.Anthropic(api_key=config.anthropic_api_key())

    if not product.handle:
        product = product.model_copy(update={"handle": handleize(product.title)})

    system   = build_system_prompt(preset, structure)
    sections = len(structure) if structure is not None else len(DR_STRUCTURE)
    user_msg = build_user_message(product, style_preset, preset, sections=sections)

    try:
        message = client.messages.create(
            model=config.model_name(),
            max_tokens=config.max_tokens(),
            system=system,
            messages=[{"role": "user", "content": user_msg}],
        )
    except anthropic.APIError as e:
        log.error("Appel Claude échoué (%s) : %s", type(e).__name__, e)
        raise ModelCallError(f"Appel au modèle échoué : {e}") from e

    items  = parse_model_response(_first_text(message))
    blocks = repair_blocks(items, ids=ids)
    log.info("Génération IA : %d blocs reçus, %d conservés (preset %s)", len(items), len(blocks), style_preset)
    return blocks
