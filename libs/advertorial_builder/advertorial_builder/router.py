"""
Router FastAPI — endpoints advertorial_builder.

POST /advertorial/render                 → blocs + options → HTMLResponse (page complète)
POST /advertorial/render-one             → un bloc → fragment HTML (aperçu live)
POST /advertorial/generate               → archétype + angle + produit → {title, blocks}
POST /advertorial/generate-ai            → produit + preset → {blocks} (Claude)
POST /advertorial/validate               → {"valid": bool, "errors": [...]}
GET  /advertorial/catalog                → palette des blocs + JSON schemas
GET  /advertorial/catalog/{type}/default → bloc vide du type demandé
GET  /advertorial/archetypes             → archétypes, angles, presets de style
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .ai import ProductInfo, generate_via_model
from .archetypes import ANGLES
from .blocks import BLOCK_TYPES, dump_block, dump_blocks, parse_block
from .errors import ConfigurationError, MalformedResponse, ModelCallError
from .factory import BLOCK_CATALOG, create_default
from .generator import DEFAULT_ARCHETYPE, generate_page, list_archetypes
from .prompts import structure_from_archetype
from .renderer import RenderOptions, render as render_blocks, render_one as render_block
from .style_presets import DEFAULT_PRESET, list_presets

log = logging.getLogger(__name__)

router = APIRouter(prefix="/advertorial", tags=["advertorial"])


# ── Schémas de requête ───────────────────────────────────────────────────────

class RenderRequest(BaseModel):
    blocks: List[Any] = []
    options: RenderOptions = Field(default_factory=RenderOptions)


class RenderOneRequest(BaseModel):
    block: Any
    options: RenderOptions = Field(default_factory=RenderOptions)


class GenerateRequest(BaseModel):
    product_title: str
    product_description: str = ""
    product_image: Optional[str] = None
    archetype: str = DEFAULT_ARCHETYPE
    angle: Optional[str] = None


class GenerateAIRequest(BaseModel):
    product: ProductInfo
    style_preset: str = DEFAULT_PRESET
    # Structure imposée par un archétype (sinon structure DR en 17 sections)
    archetype: Optional[str] = None
    angle: Optional[str] = None


class ValidateRequest(BaseModel):
    blocks: List[Any] = []


# ── Rendu ────────────────────────────────────────────────────────────────────

@router.post("/render", response_class=HTMLResponse, summary="Rend une liste de blocs en HTML")
def render(req: RenderRequest) -> HTMLResponse:
    """Blocs inconnus ou irrécupérables ignorés, jamais d'erreur."""
    return HTMLResponse(content=render_blocks(req.blocks, req.options))


@router.post("/render-one", response_class=HTMLResponse, summary="Rend un seul bloc (aperçu)")
def render_one(req: RenderOneRequest) -> HTMLResponse:
    return HTMLResponse(content=render_block(req.block, req.options))


# ── Génération ───────────────────────────────────────────────────────────────

@router.post("/generate", summary="Génère une page depuis un archétype")
def generate(req: GenerateRequest) -> dict:
    try:
        page = generate_page(
            req.product_title, req.product_description, req.archetype, req.angle,
            product_image=req.product_image,
        )
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"title": page.title, "blocks": dump_blocks(page.blocks)}


@router.post("/generate-ai", summary="Génère une page via Claude")
def generate_ai(req: GenerateAIRequest) -> dict:
    """
    Appel synchrone : FastAPI l'exécute dans son threadpool.
    Config absente → 503, échec modèle ou réponse inexploitable → 502.
    """
    try:
        structure = structure_from_archetype(req.archetype, req.angle) if req.archetype else None
        blocks = generate_via_model(req.product, req.style_preset, structure)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except ConfigurationError as e:
        raise HTTPException(503, str(e))
    except ModelCallError as e:
        log.error("generate-ai [%s] : %s", req.product.title, e)
        raise HTTPException(502, str(e))
    except MalformedResponse as e:
        log.error("generate-ai [%s] : %s", req.product.title, e)
        # Extrait brut (500 car. max) pour diagnostic côté client
        raise HTTPException(502, {"error": str(e), "raw": e.raw})
    return {"blocks": blocks}


# ── Validation ───────────────────────────────────────────────────────────────

@router.post("/validate", summary="Valide une liste de blocs sans la rendre")
def validate(req: ValidateRequest) -> dict:
    """Validation stricte bloc par bloc, ids uniques dans la page."""
    errors = []
    seen = set()
    for index, data in enumerate(req.blocks):
        try:
            block = parse_block(data)
        except ValidationError as e:
            errors.append({"index": index, "error": str(e)})
            continue
        if block.id in seen:
            errors.append({"index": index, "error": f"id dupliqué : {block.id}"})
        seen.add(block.id)
    return {"valid": not errors, "errors": errors}


# ── Catalogue ────────────────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    catalog_data = [
        {**entry.model_dump(), "schema": BLOCK_TYPES[entry.type].model_json_schema(by_alias=True)}
        for entry in BLOCK_CATALOG
    ]
    return JSONResponse({"blocks": catalog_data})


@router.get("/catalog/{block_type}/default", summary="Bloc vide d'un type donné")
def catalog_default(block_type: str) -> dict:
    try:
        return dump_block(create_default(block_type))
    except ValueError as e:
        raise HTTPException(404, str(e))


@router.get("/archetypes", summary="Archétypes, angles et presets disponibles")
def archetypes() -> dict:
    return {
        "archetypes": list_archetypes(),
        "angles":     list(ANGLES),
        "presets":    list_presets(),
    }
