"""
Blocs advertorial — exports publics + Block discriminé par `type`.

Une page = liste ordonnée de blocs. Forme wire : dict JSON camelCase avec
`type` (discriminant) et `id` (unique dans la page).
"""
import logging
from typing import Annotated, Any, List, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError

from .base import BaseBlock, BlockModel
from .content import (
    HeadlineBlock, TextBlock, ImageBlock, CtaBlock,
    DividerBlock, NoteBlock, DisclaimerBlock, UrgencyBannerBlock,
)
from .proof import (
    SocialProofBlock, StatsBlock, StatItem, TestimonialsBlock, TestimonialItem,
    AsSeenInBlock, AuthorBylineBlock, CommentsBlock, CommentItem,
)
from .sections import (
    NumberedSectionBlock, ComparisonBlock, ComparisonRow, ProsConsBlock,
    TimelineBlock, TimelineStep, FAQBlock, FAQItem, FeatureListBlock,
)
from .offer import GuaranteeBlock, GuaranteeBadge, OfferBoxBlock, PricingTiersBlock, PricingTier

log = logging.getLogger(__name__)

# Union discriminée par type, ordre = palette "Add Block"
Block = Annotated[
    Union[
        HeadlineBlock,
        TextBlock,
        ImageBlock,
        CtaBlock,
        SocialProofBlock,
        StatsBlock,
        TestimonialsBlock,
        NumberedSectionBlock,
        ComparisonBlock,
        ProsConsBlock,
        TimelineBlock,
        GuaranteeBlock,
        DividerBlock,
        NoteBlock,
        FAQBlock,
        AsSeenInBlock,
        AuthorBylineBlock,
        FeatureListBlock,
        OfferBoxBlock,
        CommentsBlock,
        DisclaimerBlock,
        UrgencyBannerBlock,
        PricingTiersBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_TYPES: dict = {
    "headline":        HeadlineBlock,
    "text":            TextBlock,
    "image":           ImageBlock,
    "cta":             CtaBlock,
    "socialProof":     SocialProofBlock,
    "stats":           StatsBlock,
    "testimonials":    TestimonialsBlock,
    "numberedSection": NumberedSectionBlock,
    "comparison":      ComparisonBlock,
    "prosCons":        ProsConsBlock,
    "timeline":        TimelineBlock,
    "guarantee":       GuaranteeBlock,
    "divider":         DividerBlock,
    "note":            NoteBlock,
    "faq":             FAQBlock,
    "asSeenIn":        AsSeenInBlock,
    "authorByline":    AuthorBylineBlock,
    "featureList":     FeatureListBlock,
    "offerBox":        OfferBoxBlock,
    "comments":        CommentsBlock,
    "disclaimer":      DisclaimerBlock,
    "urgencyBanner":   UrgencyBannerBlock,
    "pricingTiers":    PricingTiersBlock,
}

_BLOCK_ADAPTER  = TypeAdapter(Block)
_BLOCKS_ADAPTER = TypeAdapter(List[Block])


# ── Parse / dump ─────────────────────────────────────────────────────────────

def parse_block(data: dict) -> BaseBlock:
    """dict wire → bloc typé. Lève ValidationError (type inconnu ou champ invalide)."""
    return _BLOCK_ADAPTER.validate_python(data)


def parse_blocks(data: list) -> List[BaseBlock]:
    return _BLOCKS_ADAPTER.validate_python(data)


def dump_block(block: BaseBlock) -> dict:
    return block.model_dump(by_alias=True, exclude_none=True)


def dump_blocks(blocks: List[BaseBlock]) -> List[dict]:
    return [dump_block(b) for b in blocks]


def coerce_block(data: Any) -> Optional[BaseBlock]:
    """
    Validation tolérante pour le rendu : un bloc typé, ou None si irrécupérable.

    - déjà un bloc                  → renvoyé tel quel
    - type absent / inconnu         → None (warning)
    - champ de premier niveau faux  → champ retiré, seconde tentative (valeur par défaut)
    """
    if isinstance(data, BaseBlock):
        return data
    if not isinstance(data, dict):
        log.warning("Bloc ignoré : dict attendu, reçu %s", type(data).__name__)
        return None

    block_type = data.get("type")
    block_cls  = BLOCK_TYPES.get(block_type) if isinstance(block_type, str) else None
    if block_cls is None:
        log.warning("Bloc ignoré : type inconnu %r", data.get("type"))
        return None

    # id absent : chaîne vide, le rendu ne consomme pas le compteur d'ids
    data = {"id": "", **data}
    try:
        return block_cls.model_validate(data)
    except ValidationError as e:
        bad_keys = {err["loc"][0] for err in e.errors() if err.get("loc")}
        bad_keys -= {"type"}
        # loc en camelCase : retirer aussi la forme snake_case (et inversement)
        for name, field in block_cls.model_fields.items():
            if name in bad_keys or field.alias in bad_keys:
                bad_keys |= {name, field.alias}
        log.warning("Bloc %s (%s) : champs invalides retirés %s", data.get("id"), data["type"], sorted(map(str, bad_keys)))

    cleaned = {k: v for k, v in data.items() if k not in bad_keys}
    cleaned.setdefault("id", "")
    try:
        return block_cls.model_validate(cleaned)
    except ValidationError as e:
        log.warning("Bloc %s (%s) irrécupérable : %s", data.get("id"), data["type"], e.error_count())
        return None


__all__ = [
    # Base
    "BaseBlock", "BlockModel",
    # Contenu
    "HeadlineBlock", "TextBlock", "ImageBlock", "CtaBlock",
    "DividerBlock", "NoteBlock", "DisclaimerBlock", "UrgencyBannerBlock",
    # Preuve
    "SocialProofBlock", "StatsBlock", "StatItem", "TestimonialsBlock", "TestimonialItem",
    "AsSeenInBlock", "AuthorBylineBlock", "CommentsBlock", "CommentItem",
    # Sections
    "NumberedSectionBlock", "ComparisonBlock", "ComparisonRow", "ProsConsBlock",
    "TimelineBlock", "TimelineStep", "FAQBlock", "FAQItem", "FeatureListBlock",
    # Offre
    "GuaranteeBlock", "GuaranteeBadge", "OfferBoxBlock", "PricingTiersBlock", "PricingTier",
    # Union + helpers
    "Block", "BLOCK_TYPES",
    "parse_block", "parse_blocks", "dump_block", "dump_blocks", "coerce_block",
]
