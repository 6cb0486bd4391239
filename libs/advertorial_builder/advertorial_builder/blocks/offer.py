"""Blocs d'offre : garantie, encart offre, grille de prix."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockModel


class GuaranteeBadge(BlockModel):
    icon: str = ""
    label: str = ""


class GuaranteeBlock(BaseBlock):
    """Barre de garantie — badges si fournis, sinon texte + bouclier."""
    type: Literal["guarantee"] = "guarantee"
    text: str = ""
    badges: Optional[List[GuaranteeBadge]] = None


class OfferBoxBlock(BaseBlock):
    type: Literal["offerBox"] = "offerBox"
    headline: str = ""
    subtext: str = ""
    button_text: str = ""
    discount: Optional[str] = None
    guarantee: Optional[str] = None
    urgency: Optional[str] = None
    layout: Optional[Literal["stacked", "horizontal"]] = None


class PricingTier(BlockModel):
    name: str = ""
    original_price: str = ""
    sale_price: str = ""
    per_unit: Optional[str] = None
    tag: Optional[str] = None
    features: List[str] = []
    highlight: Optional[bool] = None


class PricingTiersBlock(BaseBlock):
    """Grille 3 offres (unité / bundle / meilleure valeur)."""
    type: Literal["pricingTiers"] = "pricingTiers"
    heading: Optional[str] = None
    product_handle: str = ""
    tiers: List[PricingTier] = []
    cta_text: Optional[str] = None
    guarantee: Optional[str] = None
