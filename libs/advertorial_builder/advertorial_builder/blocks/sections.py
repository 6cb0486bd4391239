"""Blocs de structure argumentaire : sections numérotées, comparatifs, listes, FAQ."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockModel


class NumberedSectionBlock(BaseBlock):
    """Section numérotée — l'image éventuelle est rendue avec l'id <id>_img."""
    type: Literal["numberedSection"] = "numberedSection"
    number: str = ""
    label: str = ""
    headline: str = ""
    body: str = ""
    image_label: Optional[str] = None
    image_hint: Optional[str] = None


class ComparisonRow(BlockModel):
    feature: str = ""
    ours: str = ""
    theirs: str = ""


class ComparisonBlock(BaseBlock):
    type: Literal["comparison"] = "comparison"
    heading: Optional[str] = None
    rows: List[ComparisonRow] = []


class ProsConsBlock(BaseBlock):
    type: Literal["prosCons"] = "prosCons"
    pros: List[str] = []
    cons: List[str] = []


class TimelineStep(BlockModel):
    label: str = ""
    headline: str = ""
    body: str = ""


class TimelineBlock(BaseBlock):
    type: Literal["timeline"] = "timeline"
    heading: Optional[str] = None
    steps: List[TimelineStep] = []


class FAQItem(BlockModel):
    question: str = ""
    answer: str = ""


class FAQBlock(BaseBlock):
    """Bloc FAQ — rendu en <details> (accordéon natif)."""
    type: Literal["faq"] = "faq"
    heading: Optional[str] = None
    items: List[FAQItem] = []


class FeatureListBlock(BaseBlock):
    type: Literal["featureList"] = "featureList"
    heading: Optional[str] = None
    items: List[str] = []
    icon: Optional[str] = None
