"""Blocs de contenu éditorial : titres, texte, images, CTA, encarts."""
from typing import Literal, Optional

from .base import BaseBlock


class HeadlineBlock(BaseBlock):
    type: Literal["headline"] = "headline"
    text: str = ""
    size: Literal["large", "medium", "small"] = "large"
    align: Optional[Literal["left", "center"]] = None
    subheadline: Optional[str] = None


class TextBlock(BaseBlock):
    """Paragraphe(s) — HTML limité (<strong>, <em>, <br>) passé tel quel au rendu."""
    type: Literal["text"] = "text"
    content: str = ""
    variant: Optional[Literal["default", "large-intro", "pull-quote"]] = None


class ImageBlock(BaseBlock):
    """Image uploadée (src) ou placeholder décrit par label + hint."""
    type: Literal["image"] = "image"
    label: str = ""
    hint: str = ""
    src: Optional[str] = None
    height: Optional[str] = None
    placement: Optional[Literal["main", "sidebar"]] = None
    caption: Optional[str] = None
    rounded: Optional[bool] = None


class CtaBlock(BaseBlock):
    type: Literal["cta"] = "cta"
    headline: str = ""
    subtext: str = ""
    button_text: str = ""
    style: Literal["primary", "inline"] = "primary"
    variant: Optional[Literal["gradient", "solid", "outline"]] = None


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"


class NoteBlock(BaseBlock):
    type: Literal["note"] = "note"
    text: str = ""
    style: Literal["info", "warning", "highlight"] = "highlight"


class DisclaimerBlock(BaseBlock):
    type: Literal["disclaimer"] = "disclaimer"
    text: str = ""


class UrgencyBannerBlock(BaseBlock):
    """Barre fixe en haut de page (breaking / limited / trending)."""
    type: Literal["urgencyBanner"] = "urgencyBanner"
    text: str = ""
    style: Optional[Literal["breaking", "limited", "trending"]] = None
