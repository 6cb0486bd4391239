"""Blocs de preuve sociale : notes, chiffres, témoignages, presse, signature, commentaires."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockModel


class SocialProofBlock(BaseBlock):
    type: Literal["socialProof"] = "socialProof"
    rating: str = ""
    review_count: str = ""
    customer_count: str = ""


class StatItem(BlockModel):
    value: str = ""
    label: str = ""


class StatsBlock(BaseBlock):
    type: Literal["stats"] = "stats"
    heading: Optional[str] = None
    stats: List[StatItem] = []
    layout: Optional[Literal["grid", "horizontal"]] = None


class TestimonialItem(BlockModel):
    quote: str = ""
    name: str = ""
    detail: str = ""


class TestimonialsBlock(BaseBlock):
    type: Literal["testimonials"] = "testimonials"
    heading: Optional[str] = None
    testimonials: List[TestimonialItem] = []
    layout: Optional[Literal["grid", "stacked"]] = None
    show_stars: Optional[bool] = None


class AsSeenInBlock(BaseBlock):
    type: Literal["asSeenIn"] = "asSeenIn"
    publications: List[str] = []


class AuthorBylineBlock(BaseBlock):
    """Signature « magazine » : auteur, date, rubrique, audience."""
    type: Literal["authorByline"] = "authorByline"
    author: str = ""
    role: Optional[str] = None
    date: str = ""
    category: Optional[str] = None
    publication_name: Optional[str] = None
    view_count: Optional[str] = None
    live_viewers: Optional[str] = None


class CommentItem(BlockModel):
    name: str = ""
    text: str = ""
    likes: Optional[str] = None
    time_ago: str = ""
    is_verified: Optional[bool] = None
    is_reply: Optional[bool] = None


class CommentsBlock(BaseBlock):
    type: Literal["comments"] = "comments"
    heading: Optional[str] = None
    comments: List[CommentItem] = []
