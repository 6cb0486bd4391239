"""
Fabrique de blocs vides (palette "Add Block") + catalogue des 23 types.
"""
import copy
import datetime
from typing import Callable, List, Optional

from pydantic import BaseModel

from .blocks import BLOCK_TYPES, BaseBlock
from .core.ids import next_id


class CatalogEntry(BaseModel):
    type: str
    label: str
    description: str
    icon: str


BLOCK_CATALOG: List[CatalogEntry] = [
    CatalogEntry(type="headline",        label="Headline",          description="Large heading text",                                    icon="📰"),
    CatalogEntry(type="text",            label="Text",              description="Narrative paragraph(s)",                                icon="📝"),
    CatalogEntry(type="image",           label="Image",             description="Image placeholder or uploaded image",                   icon="🖼️"),
    CatalogEntry(type="cta",             label="Call to Action",    description="Button with headline and subtext",                      icon="🔘"),
    CatalogEntry(type="socialProof",     label="Social Proof",      description="Star rating + review counts",                           icon="⭐"),
    CatalogEntry(type="stats",           label="Statistics",        description="Grid of big numbers",                                   icon="📊"),
    CatalogEntry(type="testimonials",    label="Testimonials",      description="Customer review cards",                                 icon="💬"),
    CatalogEntry(type="numberedSection", label="Numbered Section",  description="Numbered benefit block",                                icon="🔢"),
    CatalogEntry(type="comparison",      label="Comparison Table",  description="Us vs. them comparison",                                icon="⚖️"),
    CatalogEntry(type="prosCons",        label="Pros & Cons",       description="Pros and cons list",                                    icon="✅"),
    CatalogEntry(type="timeline",        label="Timeline",          description="Step-by-step progression",                              icon="📅"),
    CatalogEntry(type="guarantee",       label="Guarantee",         description="Trust badges & guarantee bar",                          icon="🛡️"),
    CatalogEntry(type="divider",         label="Divider",           description="Visual separator",                                      icon="➖"),
    CatalogEntry(type="note",            label="Callout Note",      description="Highlighted callout box",                               icon="📌"),
    CatalogEntry(type="faq",             label="FAQ",               description="Frequently asked questions accordion",                  icon="❓"),
    CatalogEntry(type="asSeenIn",        label="As Seen In",        description="Press & media logos bar",                               icon="📰"),
    CatalogEntry(type="authorByline",    label="Author Byline",     description="Author name, date & category",                          icon="✍️"),
    CatalogEntry(type="featureList",     label="Feature List",      description="Checkmark bullet list",                                 icon="☑️"),
    CatalogEntry(type="offerBox",        label="Offer Box",         description="Product offer with discount & guarantee",               icon="🎁"),
    CatalogEntry(type="comments",        label="Comments",          description="Social proof comment thread",                           icon="💬"),
    CatalogEntry(type="disclaimer",      label="Disclaimer",        description="Advertorial disclosure footer",                         icon="⚖️"),
    CatalogEntry(type="urgencyBanner",   label="Urgency Banner",    description="Sticky top bar with time-sensitive message",            icon="🔴"),
    CatalogEntry(type="pricingTiers",    label="Pricing Tiers",     description="3-tier product pricing (Single / Bundle / Best Value)", icon="💰"),
]

# ── Valeurs par défaut (forme wire, sans type/id) ───────────────────────────

_DEFAULTS: dict = {
    "headline":        {"text": "Your Headline Here", "size": "large", "align": "left"},
    "text":            {"content": "Write your content here...", "variant": "default"},
    "image":           {"label": "Insert image here", "hint": "Describe what image should go here",
                        "height": "280px", "rounded": True},
    "cta":             {"headline": "Ready to Get Started?", "subtext": "Try it risk-free today.",
                        "buttonText": "Shop Now", "style": "primary", "variant": "gradient"},
    "socialProof":     {"rating": "4.8", "reviewCount": "[X]K+", "customerCount": "[X]K+"},
    "stats":           {"stats": [{"value": "[X]%", "label": "Describe this stat"},
                                  {"value": "[X]%", "label": "Describe this stat"}],
                        "layout": "grid"},
    "testimonials":    {"testimonials": [{"quote": "Customer quote here...", "name": "[Customer Name]",
                                          "detail": "Verified Buyer"}],
                        "layout": "grid", "showStars": True},
    "numberedSection": {"number": "01", "label": "SECTION", "headline": "Section Headline",
                        "body": "Section content here..."},
    "comparison":      {"rows": [{"feature": "Feature", "ours": "✓ Yes", "theirs": "✗ No"}]},
    "prosCons":        {"pros": ["Pro item here"], "cons": ["Con item here"]},
    "timeline":        {"steps": [{"label": "Step 1", "headline": "Headline", "body": "Description"}]},
    "guarantee":       {"text": "30-Day Money Back Guarantee · Free Shipping · Secure Checkout",
                        "badges": [{"icon": "🛡️", "label": "Money-Back Guarantee"},
                                   {"icon": "🚚", "label": "Free Shipping"},
                                   {"icon": "🔒", "label": "Secure Checkout"}]},
    "divider":         {},
    "note":            {"text": "Important note here...", "style": "highlight"},
    "faq":             {"items": [{"question": "Your question here?", "answer": "Your answer here."}]},
    "asSeenIn":        {"publications": ["VOGUE", "ELLE", "Forbes", "Glamour"]},
    "authorByline":    {"author": "Author Name", "role": "Health Editor", "date": None,
                        "category": "HEALTH", "publicationName": "Wellness Daily"},
    "featureList":     {"items": ["Feature one", "Feature two", "Feature three"], "icon": "✓"},
    "offerBox":        {"headline": "Special Offer", "subtext": "Try it risk-free today.",
                        "buttonText": "Check Availability", "discount": "[X]% OFF",
                        "guarantee": "30-Day Money-Back Guarantee",
                        "urgency": "Limited time offer — while supplies last", "layout": "stacked"},
    "comments":        {"comments": [{"name": "Customer Name", "text": "Great product! Really made a difference.",
                                      "likes": "43", "timeAgo": "2 days ago", "isVerified": True}]},
    "disclaimer":      {"text": "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER "
                                "PROTECTION UPDATE. MARKETING DISCLOSURE: This website is a marketplace. The "
                                "owner has a monetary connection to the products and services advertised on the site."},
    "urgencyBanner":   {"text": "TRENDING: Thousands of customers discovered this week — stock is running low",
                        "style": "trending"},
    "pricingTiers":    {
        "heading": "Choose Your Package",
        "productHandle": "product",
        "tiers": [
            {"name": "Starter", "originalPrice": "$79", "salePrice": "$49", "perUnit": "$49 per unit",
             "features": ["Free shipping", "30-day guarantee"], "highlight": False},
            {"name": "Most Popular", "originalPrice": "$177", "salePrice": "$99",
             "perUnit": "$33/unit — Save $78", "tag": "MOST POPULAR",
             "features": ["Free shipping", "60-day guarantee", "Best seller"], "highlight": True},
            {"name": "Best Value", "originalPrice": "$294", "salePrice": "$147",
             "perUnit": "$24.50/unit — Save $147", "tag": "BEST VALUE",
             "features": ["Free shipping", "90-day guarantee", "Lowest price per unit"], "highlight": False},
        ],
        "ctaText": "Get My Order",
        "guarantee": "60-Day Money-Back Guarantee — No Questions Asked",
    },
}


def format_long_date(day: datetime.date) -> str:
    """Date au format « January 7, 2026 »."""
    return f"{day:%B} {day.day}, {day.year}"


def create_default(
    block_type: str,
    ids: Optional[Callable[[], str]] = None,
    today: Optional[datetime.date] = None,
) -> BaseBlock:
    """
    Bloc vide du type demandé avec des valeurs de départ éditables.
    Id frais à chaque appel. Type inconnu → ValueError.
    """
    block_cls = BLOCK_TYPES.get(block_type)
    if block_cls is None:
        raise ValueError(f"Bloc inconnu : {block_type!r}. Registry : {list(BLOCK_TYPES)}")

    data = copy.deepcopy(_DEFAULTS[block_type])
    if block_type == "authorByline":
        data["date"] = format_long_date(today or datetime.date.today())

    return block_cls.model_validate({"type": block_type, "id": (ids or next_id)(), **data})


def catalog_entry(block_type: str) -> Optional[CatalogEntry]:
    return next((e for e in BLOCK_CATALOG if e.type == block_type), None)
