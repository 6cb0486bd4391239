"""
Archétypes basiques : mise en page éditoriale avec encart UVP en sidebar,
comparatif court, et squelette minimal {headline, text, disclaimer}.
"""
from typing import Optional

from .common import SHORT_DISCLAIMER

_INTRO = {
    "Pain": "Many shoppers dealing with the same issue say they felt stuck: they tried popular options, spent money, and still didn't get consistent results. This guide breaks down why that happens and how <strong>{product}</strong> is designed to solve that exact gap.",
    "Desire": "People looking to upgrade their daily routine are increasingly choosing <strong>{product}</strong> for one simple reason: it combines practical performance with an experience that feels premium. Here's a clear breakdown of what makes it stand out.",
    "Comparison": "With so many lookalike options on the market, it is hard to see which one is actually better. We reviewed what matters most in this category and compared common alternatives with <strong>{product}</strong> in a straightforward way.",
}

STORY_COPY = {
    "Pain": {
        "intro":    _INTRO["Pain"],
        "heading2": "[Heading 2] Why most alternatives fail to solve the real problem",
        "heading3": "[Heading 3] What to expect after consistent use",
    },
    "Desire": {
        "intro":    _INTRO["Desire"],
        "heading2": "[Heading 2] What makes this option feel like a real upgrade",
        "heading3": "[Heading 3] Results customers report after making the switch",
    },
    "Comparison": {
        "intro":    _INTRO["Comparison"],
        "heading2": "[Heading 2] Side-by-side: where the differences actually matter",
        "heading3": "[Heading 3] Is it worth it for long-term value?",
    },
}

_OFFICIAL_OFFER = {
    "type": "offerBox", "headline": "Official Offer",
    "subtext": "Check current pricing, availability, and guarantee terms.",
    "buttonText": "CHECK AVAILABILITY", "guarantee": "30-Day Money-Back Guarantee",
}


def _story_skeleton(with_note: bool = False) -> list:
    slots = [
        {"type": "headline", "text": "[Heading 1] Describe the needs of users who are interested in the product.",
         "size": "large"},
        {"type": "authorByline", "author": "Dr. Marcus", "role": "Contributor", "date": "{date}",
         "publicationName": "Gemadvertorial"},
        {"type": "featureList", "heading": "Unique Value Proposition", "icon": "✓",
         "items": ["Product benefit 1", "Product benefit 2", "Product benefit 3", "Product benefit 4"]},
        dict(_OFFICIAL_OFFER),
        {"type": "image", "label": "Insert product image",
         "hint": "Product shot for sidebar — clean product photography", "height": "180px", "placement": "sidebar"},
        {"type": "image", "label": "Insert primary lifestyle image",
         "hint": "Use a contextual image that reflects the reader's problem or desired outcome", "height": "380px"},
        {"type": "text", "content": "{@intro} {description_break}"},
        {"type": "headline", "text": "@heading2", "size": "medium"},
        {"type": "text", "content": "Use this section to explain the key mechanism behind <strong>{product}</strong>. Keep the copy simple, specific, and benefit-led. Include concrete points the reader can verify, such as materials, usage process, or expected timeline."},
        {"type": "headline", "text": "@heading3", "size": "medium"},
        {"type": "text", "content": "Close with realistic expectations and a direct next step. Reinforce risk-reversal with the guarantee and remind readers to purchase only from the official source to secure the latest pricing and support."},
        {"type": "faq", "heading": "Frequently Asked Questions", "items": [
            {"question": "How does {product} work?",
             "answer": "{product} is designed to address the core problem in this category through a repeatable daily use approach."},
            {"question": "How long until users typically notice results?",
             "answer": "Many users report early changes in the first 1-2 weeks, with stronger outcomes over consistent use."},
            {"question": "Is there a money-back guarantee?",
             "answer": "Yes. Orders are covered by a 30-day money-back guarantee when purchased from official channels."},
        ]},
        {"type": "disclaimer", "text": SHORT_DISCLAIMER},
    ]
    if with_note:
        # Encart problème / solution avant l'intro
        slots.insert(6, {
            "type": "note", "style": "highlight",
            "text": "Problem: readers need a dependable solution they can stick with. Solution: {product} focuses on practical daily use and measurable benefits rather than hype.",
        })
    return slots


LISTICLE_COMPARISON_SKELETON = [
    {"type": "headline", "text": "5 Reasons People Choose {product} Over Alternatives", "size": "large"},
    {"type": "authorByline", "author": "Editorial Team", "role": "Product Research", "date": "{date}",
     "publicationName": "Gemadvertorial"},
    {"type": "featureList", "heading": "Unique Value Proposition", "icon": "✓",
     "items": ["Reason 1 summary", "Reason 2 summary", "Reason 3 summary", "Reason 4 summary"]},
    dict(_OFFICIAL_OFFER),
    {"type": "image", "label": "Insert product image", "hint": "Product shot for sidebar",
     "height": "180px", "placement": "sidebar"},
    {"type": "image", "label": "Insert hero image",
     "hint": "Primary lifestyle or product hero — sets the tone for the page", "height": "340px"},
    {"type": "text", "content": "{description_para}This breakdown focuses on practical factors: quality, performance, long-term value, and customer trust signals."},
    {"type": "numberedSection", "number": "01", "label": "QUALITY",
     "headline": "Higher build quality and consistency",
     "body": "{product} is designed for repeatable results with fewer compromises in materials and finish.",
     "imageLabel": "Insert quality comparison visual",
     "imageHint": "Side-by-side close-up or materials comparison"},
    {"type": "numberedSection", "number": "02", "label": "EFFECTIVENESS",
     "headline": "Performance users can feel quickly",
     "body": "Most buyers prioritize practical outcomes. This section should show realistic timelines and outcomes.",
     "imageLabel": "Insert results-focused visual",
     "imageHint": "Lifestyle result photo or progress graphic"},
    {"type": "numberedSection", "number": "03", "label": "VALUE",
     "headline": "Stronger long-term value per dollar",
     "body": "Compare total cost and longevity, not just the first checkout price.",
     "imageLabel": "Insert value chart",
     "imageHint": "Cost-per-use or long-term savings chart"},
    {"type": "comparison", "heading": "{product} vs. Typical Alternatives", "rows": [
        {"feature": "Quality",       "ours": "✓ Higher",            "theirs": "✗ Mixed"},
        {"feature": "Consistency",   "ours": "✓ Reliable",          "theirs": "✗ Inconsistent"},
        {"feature": "Guarantee",     "ours": "✓ 30 days",           "theirs": "✗ Limited"},
        {"feature": "Overall Value", "ours": "✓ Better long-term",  "theirs": "✗ Short-term only"},
    ]},
    {"type": "faq", "heading": "Common Questions", "items": [
        {"question": "Is {product} suitable for first-time buyers?",
         "answer": "Yes. The setup and use are straightforward, and support is typically available through official channels."},
        {"question": "Where should I buy it?",
         "answer": "Use the official product page to ensure authenticity, warranty coverage, and current promotions."},
    ]},
    {"type": "disclaimer", "text": SHORT_DISCLAIMER},
]

MINIMAL_COPY = {
    "Pain":       {"headline": "Tired of Settling? Meet {product}", "intro": _INTRO["Pain"]},
    "Desire":     {"headline": "Why Everyone Is Talking About {product}", "intro": _INTRO["Desire"]},
    "Comparison": {"headline": "{product} vs. The Alternatives", "intro": _INTRO["Comparison"]},
}

MINIMAL_SKELETON = [
    {"type": "headline", "text": "@headline", "size": "large"},
    {"type": "text", "content": "@intro"},
    {"type": "disclaimer", "text": SHORT_DISCLAIMER},
]


def _basic(archetype_id: str, name: str, description: str, skeleton: list, copy: Optional[dict] = None) -> dict:
    return {
        "id":            archetype_id,
        "name":          name,
        "description":   description,
        "default_angle": "Pain",
        "copy":          copy or {},
        "skeleton":      skeleton,
    }


STORY_CLASSIC = _basic(
    "story-classic", "Story: Classic",
    "Editorial layout with a UVP sidebar, intro, two sub-headings and a short FAQ.",
    _story_skeleton(), STORY_COPY,
)
STORY_UVP_SIDEBAR = _basic(
    "story-uvp-sidebar", "Story: UVP Sidebar",
    "Same editorial layout, framed around the unique value proposition sidebar.",
    _story_skeleton(), STORY_COPY,
)
STORY_PROBLEM_SOLUTION = _basic(
    "story-problem-solution", "Story: Problem / Solution",
    "Editorial layout with a highlighted problem / solution callout before the intro.",
    _story_skeleton(with_note=True), STORY_COPY,
)
LISTICLE_COMPARISON = _basic(
    "listicle-comparison", "Listicle: Comparison",
    "Short comparison listicle: three numbered factors and a comparison table.",
    LISTICLE_COMPARISON_SKELETON,
)
MINIMAL = _basic(
    "minimal", "Minimal",
    "Three-block skeleton: headline, intro text and the legal disclosure.",
    MINIMAL_SKELETON, MINIMAL_COPY,
)
