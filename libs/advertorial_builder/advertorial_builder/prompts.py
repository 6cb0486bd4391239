"""
Prompts de génération IA : schéma des blocs, structure DR en 17 sections,
règles de copy (mots bannis), règles de sortie.
"""
from typing import List, Optional, Sequence

from .generator import generate

BLOCK_SCHEMA = """
Available block types and their required fields (all blocks must also have a unique "id"):

urgencyBanner: { type, id, text, style?: "breaking"|"limited"|"trending" }
authorByline: { type, id, author, role?: string, date, category?: string, publicationName?: string, viewCount?: string, liveViewers?: string }
headline: { type, id, text, size: "large"|"medium"|"small", align?: "left"|"center", subheadline?: string }
text: { type, id, content: "HTML string — supports <strong>, <em>, <br>", variant?: "default"|"large-intro"|"pull-quote" }
image: { type, id, label: "descriptive label", hint: "what the image should show", height?: "300px", caption?: string }
socialProof: { type, id, rating: "4.9", reviewCount: "2,847 reviews", customerCount: "50,000+ customers" }
stats: { type, id, heading?: string, stats: [{ value: string, label: string }], layout?: "grid"|"horizontal" }
testimonials: { type, id, heading?: string, testimonials: [{ quote: string, name: string, detail: string }], layout?: "grid"|"stacked", showStars?: true }
numberedSection: { type, id, number: "01", label, headline, body, imageLabel?: string, imageHint?: string }
comparison: { type, id, heading?: string, rows: [{ feature: string, ours: string, theirs: string }] }
prosCons: { type, id, pros: string[], cons: string[] }
timeline: { type, id, heading?: string, steps: [{ label: string, headline: string, body: string }] }
guarantee: { type, id, text, badges?: [{ icon: string, label: string }] }
faq: { type, id, heading?: string, items: [{ question: string, answer: string }] }
asSeenIn: { type, id, publications: string[] }
featureList: { type, id, heading?: string, items: string[], icon?: string }
pricingTiers: { type, id, heading?: string, productHandle: string, tiers: [{ name: string, originalPrice: string, salePrice: string, perUnit?: string, tag?: string, features: string[], highlight?: boolean }], ctaText?: string, guarantee?: string }
offerBox: { type, id, headline, subtext, buttonText, discount?: string, guarantee?: string, urgency?: string, layout?: "stacked"|"horizontal" }
comments: { type, id, heading?: string, comments: [{ name, text, likes?: string, timeAgo, isVerified?: true, isReply?: false }] }
disclaimer: { type, id, text }
divider: { type, id }
note: { type, id, text, style: "info"|"warning"|"highlight" }
"""

# Structure DR par défaut : {headline_pattern} vient du preset
DR_STRUCTURE: List[str] = [
    'urgencyBanner — sticky top bar with a time-sensitive, specific message. NOT generic "hurry" — tie it to something real: a media feature, a production run, a seasonal surge. Example: "TRENDING: 47,283 people discovered this in the last 30 days — stock is running low"',
    "authorByline — realistic author matching the style preset's authority type. Use the publicationName field.",
    "headline (large) — reads like a real article headline, NEVER an ad. Follow this pattern: {headline_pattern}",
    "socialProof — real numbers from the proof provided (star rating + review count + customer count)",
    'text (large-intro variant) — opening hook: 2nd-person, relatable pain scenario. Reader should think "that\'s me." End by TEASING the solution without naming the product yet.',
    "text — pain point escalation: take the initial pain and make it worse. Show the cascade of consequences. Make the reader feel this is serious enough to solve NOW.",
    "text — root cause reframe: \"Here's what most people don't realize...\" — introduce the mechanism/unique angle as the REAL explanation. Position existing solutions as flawed because they don't address the root cause. Create an information gap only this product fills.",
    "image — product hero image",
    'text — product reveal: NOW name it. Frame as the solution to the root cause. Brief origin story ("After X years of research, [brand] developed..."). This is the payoff.',
    'featureList — 3–5 key ingredients or differentiators. Every item must have a specific number: "clinically shown to improve X by 47% in 4 weeks", "3× more bioavailable than standard formulas"',
    "stats — 3 specific data points from the proof provided. Use real numbers.",
    'testimonials (showStars: true) — 3 customer stories. EACH MUST: include full name + age/city, start with hesitation or skepticism, include a specific timeframe, mention a specific observable result. NOT "this product is amazing" — "I almost didn\'t order because I\'d already tried 3 others. After 2 weeks I noticed my [specific symptom] was actually better."',
    "timeline — week-by-week expected results (Week 1, Week 4, Week 8). Specific, observable, believable. Sets expectations and creates anticipation.",
    "comparison — product vs. competitors/traditional alternatives. Product wins every row. Include price-per-day framing in one row.",
    "pricingTiers — 3-tier offer: 1 unit (starter), 3 units (MOST POPULAR, highlight: true), 6 units (BEST VALUE). Use real math for per-unit savings. Include product handle.",
    "guarantee — 60-day money-back guarantee. Brief, reassuring. Remove risk.",
    "disclaimer — FDA disclaimer or results disclaimer appropriate for the product category.",
]

BANNED_WORDS = [
    "delve", "landscape", "testament", "showcase", "foster", "underscore", "pivotal", "crucial",
    "realm", "myriad", "tapestry", "multifaceted", "commendable", "intricate", "comprehensive",
    "game-changer", "revolutionize", "holistic", "synergy", "seamless", "cutting-edge", "robust",
    "streamline",
]

COPY_RULES = f"""COPY RULES — these separate a converting advertorial from generic AI slop:
- Write like a JOURNALIST, not a marketer. The reader should be 80% through the page before they realize they're being sold to. Every paragraph earns the next scroll.
- SPECIFIC > GENERIC: "47,382 women" beats "thousands of women". "In 14 days" beats "quickly". "$3.27/day" beats "affordable". Never round numbers.
- One idea per paragraph. Short paragraphs. Lots of white space. Scannable.
- BANNED WORDS — never use: {", ".join(BANNED_WORDS)}
- No hype adjectives without proof. Don't call it "amazing" — show a 4.8-star rating from 12,400 reviews and let the reader decide.
- The mechanism is the STAR. Devote real space to explaining it. Use analogies. Make the reader feel smarter for understanding it. This is what separates your page from every other advertorial.
- Urgency must feel REAL — never just "limited time". Tie it to: a seasonal sale, a media feature driving demand, a specific production batch size.
- NEVER use placeholder text like [Author Name], [X]%, [City], [Product Name]. Write real, specific copy.
- EVERY block must feel earned — if it doesn't push the reader toward the next block or the purchase, cut it."""

_INTRO = (
    "You are an expert direct-response advertorial copywriter. You write presell pages that sit between "
    "a Meta ad and a Shopify product page — they look like editorial content but are engineered to sell. "
    "Every page you produce should read like a real magazine article or editorial piece while following "
    "proven direct-response structure."
)


def _numbered(lines: Sequence[str]) -> str:
    return "\n".join(f"{i}.".ljust(4) + line for i, line in enumerate(lines, 1))


def _output_rules(structure: Optional[Sequence[str]]) -> str:
    if structure is None:
        count = "Generate exactly 15–18 blocks following the DR structure above. Do not exceed 18."
    else:
        count = f"Generate exactly {len(structure)} blocks following the structure above, one per section."
    return (
        "OUTPUT RULES:\n"
        "1. Return ONLY a valid JSON array — no markdown code fences, no explanation, nothing else.\n"
        f"2. {count}\n"
        '3. Every block MUST have a unique "id" in format "blk_" + 8 random alphanumeric chars.'
    )


def build_system_prompt(preset: dict, structure: Optional[Sequence[str]] = None) -> str:
    """
    Prompt système : rôle, schéma, structure (DR par défaut, ou lignes fournies),
    règles de copy, preset de ton, règles de sortie.
    """
    lines = structure if structure is not None else [
        line.replace("{headline_pattern}", preset["headline_pattern"]) for line in DR_STRUCTURE
    ]
    return "\n\n".join([
        _INTRO,
        BLOCK_SCHEMA,
        "MANDATORY DR PAGE STRUCTURE — follow this order exactly, generating one block per section:\n"
        + _numbered(lines),
        COPY_RULES,
        f"Style preset: {preset['name']}\nTone: {preset['tone']}\nAuthority figure: {preset['authority']}",
        _output_rules(structure),
    ])


def build_user_message(product, preset_key: str, preset: dict, sections: int = len(DR_STRUCTURE)) -> str:
    """Message utilisateur : une ligne par champ produit renseigné, handle, consigne finale."""
    parts = [f"Product: {product.title}"]
    if product.description:
        parts.append(f"Description: {product.description}")
    if product.target_customer:
        parts.append(f"Target customer: {product.target_customer}")
    if product.mechanism:
        parts.append(f"Mechanism / unique angle: {product.mechanism}")
    if product.proof:
        parts.append(f"Proof: {product.proof}")
    parts.append(f"Style preset: {preset_key} — {preset['name']}")
    if product.image_urls:
        parts.append("Product image URLs:\n" + "\n".join(product.image_urls))
    if product.instructions:
        parts.append(f"Additional instructions: {product.instructions}")
    parts.append(f"Product handle (use in pricingTiers.productHandle): {product.handle}")
    parts.append(
        f"\nGenerate a complete advertorial following the {sections}-section DR structure. "
        "Return only a JSON array of blocks."
    )
    return "\n".join(parts)


def _describe(block) -> str:
    """Ligne de structure pour un bloc de squelette : type, variante, intitulé."""
    line = block.type
    detail = getattr(block, "size", None) if block.type == "headline" else getattr(block, "variant", None)
    if detail:
        line += f" ({detail})"
    heading = getattr(block, "heading", None) or getattr(block, "label", None)
    if heading:
        line += f" — {heading}"
    return line


def structure_from_archetype(archetype: str, angle: Optional[str] = None) -> List[str]:
    """Structure de page dérivée d'un squelette d'archétype (une ligne par bloc)."""
    blocks = generate("the product", archetype=archetype, angle=angle, ids=lambda: "blk_structure")
    return [_describe(b) for b in blocks]
