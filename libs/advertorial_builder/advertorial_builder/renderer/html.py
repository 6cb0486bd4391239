"""
Renderer HTML — liste ordonnée de blocs → corps de page (style + script + contenu).

L'ordre des blocs EST la mise en page : chaque bloc se rend indépendamment,
les fragments sont concaténés dans l'ordre. Le contenu des éléments passe tel
quel (HTML limité autorisé) ; seules les valeurs d'attribut sont échappées.
"""
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .. import config
from ..core.copy import escape_html
from ..blocks import (
    BaseBlock, HeadlineBlock, TextBlock, ImageBlock, CtaBlock, SocialProofBlock,
    StatsBlock, TestimonialsBlock, TestimonialItem, NumberedSectionBlock, ComparisonBlock,
    ProsConsBlock, TimelineBlock, GuaranteeBlock, DividerBlock, NoteBlock, FAQBlock,
    AsSeenInBlock, AuthorBylineBlock, FeatureListBlock, OfferBoxBlock, CommentsBlock,
    DisclaimerBlock, UrgencyBannerBlock, PricingTiersBlock, coerce_block,
)
from . import icons
from .css import CONTENT_STYLE, PAGE_SCRIPT, PAGE_STYLE, escape_attr, hex_to_rgba

log = logging.getLogger(__name__)


class RenderOptions(BaseModel):
    """Paramètres de rendu : couleur d'accent, produit cible des liens."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    accent_color:   str = Field(default_factory=config.accent_color)
    product_title:  str = ""
    product_handle: str = ""

    @property
    def accent(self) -> str:
        return escape_attr(self.accent_color)

    def product_href(self, handle: str = "") -> str:
        return f"/products/{escape_attr(handle or self.product_handle)}"


def _rgba(o: RenderOptions, alpha: float) -> str:
    return hex_to_rgba(o.accent_color, alpha)


# ── Contenu ──────────────────────────────────────────────────────────────────

_HEADLINE_SIZES = {
    #          taille    graisse  interligne  balise
    "large":  ("2.6rem",  "900",   "1.15",     "h1"),
    "medium": ("2rem",    "800",   "1.2",      "h2"),
    "small":  ("1.55rem", "700",   "1.25",     "h3"),
}


def render_headline(b: HeadlineBlock, o: RenderOptions) -> str:
    size, weight, lh, tag = _HEADLINE_SIZES[b.size]
    sub_size = "1.15rem" if b.size == "large" else "1rem"
    subheadline = (
        f'<p style="font-size:{sub_size};color:#6b7280;font-weight:400;margin:10px 0 0;line-height:1.55;">{b.subheadline}</p>'
        if b.subheadline else ""
    )
    return f"""<div style="text-align:{b.align or 'left'};margin:0 0 24px;">
  <{tag} style="font-size:{size};font-weight:{weight};margin:0;font-family:inherit;line-height:{lh};color:#111827;letter-spacing:-0.02em;">{b.text}</{tag}>
  {subheadline}
</div>"""


def render_text(b: TextBlock, o: RenderOptions) -> str:
    variant = b.variant or "default"
    if variant == "large-intro":
        return f"""<div class="adv-text" style="margin:24px 0;">
  <p style="font-size:1.3rem;line-height:1.8;margin:0;color:#111827;font-weight:400;">{b.content}</p>
</div>"""
    if variant == "pull-quote":
        return f"""<blockquote style="margin:36px 0;padding:20px 28px;border-left:4px solid {o.accent};background:{_rgba(o, 0.05)};border-radius:0 10px 10px 0;">
  <p style="font-size:1.35rem;line-height:1.7;margin:0;color:#1f2937;font-style:italic;font-weight:500;">{b.content}</p>
</blockquote>"""
    return f"""<div class="adv-text" style="margin:24px 0;">
  <p style="font-size:1.15rem;line-height:1.85;margin:0;color:#374151;">{b.content}</p>
</div>"""


def render_image(b: ImageBlock, o: RenderOptions) -> str:
    sidebar = b.placement == "sidebar"
    margin  = "16px 0" if sidebar else "28px 0"
    height  = b.height or ("180px" if sidebar else "300px")
    radius  = "0" if b.rounded is False else ("8px" if sidebar else "12px")
    caption = (
        f'<figcaption style="margin-top:10px;font-size:0.875rem;color:#9ca3af;text-align:center;font-style:italic;">{b.caption}</figcaption>'
        if b.caption else ""
    )
    if b.src:
        return f"""<figure style="margin:{margin};padding:0;">
  <img src="{escape_attr(b.src)}" alt="{escape_attr(b.label)}" style="width:100%;height:auto;border-radius:{radius};display:block;" />
  {caption}
</figure>"""
    return f"""<figure style="margin:{margin};padding:0;">
  <div class="adv-img-placeholder" style="width:100%;height:{escape_attr(height)};background:linear-gradient(150deg,#f1f5f9 0%,#e2e8f0 100%);border-radius:{radius};display:flex;flex-direction:column;align-items:center;justify-content:center;gap:10px;">
    {icons.IMAGE}
    <span style="font-size:13px;font-weight:600;color:#94a3b8;text-align:center;max-width:80%;line-height:1.4;">{b.label}</span>
    <span style="font-size:11px;color:#cbd5e1;text-align:center;max-width:80%;line-height:1.4;">{b.hint}</span>
  </div>
  {caption}
</figure>"""


def render_cta(b: CtaBlock, o: RenderOptions) -> str:
    href = o.product_href()
    if b.style == "inline":
        return f"""<div style="text-align:center;margin:32px 0;">
  <a href="{href}" style="display:inline-block;padding:15px 40px;background:{o.accent};color:#fff;text-decoration:none;border-radius:10px;font-weight:700;font-size:1.1rem;letter-spacing:0.01em;box-shadow:0 4px 16px {_rgba(o, 0.3)};">{b.button_text}</a>
</div>"""

    variant = b.variant or "gradient"
    if variant == "gradient":
        bg = f"linear-gradient(135deg,{o.accent} 0%,{_rgba(o, 0.82)} 100%)"
    elif variant == "solid":
        bg = o.accent
    else:
        bg = "#fff"
    light = variant == "outline"
    heading_color = o.accent if light else "#fff"
    subtext_color = "#6b7280" if light else "rgba(255,255,255,0.88)"
    btn_bg        = o.accent if light else "#fff"
    btn_color     = "#fff" if light else o.accent
    border        = f"border:2px solid {o.accent};" if light else ""
    footer_color  = "#9ca3af" if light else "rgba(255,255,255,0.7)"
    return f"""<section class="adv-cta-primary" style="text-align:center;margin:48px 0;padding:48px 28px;background:{bg};border-radius:18px;{border}box-shadow:0 8px 40px {_rgba(o, 0.18)};">
  <h2 style="font-size:2.1rem;margin:0 0 12px;color:{heading_color};font-weight:800;font-family:inherit;line-height:1.2;letter-spacing:-0.02em;">{b.headline}</h2>
  <p style="font-size:1.15rem;color:{subtext_color};margin:0 auto 28px;max-width:480px;line-height:1.6;">{b.subtext}</p>
  <a href="{href}" style="display:inline-flex;align-items:center;justify-content:center;padding:16px 44px;background:{btn_bg};color:{btn_color};text-decoration:none;border-radius:10px;font-weight:700;font-size:1.15rem;box-shadow:0 4px 20px rgba(0,0,0,0.12);">{b.button_text}</a>
  <div style="margin-top:16px;font-size:0.9rem;color:{footer_color};">✓ Secure checkout &nbsp;·&nbsp; 30-day guarantee &nbsp;·&nbsp; Free shipping</div>
</section>"""


def render_divider(b: DividerBlock, o: RenderOptions) -> str:
    return """<div style="margin:44px 0;display:flex;align-items:center;gap:16px;">
  <div style="flex:1;height:1px;background:#e5e7eb;"></div>
  <div style="color:#d1d5db;font-size:10px;letter-spacing:3px;">✦ ✦ ✦</div>
  <div style="flex:1;height:1px;background:#e5e7eb;"></div>
</div>"""


def render_note(b: NoteBlock, o: RenderOptions) -> str:
    styles = {
        #             fond               bordure    texte      icône
        "info":      ("#eff6ff",         "#3b82f6", "#1e40af", "ℹ"),
        "warning":   ("#fffbeb",         "#f59e0b", "#92400e", "!"),
        "highlight": (_rgba(o, 0.06),    o.accent,  "#1f2937", "★"),
    }
    bg, border, color, icon = styles[b.style]
    return f"""<div style="margin:24px 0;padding:18px 22px;background:{bg};border-left:4px solid {border};border-radius:0 10px 10px 0;display:flex;gap:14px;align-items:flex-start;">
  <span style="font-size:15px;font-weight:700;flex-shrink:0;margin-top:1px;color:{border};width:20px;height:20px;border-radius:50%;border:2px solid {border};display:flex;align-items:center;justify-content:center;">{icon}</span>
  <p style="margin:0;font-size:1.05rem;font-weight:500;color:{color};line-height:1.65;">{b.text}</p>
</div>"""


def render_disclaimer(b: DisclaimerBlock, o: RenderOptions) -> str:
    return f"""<div class="adv-disclaimer" style="margin:48px 0 12px;padding:20px 24px;background:#f9fafb;border-radius:8px;border-top:3px solid #f3f4f6;">
  <p style="margin:0;font-size:0.78rem;color:#9ca3af;line-height:1.75;text-align:center;">{b.text}</p>
</div>"""


_BANNER_STYLES = {
    "breaking": ("#dc2626", "🔴 BREAKING:"),
    "limited":  ("#111827", "⚡ LIMITED:"),
}
_BANNER_PREFIX = re.compile(r"^(BREAKING:|LIMITED:|TRENDING:)\s*", re.IGNORECASE)


def render_urgency_banner(b: UrgencyBannerBlock, o: RenderOptions) -> str:
    bg, prefix = _BANNER_STYLES.get(b.style, (o.accent, "📈 TRENDING:"))
    text = _BANNER_PREFIX.sub("", b.text)
    return f"""<div class="adv-urgency-banner" style="position:fixed;top:0;left:0;right:0;z-index:1000;background:{bg};color:#fff;text-align:center;padding:10px 20px;font-size:0.8rem;font-weight:700;letter-spacing:0.04em;line-height:1.4;">
  <span style="opacity:0.9">{prefix}</span> {text}
</div>
<div style="height:44px;"></div>"""


# ── Preuve sociale ───────────────────────────────────────────────────────────

def render_social_proof(b: SocialProofBlock, o: RenderOptions) -> str:
    sep = '<span style="color:#e5e7eb;font-size:20px;">|</span>'
    return f"""<div class="adv-social-proof" style="display:flex;align-items:center;justify-content:center;gap:20px;padding:18px 20px;margin:24px 0;flex-wrap:wrap;background:#fafafa;border:1px solid #f3f4f6;border-radius:12px;">
  <div style="display:flex;align-items:center;gap:5px;">
    {icons.STARS}
    <strong style="margin-left:6px;font-size:0.95rem;color:#1f2937;">{b.rating}</strong>
  </div>
  {sep}
  <div style="font-size:0.95rem;color:#374151;"><strong>{b.review_count}</strong></div>
  {sep}
  <div style="font-size:0.95rem;color:#374151;"><strong>{b.customer_count}</strong></div>
</div>"""


def render_stats(b: StatsBlock, o: RenderOptions) -> str:
    heading = (
        f'<div style="text-align:center;margin-bottom:20px;"><h2 style="font-size:1.7rem;font-weight:700;margin:0;font-family:inherit;color:#111827;">{b.heading}</h2></div>'
        if b.heading else ""
    )
    if b.layout == "horizontal":
        items = "".join(
            f"""<div style="text-align:center;">
    <div style="font-size:3.25rem;font-weight:900;color:{o.accent};line-height:1;margin-bottom:6px;letter-spacing:-0.03em;">{s.value}</div>
    <div style="font-size:0.9rem;color:#6b7280;line-height:1.4;font-weight:500;">{s.label}</div>
  </div>"""
            for s in b.stats
        )
        return f"""{heading}
<div class="adv-stats-grid" style="display:flex;justify-content:center;gap:40px;padding:32px 24px;margin:28px 0;flex-wrap:wrap;border-top:1px solid #f3f4f6;border-bottom:1px solid #f3f4f6;">
  {items}
</div>"""

    cols = max(min(len(b.stats), 4), 1)
    items = "".join(
        f"""<div style="text-align:center;padding:28px 16px;background:#fff;">
    <div style="font-size:3rem;font-weight:900;color:{o.accent};line-height:1;margin-bottom:8px;letter-spacing:-0.03em;">{s.value}</div>
    <div style="font-size:0.9rem;color:#6b7280;line-height:1.4;font-weight:500;">{s.label}</div>
  </div>"""
        for s in b.stats
    )
    return f"""{heading}
<div class="adv-stats-grid" style="display:grid;grid-template-columns:repeat({cols},1fr);gap:1px;margin:28px 0;background:{_rgba(o, 0.08)};border-radius:14px;overflow:hidden;border:1px solid {_rgba(o, 0.12)};">
  {items}
</div>"""


def initials(name: str) -> str:
    """'Sarah M. Jones' → 'SM' (deux premières initiales, majuscules)."""
    return "".join(part[0] for part in name.split() if part)[:2].upper()


def _testimonial_card(t: TestimonialItem, o: RenderOptions, show_stars: bool) -> str:
    stars = f'<div style="display:flex;gap:2px;margin-bottom:14px;">{icons.STARS}</div>' if show_stars else ""
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:14px;padding:24px;box-shadow:0 2px 8px rgba(0,0,0,0.05);display:flex;flex-direction:column;">
  {stars}
  <p style="font-size:1.05rem;line-height:1.7;margin:0 0 auto;color:#374151;padding-bottom:18px;flex:1;">"{t.quote}"</p>
  <div style="display:flex;align-items:center;gap:12px;padding-top:16px;border-top:1px solid #f3f4f6;">
    <div style="width:38px;height:38px;border-radius:50%;background:{_rgba(o, 0.1)};border:2px solid {_rgba(o, 0.2)};display:flex;align-items:center;justify-content:center;font-weight:700;font-size:13px;color:{o.accent};flex-shrink:0;">{initials(t.name)}</div>
    <div>
      <div style="font-weight:600;font-size:0.95rem;color:#1f2937;">{t.name}</div>
      <div style="font-size:0.83rem;color:#9ca3af;">{t.detail}</div>
    </div>
  </div>
</div>"""


def render_testimonials(b: TestimonialsBlock, o: RenderOptions) -> str:
    heading = (
        f'<div style="text-align:center;margin-bottom:24px;"><h2 style="font-size:1.8rem;font-weight:800;margin:0;font-family:inherit;color:#111827;">{b.heading}</h2></div>'
        if b.heading else ""
    )
    show_stars = b.show_stars is not False
    cards = "".join(_testimonial_card(t, o, show_stars) for t in b.testimonials)
    if b.layout == "stacked":
        return f'{heading}<div style="margin:28px 0;display:flex;flex-direction:column;gap:16px;">{cards}</div>'
    cols = max(min(len(b.testimonials), 3), 1)
    return f"""{heading}
<div style="margin:28px 0;">
  <div class="adv-testimonials-grid" style="display:grid;grid-template-columns:repeat({cols},1fr);gap:16px;">
    {cards}
  </div>
</div>"""


def render_as_seen_in(b: AsSeenInBlock, o: RenderOptions) -> str:
    pubs = "".join(
        f'<span style="font-size:1.05rem;font-weight:800;color:#9ca3af;letter-spacing:1.5px;text-transform:uppercase;">{p}</span>'
        for p in b.publications
    )
    return f"""<div style="text-align:center;margin:36px 0;padding:22px 0;border-top:1px solid #f3f4f6;border-bottom:1px solid #f3f4f6;">
  <div style="font-size:10px;text-transform:uppercase;letter-spacing:3px;color:#9ca3af;margin-bottom:18px;font-weight:700;">As Featured In</div>
  <div style="display:flex;align-items:center;justify-content:center;gap:36px;flex-wrap:wrap;">
    {pubs}
  </div>
</div>"""


def _with_suffix(value: str, suffix: str) -> str:
    """Ajoute le suffixe d'unité sauf s'il est déjà présent ('28,419 views')."""
    return value if value.lower().endswith(suffix.lower()) else f"{value} {suffix}"


def render_author_byline(b: AuthorBylineBlock, o: RenderOptions) -> str:
    meta = " · ".join(v for v in (b.role, b.date, b.publication_name) if v)
    view_line = ""
    if b.view_count or b.live_viewers:
        views = f"<span>{_with_suffix(b.view_count, 'views')}</span>" if b.view_count else ""
        sep   = " &nbsp;/&nbsp; " if b.view_count and b.live_viewers else ""
        live  = (
            f'<span style="color:#ef4444;font-weight:600;">● {_with_suffix(b.live_viewers, "reading now")}</span>'
            if b.live_viewers else ""
        )
        view_line = f"""<div style="font-size:0.875rem;color:#9ca3af;margin-top:5px;">
        {views}{sep}{live}
      </div>"""
    meta_line = f'<div style="font-size:0.875rem;color:#6b7280;">{meta}</div>' if meta else ""
    return f"""<div style="margin:0 0 28px;padding-bottom:18px;border-bottom:2px solid #f3f4f6;">
  <div style="font-size:11px;text-transform:uppercase;letter-spacing:1.5px;color:#9ca3af;font-weight:700;margin-bottom:5px;">Written By: {b.author}</div>
  {meta_line}
  {view_line}
</div>"""


def render_comments(b: CommentsBlock, o: RenderOptions) -> str:
    heading = (
        f'<h3 style="font-size:1.3rem;font-weight:700;margin:0 0 20px;padding-bottom:14px;border-bottom:2px solid #f3f4f6;color:#111827;">{b.heading}</h3>'
        if b.heading else ""
    )
    verified = '<span style="font-size:0.72rem;font-weight:600;color:#059669;background:#ecfdf5;padding:2px 7px;border-radius:4px;">✓ Verified Buyer</span>'
    parts = []
    for c in b.comments:
        indent = "padding-left:44px;" if c.is_reply else ""
        likes = (
            f"""<div style="margin-top:8px;display:flex;align-items:center;gap:14px;font-size:0.85rem;color:#9ca3af;">
      <span>👍 {c.likes}</span>
      <span>Reply</span>
    </div>"""
            if c.likes else ""
        )
        parts.append(f"""
  <div style="padding:16px 0;border-bottom:1px solid #f3f4f6;{indent}">
    <div style="display:flex;align-items:center;gap:10px;margin-bottom:8px;">
      <div style="width:34px;height:34px;border-radius:50%;background:{_rgba(o, 0.1)};display:flex;align-items:center;justify-content:center;font-weight:700;font-size:13px;color:{o.accent};flex-shrink:0;">{c.name[:1].upper()}</div>
      <div style="display:flex;align-items:center;gap:8px;flex-wrap:wrap;">
        <span style="font-weight:600;font-size:0.95rem;color:#1f2937;">{c.name}</span>
        {verified if c.is_verified else ''}
        <span style="font-size:0.82rem;color:#9ca3af;">{c.time_ago}</span>
      </div>
    </div>
    <p style="margin:0;font-size:1rem;line-height:1.65;color:#374151;">{c.text}</p>
    {likes}
  </div>
  """)
    body = "".join(parts)
    return f"""<div style="margin:40px 0;">
  {heading}
  {body}
</div>"""


# ── Sections ─────────────────────────────────────────────────────────────────

def render_numbered_section(b: NumberedSectionBlock, o: RenderOptions) -> str:
    image = ""
    if b.image_label:
        image = render_image(ImageBlock(
            id=f"{b.id}_img",
            label=b.image_label,
            hint=b.image_hint or "Add a relevant visual here",
            height="220px",
        ), o)
    return f"""<div class="adv-numbered-section" style="margin-bottom:44px;padding-bottom:40px;border-bottom:1px solid #f3f4f6;">
  <div style="display:flex;align-items:flex-start;gap:16px;margin-bottom:14px;">
    <div style="width:52px;height:52px;border-radius:50%;background:{o.accent};display:flex;align-items:center;justify-content:center;font-size:1.1rem;font-weight:900;color:#fff;flex-shrink:0;box-shadow:0 4px 12px {_rgba(o, 0.3)};">{b.number}</div>
    <div style="padding-top:12px;">
      <div style="font-size:0.78rem;font-weight:700;text-transform:uppercase;letter-spacing:1.5px;color:{o.accent};">{b.label}</div>
    </div>
  </div>
  <h3 class="adv-numbered-headline" style="font-size:1.75rem;font-weight:800;margin:0 0 12px;font-family:inherit;line-height:1.25;color:#111827;">{b.headline}</h3>
  <p style="font-size:1.1rem;line-height:1.8;color:#4b5563;margin:0;">{b.body}</p>
  {image}
</div>"""


_MARK = re.compile(r"^[✓✗×x]$", re.IGNORECASE)


def _ours_cell(value: str) -> str:
    if not _MARK.match(value):
        return value
    return icons.CHECK_BADGE if value == "✓" else icons.CROSS_BADGE


def render_comparison(b: ComparisonBlock, o: RenderOptions) -> str:
    heading = (
        f'<div style="text-align:center;margin-bottom:16px;"><h2 style="font-size:1.7rem;font-weight:700;margin:0;font-family:inherit;">{b.heading}</h2></div>'
        if b.heading else ""
    )
    rows = "".join(
        f"""<tr style="background:{'#fff' if i % 2 == 0 else '#fafafa'};">
        <td style="padding:14px 20px;font-weight:500;border-bottom:1px solid #f3f4f6;color:#374151;">{r.feature}</td>
        <td style="padding:14px 20px;text-align:center;border-bottom:1px solid #f3f4f6;color:#059669;font-weight:600;background:{_rgba(o, 0.03)};">{_ours_cell(r.ours)}</td>
        <td style="padding:14px 20px;text-align:center;border-bottom:1px solid #f3f4f6;color:#9ca3af;">{icons.CROSS_BADGE if _MARK.match(r.theirs) else r.theirs}</td>
      </tr>"""
        for i, r in enumerate(b.rows)
    )
    # Titre produit : texte brut des options
    title = escape_html(o.product_title)
    return f"""{heading}
<div style="margin:24px 0;overflow-x:auto;border-radius:14px;border:1px solid #e5e7eb;box-shadow:0 2px 8px rgba(0,0,0,0.05);-webkit-overflow-scrolling:touch;">
  <table style="width:100%;border-collapse:collapse;font-size:1rem;min-width:320px;">
    <thead>
      <tr>
        <th style="padding:16px 20px;text-align:left;font-weight:600;background:#f9fafb;color:#6b7280;border-bottom:2px solid #e5e7eb;font-size:0.85rem;text-transform:uppercase;letter-spacing:0.05em;"></th>
        <th style="padding:16px 20px;text-align:center;background:{o.accent};color:#fff;border-bottom:2px solid {o.accent};font-weight:700;">
          <div>{title}</div>
          <div style="font-size:0.7rem;font-weight:600;opacity:0.85;margin-top:3px;">★ Best Choice</div>
        </th>
        <th style="padding:16px 20px;text-align:center;background:#f9fafb;color:#9ca3af;border-bottom:2px solid #e5e7eb;font-weight:600;">Others</th>
      </tr>
    </thead>
    <tbody>
      {rows}
    </tbody>
  </table>
</div>"""


def render_pros_cons(b: ProsConsBlock, o: RenderOptions) -> str:
    pros = "".join(
        f"""<li style="padding:7px 0 7px 22px;position:relative;font-size:1rem;color:#374151;line-height:1.5;">
        <span style="position:absolute;left:0;top:10px;color:#059669;">✓</span> {p}
      </li>"""
        for p in b.pros
    )
    cons = "".join(
        f"""<li style="padding:7px 0 7px 22px;position:relative;font-size:1rem;color:#6b7280;line-height:1.5;">
        <span style="position:absolute;left:0;top:10px;">–</span> {c}
      </li>"""
        for c in b.cons
    )
    return f"""<div style="display:grid;grid-template-columns:1fr 1fr;gap:16px;margin:32px 0;" class="adv-proscons-grid">
  <div style="background:#f0fdf4;border:1px solid #bbf7d0;border-radius:12px;padding:22px;">
    <h3 style="font-size:1.05rem;font-weight:700;color:#059669;margin:0 0 14px;display:flex;align-items:center;gap:8px;">
      {icons.CHECK_BADGE} What We Love
    </h3>
    <ul style="list-style:none;padding:0;margin:0;">
      {pros}
    </ul>
  </div>
  <div style="background:#fafafa;border:1px solid #e5e7eb;border-radius:12px;padding:22px;">
    <h3 style="font-size:1.05rem;font-weight:700;color:#6b7280;margin:0 0 14px;display:flex;align-items:center;gap:8px;">
      {icons.CROSS_BADGE} Worth Noting
    </h3>
    <ul style="list-style:none;padding:0;margin:0;">
      {cons}
    </ul>
  </div>
</div>"""


def render_timeline(b: TimelineBlock, o: RenderOptions) -> str:
    heading = (
        f'<h2 style="font-size:1.5rem;font-weight:700;margin:0 0 24px;text-align:center;font-family:inherit;color:#111827;">{b.heading}</h2>'
        if b.heading else ""
    )
    cols = max(min(len(b.steps), 4), 1)
    steps = "".join(
        f"""<div style="text-align:center;">
      <div style="width:40px;height:40px;border-radius:50%;background:{o.accent};color:#fff;display:flex;align-items:center;justify-content:center;font-weight:700;font-size:1rem;margin:0 auto 12px;box-shadow:0 4px 10px {_rgba(o, 0.25)};">{i}</div>
      <div style="font-size:0.75rem;text-transform:uppercase;letter-spacing:1px;color:{o.accent};font-weight:700;margin-bottom:6px;">{s.label}</div>
      <div style="font-weight:700;font-size:1rem;margin-bottom:6px;color:#111827;">{s.headline}</div>
      <div style="font-size:0.9rem;color:#6b7280;line-height:1.55;">{s.body}</div>
    </div>"""
        for i, s in enumerate(b.steps, start=1)
    )
    return f"""<div class="adv-timeline-wrapper" style="margin:44px 0;padding:32px 24px;background:linear-gradient(135deg,#fafafa 0%,#f5f5f5 100%);border-radius:16px;border:1px solid #f0f0f0;">
  {heading}
  <div class="adv-timeline-grid" style="display:grid;grid-template-columns:repeat({cols},1fr);gap:24px;">
    {steps}
  </div>
</div>"""


def render_faq(b: FAQBlock, o: RenderOptions) -> str:
    heading = (
        f'<h2 style="font-size:1.9rem;font-weight:800;margin:0 0 24px;font-family:inherit;color:#111827;">{b.heading}</h2>'
        if b.heading else ""
    )
    items = "".join(
        f"""
  <details style="margin-bottom:8px;border:1px solid #e5e7eb;border-radius:10px;overflow:hidden;">
    <summary style="padding:18px 22px;font-weight:600;font-size:1.05rem;cursor:pointer;background:#fff;list-style:none;display:flex;justify-content:space-between;align-items:center;color:#1f2937;">
      {item.question}
      <span style="font-size:18px;color:{o.accent};flex-shrink:0;margin-left:12px;font-weight:400;">+</span>
    </summary>
    <div style="padding:0 22px 18px;font-size:1rem;color:#4b5563;line-height:1.75;background:#fff;border-top:1px solid #f3f4f6;">
      {item.answer}
    </div>
  </details>
  """
        for item in b.items
    )
    return f"""<div style="margin:44px 0;">
  {heading}
  {items}
</div>"""


def render_feature_list(b: FeatureListBlock, o: RenderOptions) -> str:
    heading = (
        f'<h3 style="font-size:1.45rem;font-weight:700;margin:0 0 16px;font-family:inherit;color:#111827;">{b.heading}</h3>'
        if b.heading else ""
    )
    check = icons.check(o.accent)
    items = "".join(
        f"""
    <li style="display:flex;align-items:flex-start;gap:10px;padding:11px 0;border-bottom:1px solid #f9fafb;font-size:1.05rem;color:#374151;line-height:1.55;">
      {check}
      <span>{item}</span>
    </li>
    """
        for item in b.items
    )
    return f"""<div style="margin:28px 0;">
  {heading}
  <ul style="list-style:none;padding:0;margin:0;display:flex;flex-direction:column;gap:2px;">
    {items}
  </ul>
</div>"""


# ── Offre ────────────────────────────────────────────────────────────────────

def render_guarantee(b: GuaranteeBlock, o: RenderOptions) -> str:
    if b.badges:
        badges = "".join(
            f"""<div style="display:flex;flex-direction:column;align-items:center;gap:8px;text-align:center;">
    <span style="font-size:28px;">{badge.icon}</span>
    <span style="font-size:0.82rem;font-weight:600;color:#374151;line-height:1.3;">{badge.label}</span>
  </div>"""
            for badge in b.badges
        )
        return f"""<div class="adv-guarantee-badges" style="display:flex;justify-content:center;gap:28px;padding:28px 20px;margin:24px 0;background:{_rgba(o, 0.04)};border-radius:14px;border:1px solid {_rgba(o, 0.1)};flex-wrap:wrap;">
  {badges}
</div>"""
    return f"""<div style="display:flex;align-items:center;justify-content:center;gap:10px;padding:20px 24px;margin:24px 0;background:#f0fdf4;border-radius:12px;border:1px solid #bbf7d0;">
  {icons.SHIELD}
  <p style="font-size:1rem;color:#059669;margin:0;font-weight:600;">{b.text}</p>
</div>"""


_POINTER = re.compile(r"\s*👉\s*$")


def render_offer_box(b: OfferBoxBlock, o: RenderOptions) -> str:
    button = _POINTER.sub("", b.button_text).strip()
    href   = o.product_href()
    discount = (
        f'<div style="display:inline-flex;align-items:center;background:{o.accent};color:#fff;font-size:0.8rem;font-weight:700;padding:4px 14px;border-radius:99px;margin-bottom:14px;letter-spacing:0.05em;">{b.discount}</div>'
        if b.discount else ""
    )

    if b.layout == "horizontal":
        headline  = f'<div style="font-size:1.15rem;font-weight:700;color:#111827;margin-bottom:6px;">{b.headline}</div>' if b.headline else ""
        subtext   = f'<p style="font-size:1rem;color:#4b5563;margin:0;line-height:1.5;">{b.subtext}</p>' if b.subtext else ""
        guarantee = (
            f'<div style="display:flex;align-items:center;gap:5px;margin-top:10px;font-size:0.875rem;color:#059669;font-weight:600;">{icons.SHIELD} {b.guarantee}</div>'
            if b.guarantee else ""
        )
        return f"""<div class="adv-offer-box" style="margin:36px 0;padding:28px 32px;border:2px solid {_rgba(o, 0.15)};border-radius:16px;background:{_rgba(o, 0.03)};display:flex;align-items:center;justify-content:space-between;gap:24px;flex-wrap:wrap;">
  <div style="flex:1;min-width:200px;">
    {discount}
    {headline}
    {subtext}
    {guarantee}
  </div>
  <a href="{href}" style="display:inline-flex;align-items:center;justify-content:center;padding:15px 32px;background:{o.accent};color:#fff;text-decoration:none;border-radius:10px;font-weight:700;font-size:1.05rem;white-space:nowrap;box-shadow:0 4px 16px {_rgba(o, 0.3)};">{button}</a>
</div>"""

    headline  = f'<h3 style="font-size:1.5rem;font-weight:800;color:#111827;margin:0 0 10px;line-height:1.25;">{b.headline}</h3>' if b.headline else ""
    subtext   = f'<p style="font-size:1.05rem;color:#4b5563;margin:0 auto 22px;max-width:480px;line-height:1.6;">{b.subtext}</p>' if b.subtext else ""
    guarantee = (
        f'<div style="display:flex;align-items:center;gap:6px;margin-top:14px;justify-content:center;font-size:0.9rem;color:#059669;font-weight:600;">{icons.SHIELD} {b.guarantee}</div>'
        if b.guarantee else ""
    )
    urgency = f'<div style="margin-top:8px;font-size:0.875rem;color:#ef4444;font-weight:600;">🔥 {b.urgency}</div>' if b.urgency else ""
    return f"""<div class="adv-offer-box" style="margin:40px 0;padding:36px 32px;border:2px solid {_rgba(o, 0.15)};border-radius:18px;background:linear-gradient(135deg,{_rgba(o, 0.04)} 0%,{_rgba(o, 0.08)} 100%);text-align:center;">
  {discount}
  {headline}
  {subtext}
  <a href="{href}" class="adv-offer-btn" style="display:inline-flex;align-items:center;justify-content:center;padding:17px 44px;background:{o.accent};color:#fff;text-decoration:none;border-radius:10px;font-weight:700;font-size:1.1rem;box-shadow:0 4px 20px {_rgba(o, 0.35)};letter-spacing:0.01em;">{button}</a>
  {guarantee}
  {urgency}
</div>"""


def render_pricing_tiers(b: PricingTiersBlock, o: RenderOptions) -> str:
    cta  = b.cta_text or "Get My Order"
    href = o.product_href(b.product_handle)
    check = icons.tier_check(o.accent)

    cards = []
    for tier in b.tiers:
        hl = tier.highlight is True
        border = f"2px solid {o.accent}" if hl else "2px solid #e5e7eb"
        bg     = f"background:{_rgba(o, 0.04)};" if hl else "background:#fff;"
        shadow = f"box-shadow:0 8px 32px {_rgba(o, 0.18)};" if hl else "box-shadow:0 2px 12px rgba(0,0,0,0.06);"
        tag = (
            f'<div style="position:absolute;top:-14px;left:50%;transform:translateX(-50%);background:{o.accent};color:#fff;font-size:0.7rem;font-weight:800;letter-spacing:0.08em;padding:5px 14px;border-radius:99px;white-space:nowrap;">{tier.tag}</div>'
            if tier.tag else ""
        )
        features = "".join(
            f"""<div style="display:flex;align-items:center;gap:8px;font-size:0.85rem;color:#4b5563;margin-top:8px;">
        {check}
        {feat}
      </div>"""
            for feat in tier.features
        )
        original = (
            f'<span style="font-size:1rem;color:#9ca3af;text-decoration:line-through;">{tier.original_price}</span>'
            if tier.original_price else ""
        )
        per_unit = (
            f'<div style="font-size:0.8rem;color:{o.accent};font-weight:600;margin-bottom:16px;">{tier.per_unit}</div>'
            if tier.per_unit else '<div style="margin-bottom:16px;"></div>'
        )
        btn_bg    = o.accent if hl else "#fff"
        btn_color = "#fff" if hl else o.accent
        cards.append(f"""<div style="position:relative;border-radius:16px;padding:28px 24px;flex:1;min-width:0;{bg}border:{border};{shadow}transition:all 0.2s;">
  {tag}
  <div style="font-size:0.85rem;font-weight:700;color:#6b7280;text-transform:uppercase;letter-spacing:0.08em;margin-bottom:8px;">{tier.name}</div>
  <div style="display:flex;align-items:baseline;gap:8px;margin-bottom:4px;">
    <span style="font-size:2rem;font-weight:900;color:#111827;line-height:1;">{tier.sale_price}</span>
    {original}
  </div>
  {per_unit}
  {features}
  <a href="{href}" style="display:block;margin-top:20px;background:{btn_bg};color:{btn_color};border:2px solid {o.accent};text-align:center;padding:13px 20px;border-radius:10px;font-size:0.9rem;font-weight:700;text-decoration:none;letter-spacing:0.02em;transition:all 0.15s;">{cta}</a>
</div>""")

    heading = (
        f'<h2 style="text-align:center;font-size:1.6rem;font-weight:800;color:#111827;margin-bottom:32px;">{b.heading}</h2>'
        if b.heading else ""
    )
    guarantee = ""
    if b.guarantee:
        guarantee = f"""<div style="text-align:center;margin-top:20px;font-size:0.82rem;color:#6b7280;display:flex;align-items:center;justify-content:center;gap:6px;">
    {icons.shield_outline(o.accent)}
    {b.guarantee}
  </div>"""
    tier_cards = "\n".join(cards)
    return f"""<div style="margin:48px 0;">
  {heading}
  <div class="adv-pricing-grid" style="display:grid;grid-template-columns:repeat(3,1fr);gap:20px;align-items:start;">
    {tier_cards}
  </div>
  {guarantee}
</div>"""


# ── Dispatch ─────────────────────────────────────────────────────────────────

_RENDERERS: Dict[str, Callable[[Any, RenderOptions], str]] = {
    "headline":        render_headline,
    "text":            render_text,
    "image":           render_image,
    "cta":             render_cta,
    "socialProof":     render_social_proof,
    "stats":           render_stats,
    "testimonials":    render_testimonials,
    "numberedSection": render_numbered_section,
    "comparison":      render_comparison,
    "prosCons":        render_pros_cons,
    "timeline":        render_timeline,
    "guarantee":       render_guarantee,
    "divider":         render_divider,
    "note":            render_note,
    "faq":             render_faq,
    "asSeenIn":        render_as_seen_in,
    "authorByline":    render_author_byline,
    "featureList":     render_feature_list,
    "offerBox":        render_offer_box,
    "comments":        render_comments,
    "disclaimer":      render_disclaimer,
    "urgencyBanner":   render_urgency_banner,
    "pricingTiers":    render_pricing_tiers,
}


def render_one(block: Any, options: Optional[RenderOptions] = None) -> str:
    """Un bloc (typé ou dict wire) → fragment HTML. Bloc irrécupérable → ""."""
    options = options or RenderOptions()
    typed = block if isinstance(block, BaseBlock) else coerce_block(block)
    if typed is None:
        return ""
    renderer = _RENDERERS.get(typed.type)
    if renderer is None:
        log.warning("Pas de renderer pour le bloc %s (%s)", typed.id, typed.type)
        return ""
    return renderer(typed, options)


def render(blocks: Iterable[Any], options: Optional[RenderOptions] = None) -> str:
    """Page complète : style + script + <div class="adv-content"> (fragments dans l'ordre)."""
    options = options or RenderOptions()
    fragments: List[str] = [render_one(b, options) for b in blocks]
    main_html = "\n".join(f for f in fragments if f)
    return f"""{PAGE_STYLE}
{PAGE_SCRIPT}
<div class="adv-content" style="{CONTENT_STYLE}">
{main_html}
</div>"""
