"""Tests renderer — dispatch par type, échappement des attributs, dégradation gracieuse."""
import pytest

from advertorial_builder.blocks import (
    AuthorBylineBlock, ComparisonBlock, ComparisonRow, FAQBlock, FAQItem, HeadlineBlock,
    NumberedSectionBlock, OfferBoxBlock, TestimonialItem, TestimonialsBlock, TextBlock,
    UrgencyBannerBlock,
)
from advertorial_builder.editor import move_block
from advertorial_builder.factory import BLOCK_CATALOG, create_default
from advertorial_builder.generator import generate
from advertorial_builder.renderer import (
    PAGE_SCRIPT, PAGE_STYLE, RenderOptions, escape_attr, hex_to_rgba, render, render_one,
)
from advertorial_builder.renderer.html import initials

OPTS = RenderOptions(accent_color="#6366f1", product_title="Glow Serum", product_handle="glow-serum")


# ── Helpers CSS ───────────────────────────────────────────────────────────────

def test_hex_to_rgba():
    assert hex_to_rgba("#6366f1", 0.1) == "rgba(99,102,241,0.1)"
    assert hex_to_rgba("#abc", 0.5) == "rgba(170,187,204,0.5)"
    assert hex_to_rgba("000000", 1) == "rgba(0,0,0,1)"


def test_hex_to_rgba_malformed_falls_back():
    assert hex_to_rgba("red", 0.2) == "rgba(99,102,241,0.2)"
    assert hex_to_rgba("", 0.3) == "rgba(99,102,241,0.3)"
    assert hex_to_rgba("#12345", 0.3) == "rgba(99,102,241,0.3)"


def test_escape_attr():
    assert escape_attr('a"b\'c') == "a&quot;b&#039;c"


# ── Page ──────────────────────────────────────────────────────────────────────

def test_render_wraps_style_script_content():
    html = render([HeadlineBlock(id="h", text="Hi")], OPTS)
    assert html.startswith(PAGE_STYLE)
    assert html.index(PAGE_SCRIPT) < html.index('<div class="adv-content"')
    assert html.rstrip().endswith("</div>")


def test_minimal_scenario_render_order():
    html = render(generate("Glow Serum", "", "minimal", "Pain"), OPTS)
    assert html.count("<h1") == 1
    h1 = html.index("<h1")
    assert "Glow Serum" in html[h1:html.index("</h1>")]
    assert h1 < html.index('class="adv-text"') < html.index('class="adv-disclaimer"')


def test_unknown_block_leaves_no_trace():
    known = {"type": "headline", "id": "h", "text": "Hi", "size": "large"}
    assert render([{"type": "totally-unknown", "id": "x"}, known], OPTS) == render([known], OPTS)
    assert render_one({"type": "totally-unknown"}, OPTS) == ""


def test_render_order_follows_block_order():
    blocks = [TextBlock(id=str(i), content=f"para-{i}") for i in range(3)]
    html = render(move_block(blocks, 0, 2), OPTS)
    assert html.index("para-1") < html.index("para-2") < html.index("para-0")


def test_render_accepts_wire_dicts():
    html = render_one({"type": "headline", "id": "h", "text": "Wire", "size": "medium"}, OPTS)
    assert "<h2" in html and "Wire" in html


@pytest.mark.parametrize("block_type", [e.type for e in BLOCK_CATALOG])
def test_every_default_block_renders(block_type):
    assert render_one(create_default(block_type), OPTS).strip()


def test_render_default_options():
    assert "adv-content" in render([])


# ── Blocs ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("size,tag", [("large", "h1"), ("medium", "h2"), ("small", "h3")])
def test_headline_tags(size, tag):
    html = render_one(HeadlineBlock(id="h", text="T", size=size), OPTS)
    assert f"<{tag} " in html and f"</{tag}>" in html


def test_text_content_passes_through():
    html = render_one(TextBlock(id="t", content="<strong>bold</strong>"), OPTS)
    assert "<strong>bold</strong>" in html


def test_offer_box_href_and_pointer_stripped():
    block = OfferBoxBlock(id="o", headline="Deal", subtext="", button_text="GET YOURS NOW 👉")
    html = render_one(block, RenderOptions(product_handle='glow"serum'))
    assert 'href="/products/glow&quot;serum"' in html
    assert "👉" not in html
    assert ">GET YOURS NOW</a>" in html


def test_offer_box_optional_rows_omitted():
    html = render_one(OfferBoxBlock(id="o", headline="Deal", button_text="Buy"), OPTS)
    assert "🔥" not in html
    html = render_one(OfferBoxBlock(id="o", headline="Deal", button_text="Buy", urgency="Ends soon"), OPTS)
    assert "🔥 Ends soon" in html


def test_urgency_banner_prefix_not_duplicated():
    html = render_one(UrgencyBannerBlock(id="u", text="breaking: Stock low", style="breaking"), OPTS)
    assert html.count("BREAKING:") == 1
    assert "Stock low" in html
    trending = render_one(UrgencyBannerBlock(id="u", text="Hot"), OPTS)
    assert "📈 TRENDING:" in trending


def test_numbered_section_image():
    block = NumberedSectionBlock(id="n1", number="01", label="L", headline="H", body="B", image_label="Pic")
    html = render_one(block, OPTS)
    assert "Pic" in html and "Add a relevant visual here" in html and "220px" in html
    assert "adv-img-placeholder" not in render_one(
        NumberedSectionBlock(id="n2", number="02", label="L", headline="H", body="B"), OPTS
    )


def test_comparison_header_escapes_title():
    block = ComparisonBlock(id="c", rows=[ComparisonRow(feature="Price", ours="✓", theirs="✗")])
    html = render_one(block, RenderOptions(product_title="A & <B>"))
    assert "<div>A &amp; &lt;B&gt;</div>" in html
    assert ">Price<" in html
    assert "<svg" in html


def test_author_byline():
    block = AuthorBylineBlock(id="a", author="Jamie L.", role="Writer", date="March 9, 2026",
                              publication_name="Real Life", view_count="41,293 views",
                              live_viewers="312 reading now")
    html = render_one(block, OPTS)
    assert "Written By: Jamie L." in html
    assert "Writer · March 9, 2026 · Real Life" in html
    assert "views views" not in html
    assert "312 reading now" in html and "reading now reading now" not in html


def test_author_byline_bare_counts_get_suffix():
    html = render_one(AuthorBylineBlock(id="a", author="X", date="d", view_count="1,000"), OPTS)
    assert "1,000 views" in html


def test_faq_uses_details():
    html = render_one(FAQBlock(id="f", items=[FAQItem(question="Q?", answer="A.")]), OPTS)
    assert "<details" in html and "<summary" in html and "Q?" in html


def test_testimonials_initials_and_stars():
    block = TestimonialsBlock(id="t", testimonials=[TestimonialItem(quote="q", name="sarah  m. jones", detail="d")])
    assert "SM" in render_one(block, OPTS)
    no_stars = render_one(block.model_copy(update={"show_stars": False}), OPTS)
    assert "#f59e0b" not in no_stars


def test_initials():
    assert initials("Sarah M.") == "SM"
    assert initials("") == ""


def test_pricing_tiers_uses_block_handle_then_options():
    tiers = {"type": "pricingTiers", "id": "p", "productHandle": "own",
             "tiers": [{"name": "1 Bottle", "originalPrice": "$59", "salePrice": "$39", "features": []}]}
    assert 'href="/products/own"' in render_one(tiers, OPTS)
    assert 'href="/products/glow-serum"' in render_one({**tiers, "productHandle": ""}, OPTS)
    assert "Get My Order" in render_one(tiers, OPTS)
