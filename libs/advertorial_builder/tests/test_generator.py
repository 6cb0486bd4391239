"""Tests générateur déterministe — archétypes × angles, échappement, slots conditionnels."""
import datetime
import itertools
import json

import pytest

from advertorial_builder.archetypes import ANGLES, ARCHETYPES, LONG_DISCLAIMER, SHORT_DISCLAIMER
from advertorial_builder.archetypes.common import numbered
from advertorial_builder.blocks import dump_blocks
from advertorial_builder.core.ids import BlockIdGenerator
from advertorial_builder.editor import duplicate_block
from advertorial_builder.generator import (
    build_context, generate, generate_page, generate_title, list_archetypes,
)

TODAY = datetime.date(2026, 3, 9)


def _types(blocks):
    return [b.type for b in blocks]


def _fixed_ids():
    return BlockIdGenerator(clock=lambda: 0.0, counter=itertools.count(1))


# ── Scénario minimal ──────────────────────────────────────────────────────────

def test_minimal_pain_scenario():
    blocks = generate("Glow Serum", "", "minimal", "Pain")
    assert _types(blocks) == ["headline", "text", "disclaimer"]
    assert "Glow Serum" in blocks[0].text
    assert blocks[0].size == "large"
    assert blocks[2].text == SHORT_DISCLAIMER


def test_default_archetype_and_angle():
    assert generate("X")[0].type == generate("X", archetype="story")[0].type
    assert generate_title("X") == generate_title("X", "story", "Pain")


def test_unknown_archetype_or_angle():
    with pytest.raises(ValueError):
        generate("X", archetype="carousel")
    with pytest.raises(ValueError):
        generate("X", archetype="story", angle="Fear")


# ── Totalité / ids / déterminisme ────────────────────────────────────────────

@pytest.mark.parametrize("archetype", list(ARCHETYPES))
@pytest.mark.parametrize("angle", ANGLES)
def test_every_archetype_angle_resolves(archetype, angle):
    blocks = generate("Glow Serum", "Hydrating serum", archetype, angle, today=TODAY)
    assert blocks
    wire = json.dumps(dump_blocks(blocks))
    assert "[missing:" not in wire
    assert "{product}" not in wire
    assert "{date}" not in wire
    assert len({b.id for b in blocks}) == len(blocks)


def test_deterministic_given_ids_and_date():
    a = generate("Glow Serum", "desc", "personal-story", "Desire", ids=_fixed_ids(), today=TODAY)
    b = generate("Glow Serum", "desc", "personal-story", "Desire", ids=_fixed_ids(), today=TODAY)
    assert dump_blocks(a) == dump_blocks(b)


def test_ids_injected():
    blocks = generate("X", archetype="minimal", ids=_fixed_ids())
    assert [b.id for b in blocks] == ["blk_0_1", "blk_0_2", "blk_0_3"]


def test_injected_generator_then_default_duplicate_keeps_ids_unique():
    blocks = generate("Glow", "", "minimal", "Pain", ids=BlockIdGenerator())
    page = duplicate_block(blocks, 2)
    assert len({b.id for b in page}) == len(page) == 4


# ── Échappement ──────────────────────────────────────────────────────────────

def test_title_and_description_escaped_once():
    blocks = generate("<Glow & Co>", "Best \"serum\" <b>ever</b>", "story-classic", "Pain")
    wire = json.dumps(dump_blocks(blocks))
    assert "&lt;Glow &amp; Co&gt;" in wire
    assert "<Glow" not in wire
    assert "&amp;amp;" not in wire
    assert "&lt;b&gt;ever&lt;/b&gt;" in wire


TRICKY_TITLE   = '<Glow> & "Co\'s"'
ESCAPED_TITLE  = "&lt;Glow&gt; &amp; &quot;Co&#039;s&quot;"


def _text_values(value):
    if isinstance(value, dict):
        for v in value.values():
            yield from _text_values(v)
    elif isinstance(value, list):
        for v in value:
            yield from _text_values(v)
    elif isinstance(value, str):
        yield value


@pytest.mark.parametrize("archetype", sorted(ARCHETYPES))
@pytest.mark.parametrize("angle", ANGLES)
def test_title_with_five_metacharacters_escaped_once(archetype, angle):
    blocks = generate(TRICKY_TITLE, "", archetype, angle)
    texts = list(_text_values(dump_blocks(blocks)))
    assert any(ESCAPED_TITLE in t for t in texts)
    for t in texts:
        assert "<Glow>" not in t
        assert TRICKY_TITLE not in t
        for double in ("&amp;lt;", "&amp;gt;", "&amp;amp;", "&amp;quot;", "&amp;#039;"):
            assert double not in t


def test_generate_title_uses_raw_title():
    assert generate_title("Glow & Co", "story", "Pain") == "Glow & Co: The Solution Thousands Were Waiting For"
    assert generate_title("Glow", "minimal") == "Glow Advertorial"


def test_build_context():
    ctx = build_context("Glow", "  Soft  ", None, TODAY)
    assert ctx["description"] == "Soft"
    assert ctx["description_break"] == "<br><br>Soft"
    assert ctx["date"] == "March 9, 2026"
    assert ctx["date_numeric"] == "3/9/2026"
    assert ctx["product_image"] is None
    assert build_context("Glow")["description_lead"] == ""


# ── Slots conditionnels ──────────────────────────────────────────────────────

def test_story_comparison_only_for_comparison_angle():
    assert "comparison" in _types(generate("X", archetype="story", angle="Comparison"))
    assert "comparison" not in _types(generate("X", archetype="story", angle="Pain"))
    assert "comparison" not in _types(generate("X", archetype="story", angle="Desire"))


def test_listicle_reason_count_per_angle():
    def reasons(angle):
        return _types(generate("X", archetype="listicle", angle=angle)).count("numberedSection")
    assert reasons("Pain") == 5
    assert reasons("Desire") == 6
    assert reasons("Comparison") == 5


def test_listicle_mid_offer_position():
    pain   = _types(generate("X", archetype="listicle", angle="Pain"))
    desire = _types(generate("X", archetype="listicle", angle="Desire"))
    first_offer = lambda types: types.index("offerBox")
    assert pain[:first_offer(pain)].count("numberedSection") == 2
    assert desire[:first_offer(desire)].count("numberedSection") == 3


def test_editorial_description_and_image():
    with_desc = generate("Glow", "Hydrating serum", "editorial", product_image="https://cdn.x/glow.jpg")
    texts = [b.content for b in with_desc if b.type == "text"]
    assert texts[0].startswith("Hydrating serum<br><br>")
    images = [b for b in with_desc if b.type == "image"]
    assert images[0].src == "https://cdn.x/glow.jpg"

    without = generate("Glow", "", "editorial")
    assert "Hydrating" not in json.dumps(dump_blocks(without))
    assert [b for b in without if b.type == "image"][0].src is None


def test_byline_date_filled():
    blocks = generate("X", archetype="listicle", today=TODAY)
    assert blocks[0].type == "authorByline"
    assert blocks[0].date == "March 9, 2026"


def test_long_disclaimer_closes_story():
    assert generate("X", archetype="story")[-1].text == LONG_DISCLAIMER


def test_numbered_slot_label_default_and_override():
    assert numbered(0, "benefits")["label"] == "@benefits.0.label"
    slot = numbered(2, "reasons", label="REASON 3")
    assert slot["label"] == "REASON 3"
    assert slot["number"] == "03"
    assert slot["imageHint"] == "@reasons.2.imgHint"


# ── Page / catalogue ─────────────────────────────────────────────────────────

def test_generate_page():
    page = generate_page("Glow Serum", archetype="minimal", angle="Desire")
    assert page.title == "Glow Serum Advertorial"
    assert "Glow Serum" in page.blocks[0].text


def test_list_archetypes():
    listed = list_archetypes()
    assert len(listed) == 12
    assert listed[0]["id"] == "story"
    assert {a["default_angle"] for a in listed} <= set(ANGLES)
