"""Tests blocs — union discriminée, forme wire camelCase, validation tolérante."""
import pytest
from pydantic import ValidationError

from advertorial_builder.blocks import (
    BLOCK_TYPES, CtaBlock, HeadlineBlock, SocialProofBlock, StatsBlock,
    coerce_block, dump_block, dump_blocks, parse_block, parse_blocks,
)
from advertorial_builder.core.ids import next_id
from advertorial_builder.renderer import render


def test_registry_has_23_types():
    assert len(BLOCK_TYPES) == 23
    for type_name, cls in BLOCK_TYPES.items():
        assert cls.model_fields["type"].default == type_name


def test_parse_block_dispatches_on_type():
    block = parse_block({"type": "cta", "id": "b1", "headline": "Go", "subtext": "",
                         "buttonText": "Shop Now", "style": "inline"})
    assert isinstance(block, CtaBlock)
    assert block.button_text == "Shop Now"
    assert block.style == "inline"


def test_parse_block_unknown_type_raises():
    with pytest.raises(ValidationError):
        parse_block({"type": "totally-unknown", "id": "b1"})


def test_dump_block_uses_camel_case_and_drops_none():
    block = SocialProofBlock(id="b1", rating="4.9", review_count="2,847 reviews", customer_count="50,000+")
    assert dump_block(block) == {
        "type": "socialProof", "id": "b1", "rating": "4.9",
        "reviewCount": "2,847 reviews", "customerCount": "50,000+",
    }
    assert "subheadline" not in dump_block(HeadlineBlock(id="h", text="Hi"))


def test_parse_dump_blocks_preserve_order():
    data = [
        {"type": "headline", "id": "a", "text": "A", "size": "large"},
        {"type": "divider", "id": "b"},
        {"type": "text", "id": "c", "content": "C"},
    ]
    assert [b["id"] for b in dump_blocks(parse_blocks(data))] == ["a", "b", "c"]


def test_block_gets_id_when_missing():
    assert HeadlineBlock(text="x").id.startswith("blk_")


# ── coerce_block ──────────────────────────────────────────────────────────────

def test_coerce_block_passthrough_model():
    block = HeadlineBlock(id="h1", text="Hi")
    assert coerce_block(block) is block


def test_coerce_block_unknown_or_invalid_shape():
    assert coerce_block({"type": "totally-unknown", "id": "x"}) is None
    assert coerce_block({"id": "x"}) is None
    assert coerce_block({"type": 3}) is None
    assert coerce_block("headline") is None


def test_coerce_block_drops_bad_field_keeps_others():
    block = coerce_block({"type": "socialProof", "id": "b1", "rating": "4.9", "reviewCount": 123})
    assert isinstance(block, SocialProofBlock)
    assert block.rating == "4.9"
    assert block.review_count == ""


def test_coerce_block_bad_list_falls_back_to_default():
    block = coerce_block({"type": "stats", "id": "s1", "heading": "Numbers", "stats": "oops"})
    assert isinstance(block, StatsBlock)
    assert block.stats == []
    assert block.heading == "Numbers"


def test_coerce_block_bad_enum_falls_back_to_default():
    block = coerce_block({"type": "headline", "id": "h1", "text": "Hi", "size": "huge"})
    assert block.size == "large"
    assert block.text == "Hi"


def _counter_value():
    return int(next_id().rsplit("_", 1)[1])


def test_coerce_block_without_id_leaves_id_counter_alone():
    before = _counter_value()
    block = coerce_block({"type": "divider"})
    render([{"type": "headline", "text": "Hi"}, {"type": "headline", "text": "x", "size": "huge", "id": None}])
    assert block.id == ""
    assert _counter_value() == before + 1
