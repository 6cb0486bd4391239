"""Tests core — identifiants de blocs, échappement, résolution des textes."""
import itertools

import pytest

from advertorial_builder.core.copy import (
    IfDescription, escape_html, handleize, lookup, resolve, resolve_placeholders,
)
from advertorial_builder.core.ids import BlockIdGenerator, next_id, to_base36


# ── ids ───────────────────────────────────────────────────────────────────────

def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
    assert to_base36(1000) == "rs"


def test_to_base36_negative_raises():
    with pytest.raises(ValueError):
        to_base36(-1)


def test_generator_format_with_fixed_clock():
    gen = BlockIdGenerator(clock=lambda: 1.0, counter=itertools.count(1))
    assert gen.next_id() == "blk_rs_1"
    assert gen() == "blk_rs_2"


def test_generator_unique_within_same_millisecond():
    gen = BlockIdGenerator(clock=lambda: 1_700_000_000.0)
    ids = [gen() for _ in range(1000)]
    assert len(set(ids)) == 1000


def test_default_next_id_unique():
    assert next_id() != next_id()
    assert next_id().startswith("blk_")


def test_generators_share_process_counter():
    a = BlockIdGenerator(clock=lambda: 1.0)
    b = BlockIdGenerator(clock=lambda: 1.0)
    ids = [gen() for _ in range(50) for gen in (a, b, next_id)]
    assert len(set(ids)) == len(ids)


# ── escape_html ──────────────────────────────────────────────────────────────

def test_escape_html_five_chars():
    assert escape_html("<a href=\"x\">Tom's & Co</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom&#039;s &amp; Co&lt;/a&gt;"
    )


def test_escape_html_none_and_plain():
    assert escape_html(None) == ""
    assert escape_html("Glow Serum") == "Glow Serum"


# ── lookup / placeholders ────────────────────────────────────────────────────

TABLE = {
    "headline": "Meet {product}",
    "benefits": [{"label": "FAST", "headline": "Works in {days} days"}],
    "hook": ["one", "two"],
}


def test_lookup_nested_path():
    assert lookup("benefits.0.label", TABLE) == "FAST"
    assert lookup("hook.1", TABLE) == "two"


def test_lookup_missing_path():
    assert lookup("benefits.3.label", TABLE) == "[missing:benefits.3.label]"
    assert lookup("nope", TABLE) == "[missing:nope]"


def test_resolve_placeholders_context_and_refs():
    out = resolve_placeholders("{@headline} — {@hook.0}", {"product": "Glow"}, TABLE)
    assert out == "Meet Glow — one"


def test_resolve_placeholders_unknown_left_intact():
    assert resolve_placeholders("Hi {name}", {"product": "x"}) == "Hi {name}"


def test_resolve_placeholders_non_string_ref_is_missing():
    assert resolve_placeholders("{@benefits}", {"product": "x"}, TABLE) == "[missing:benefits]"


# ── resolve ──────────────────────────────────────────────────────────────────

def test_resolve_whole_ref_keeps_structure():
    out = resolve({"items": "@benefits"}, TABLE, {"days": "7"})
    assert out == {"items": [{"label": "FAST", "headline": "Works in 7 days"}]}


def test_resolve_if_description():
    slot = {"content": IfDescription("{description}!", "no description")}
    assert resolve(slot, TABLE, {"description": "Soft"}) == {"content": "Soft!"}
    assert resolve(slot, TABLE, {"description": ""}) == {"content": "no description"}


def test_resolve_lone_placeholder_none_drops_field():
    slot = {"type": "image", "src": "{product_image}", "label": "Hero"}
    assert resolve(slot, TABLE, {"product_image": None}) == {"type": "image", "label": "Hero"}
    assert resolve(slot, TABLE, {"product_image": "a.jpg"})["src"] == "a.jpg"


# ── handleize ────────────────────────────────────────────────────────────────

def test_handleize():
    assert handleize("Glow Serum (30 ml)") == "glow-serum-30-ml"
    assert handleize("  --Hello, World!--  ") == "hello-world"
    assert handleize("") == ""


def test_handleize_max_length():
    h = handleize("a " * 60)
    assert len(h) <= 50
    assert not h.endswith("-")
