"""Tests factory — palette Add Block et valeurs par défaut."""
import datetime

import pytest

from advertorial_builder.blocks import BLOCK_TYPES, dump_block
from advertorial_builder.factory import (
    BLOCK_CATALOG, catalog_entry, create_default, format_long_date,
)


def test_catalog_covers_every_type_once():
    types = [e.type for e in BLOCK_CATALOG]
    assert len(types) == len(set(types)) == 23
    assert set(types) == set(BLOCK_TYPES)


@pytest.mark.parametrize("block_type", list(BLOCK_TYPES))
def test_create_default_every_type(block_type):
    block = create_default(block_type, ids=lambda: "blk_fixed")
    assert block.type == block_type
    assert block.id == "blk_fixed"


def test_create_default_fresh_id_each_call():
    assert create_default("headline").id != create_default("headline").id


def test_create_default_unknown_type():
    with pytest.raises(ValueError):
        create_default("carousel")


def test_author_byline_default_date():
    block = create_default("authorByline", today=datetime.date(2026, 1, 7))
    assert block.date == "January 7, 2026"


def test_format_long_date():
    assert format_long_date(datetime.date(2025, 12, 25)) == "December 25, 2025"


def test_defaults_are_independent_copies():
    first = create_default("stats")
    first.stats[0].value = "99%"
    assert create_default("stats").stats[0].value != "99%"


def test_default_wire_shape():
    wire = dump_block(create_default("cta", ids=lambda: "b1"))
    assert wire["buttonText"] == "Shop Now"
    assert wire["type"] == "cta"


def test_catalog_entry_lookup():
    assert catalog_entry("faq").label == "FAQ"
    assert catalog_entry("nope") is None
