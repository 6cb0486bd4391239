"""Tests editor — insertion, déplacement, duplication, suppression, édition de champs."""
import pytest

from advertorial_builder.blocks import CtaBlock, HeadlineBlock
from advertorial_builder.editor import (
    delete_block, duplicate_block, insert_block, move_block, move_down, move_up,
    swap_blocks, update_block,
)


def _page():
    return [
        {"type": "headline", "id": "a", "text": "A", "size": "large"},
        {"type": "text", "id": "b", "content": "B"},
        {"type": "divider", "id": "c"},
    ]


def _ids(blocks):
    return [b["id"] if isinstance(b, dict) else b.id for b in blocks]


# ── Insertion / suppression ───────────────────────────────────────────────────

def test_insert_at_end_by_default():
    page = insert_block(_page(), {"type": "divider", "id": "d"})
    assert _ids(page) == ["a", "b", "c", "d"]


def test_insert_at_index_and_at_len():
    assert _ids(insert_block(_page(), {"type": "divider", "id": "d"}, 0)) == ["d", "a", "b", "c"]
    assert _ids(insert_block(_page(), {"type": "divider", "id": "d"}, 3)) == ["a", "b", "c", "d"]


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        insert_block(_page(), {"type": "divider", "id": "d"}, 4)


def test_delete_block():
    page = _page()
    assert _ids(delete_block(page, 1)) == ["a", "c"]
    assert _ids(page) == ["a", "b", "c"]


def test_delete_out_of_range():
    with pytest.raises(IndexError):
        delete_block(_page(), 3)


# ── Déplacement ───────────────────────────────────────────────────────────────

def test_move_block_keeps_relative_order():
    assert _ids(move_block(_page(), 0, 2)) == ["b", "c", "a"]
    assert _ids(move_block(_page(), 2, 0)) == ["c", "a", "b"]


def test_move_up_down_edges_are_noops():
    assert _ids(move_up(_page(), 0)) == ["a", "b", "c"]
    assert _ids(move_down(_page(), 2)) == ["a", "b", "c"]
    assert _ids(move_up(_page(), 2)) == ["a", "c", "b"]
    assert _ids(move_down(_page(), 0)) == ["b", "a", "c"]


def test_swap_blocks():
    assert _ids(swap_blocks(_page(), 0, 2)) == ["c", "b", "a"]


# ── Duplication ───────────────────────────────────────────────────────────────

def test_duplicate_dict_block_new_id_after_original():
    page = duplicate_block(_page(), 0, ids=lambda: "copy")
    assert _ids(page) == ["a", "copy", "b", "c"]
    assert page[1]["text"] == "A"


def test_duplicate_is_deep_copy():
    page = [{"type": "featureList", "id": "f", "items": ["x"]}]
    page = duplicate_block(page, 0, ids=lambda: "f2")
    page[1]["items"].append("y")
    assert page[0]["items"] == ["x"]


def test_duplicate_typed_block_ids_unique():
    page = [HeadlineBlock(id="h1", text="Hi")]
    page = duplicate_block(page, 0)
    page = duplicate_block(page, 1)
    assert len(set(_ids(page))) == 3
    assert all(b.text == "Hi" for b in page)


# ── Édition de champs ─────────────────────────────────────────────────────────

def test_update_dict_block_ignores_type_and_id():
    page = update_block(_page(), 1, {"content": "New", "id": "zzz", "type": "headline"})
    assert page[1] == {"type": "text", "id": "b", "content": "New"}


def test_update_typed_block_snake_and_camel_keys():
    page = [CtaBlock(id="c1", headline="H", button_text="Buy")]
    page = update_block(page, 0, {"button_text": "Shop"})
    assert page[0].button_text == "Shop"
    page = update_block(page, 0, {"buttonText": "Order"})
    assert page[0].button_text == "Order"
    assert page[0].id == "c1"
