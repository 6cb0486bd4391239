"""Tests génération IA — parsing, réparation, appel Claude mocké, prompts."""
import json
from itertools import count
from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from advertorial_builder.ai import (
    ProductInfo, generate_via_model, parse_model_response, repair_blocks, strip_code_fences,
)
from advertorial_builder.errors import ConfigurationError, MalformedResponse, ModelCallError
from advertorial_builder.prompts import (
    BANNED_WORDS, DR_STRUCTURE, build_system_prompt, build_user_message, structure_from_archetype,
)
from advertorial_builder.style_presets import STYLE_PRESETS, get_preset, list_presets


def _ids():
    counter = count(1)
    return lambda: f"new_{next(counter)}"


def _client(text=None, side_effect=None, content=None):
    if content is None:
        content = [SimpleNamespace(type="text", text=text)]
    create = MagicMock(return_value=SimpleNamespace(content=content), side_effect=side_effect)
    return SimpleNamespace(messages=SimpleNamespace(create=create))


PRODUCT = ProductInfo(title="Glow Serum", description="Vitamin C serum", proof="4.8 stars, 12,400 reviews")


# ── Parsing ───────────────────────────────────────────────────────────────────

def test_strip_code_fences():
    assert strip_code_fences('```json\n[{"a": 1}]\n```') == '[{"a": 1}]'
    assert strip_code_fences("```\n[]\n```") == "[]"
    assert strip_code_fences("  [1]  ") == "[1]"


def test_parse_model_response_fenced():
    assert parse_model_response('```json\n[{"type": "divider", "id": "d"}]\n```') == [
        {"type": "divider", "id": "d"}
    ]


def test_parse_model_response_invalid_json():
    with pytest.raises(MalformedResponse) as exc:
        parse_model_response("Sure! Here is your page: [")
    assert exc.value.raw.startswith("Sure!")


def test_parse_model_response_not_a_list():
    with pytest.raises(MalformedResponse):
        parse_model_response('{"type": "headline"}')


def test_malformed_response_raw_truncated():
    with pytest.raises(MalformedResponse) as exc:
        parse_model_response("x" * 2000)
    assert len(exc.value.raw) == 500


# ── Réparation ────────────────────────────────────────────────────────────────

def test_repair_drops_items_without_type():
    items = [{"type": "divider", "id": "a"}, "oops", {"id": "b"}, {"type": "", "id": "c"}, {"type": 3}]
    assert repair_blocks(items, ids=_ids()) == [{"type": "divider", "id": "a"}]


def test_repair_replaces_missing_and_duplicate_ids():
    items = [
        {"type": "text", "id": "same"},
        {"type": "text", "id": "same"},
        {"type": "text"},
        {"type": "text", "id": ""},
        {"type": "text", "id": 42},
    ]
    out = repair_blocks(items, ids=_ids())
    assert [b["id"] for b in out] == ["same", "new_1", "new_2", "new_3", "new_4"]


def test_repair_keeps_unknown_types_and_fields():
    out = repair_blocks([{"type": "sparkle", "id": "s", "extra": 1}])
    assert out == [{"type": "sparkle", "id": "s", "extra": 1}]


def test_repair_does_not_mutate_input():
    items = [{"type": "text"}]
    repair_blocks(items, ids=_ids())
    assert items == [{"type": "text"}]


def test_repair_is_idempotent():
    items = [{"type": "text", "id": "a"}, {"type": "text", "id": "a"}, {"type": "note"}, None]
    once = repair_blocks(items, ids=_ids())
    assert repair_blocks(once, ids=_ids()) == once


# ── Appel modèle ──────────────────────────────────────────────────────────────

def test_generate_via_model_returns_repaired_blocks():
    payload = [
        {"type": "headline", "id": "h1", "text": "Doctors Recommend This", "size": "large"},
        {"type": "text", "content": "Intro"},
        "garbage",
    ]
    client = _client("```json\n" + json.dumps(payload) + "\n```")
    blocks = generate_via_model(PRODUCT, "A", client=client, ids=_ids())
    assert [b["type"] for b in blocks] == ["headline", "text"]
    assert blocks[1]["id"] == "new_1"


def test_generate_via_model_request(monkeypatch):
    monkeypatch.setenv("ADVERTORIAL_MODEL", "claude-test")
    monkeypatch.setenv("ADVERTORIAL_MAX_TOKENS", "1234")
    client = _client("[]")
    generate_via_model(PRODUCT, "A", client=client)

    kwargs = client.messages.create.call_args.kwargs
    assert kwargs["model"] == "claude-test"
    assert kwargs["max_tokens"] == 1234
    assert "Clinical Editorial" in kwargs["system"]
    user = kwargs["messages"][0]
    assert user["role"] == "user"
    assert "Product: Glow Serum" in user["content"]
    assert "glow-serum" in user["content"]
    assert "17-section" in user["content"]


def test_generate_via_model_custom_structure():
    client = _client("[]")
    generate_via_model(PRODUCT, "B", structure=["headline", "text", "disclaimer"], client=client)
    kwargs = client.messages.create.call_args.kwargs
    assert "Generate exactly 3 blocks" in kwargs["system"]
    assert "3-section" in kwargs["messages"][0]["content"]


def test_generate_via_model_without_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        generate_via_model(PRODUCT)


def test_generate_via_model_api_error():
    error = anthropic.APIConnectionError(request=httpx.Request("POST", "https://api.anthropic.com"))
    with pytest.raises(ModelCallError):
        generate_via_model(PRODUCT, client=_client(side_effect=error))


def test_generate_via_model_no_text_part():
    client = _client(content=[SimpleNamespace(type="tool_use", input={})])
    with pytest.raises(MalformedResponse):
        generate_via_model(PRODUCT, client=client)


def test_generate_via_model_not_json():
    with pytest.raises(MalformedResponse):
        generate_via_model(PRODUCT, client=_client("I can't help with that."))


def test_generate_via_model_unknown_preset():
    client = _client("[]")
    with pytest.raises(ValueError):
        generate_via_model(PRODUCT, "Z", client=client)
    client.messages.create.assert_not_called()


# ── Prompts & presets ─────────────────────────────────────────────────────────

def test_presets():
    assert set(STYLE_PRESETS) == {"A", "B", "C", "D"}
    assert list_presets()[0] == {"key": "A", "name": "Clinical Editorial"}
    with pytest.raises(ValueError):
        get_preset("E")


def test_dr_structure():
    assert len(DR_STRUCTURE) == 17
    assert DR_STRUCTURE[0].startswith("urgencyBanner")
    assert DR_STRUCTURE[-1].startswith("disclaimer")


def test_system_prompt_default_structure():
    preset = get_preset("C")
    prompt = build_system_prompt(preset)
    assert "Do not exceed 18." in prompt
    assert "News Exposé" in prompt
    assert "{headline_pattern}" not in prompt
    assert "BREAKING: The [Category] Industry" in prompt
    for word in BANNED_WORDS:
        assert word in prompt


def test_user_message_omits_empty_fields():
    product = ProductInfo(title="Glow Serum", handle="glow-serum")
    msg = build_user_message(product, "A", get_preset("A"))
    assert "Product: Glow Serum" in msg
    assert "Description:" not in msg
    assert "Proof:" not in msg
    assert "Product image URLs" not in msg
    assert "Product handle (use in pricingTiers.productHandle): glow-serum" in msg


def test_user_message_lists_images():
    product = ProductInfo(title="X", handle="x", image_urls=["https://a/1.jpg", "https://a/2.jpg"])
    msg = build_user_message(product, "D", get_preset("D"))
    assert "Product image URLs:\nhttps://a/1.jpg\nhttps://a/2.jpg" in msg


def test_structure_from_archetype():
    lines = structure_from_archetype("minimal")
    assert len(lines) == 3
    assert lines[0].startswith("headline (large)")
    assert lines[-1].startswith("disclaimer")
    with pytest.raises(ValueError):
        structure_from_archetype("nope")
