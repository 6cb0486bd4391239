"""Tests API — endpoints /advertorial via TestClient."""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from advertorial_builder.app import app
from advertorial_builder.errors import MalformedResponse, ModelCallError

client = TestClient(app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ── Rendu ─────────────────────────────────────────────────────────────────────

def test_render_page():
    r = client.post("/advertorial/render", json={
        "blocks": [
            {"type": "headline", "id": "h", "text": "Hello", "size": "large"},
            {"type": "mystery", "id": "m"},
        ],
        "options": {"accentColor": "#ff0000", "productHandle": "glow"},
    })
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<h1" in r.text and "Hello" in r.text
    assert "mystery" not in r.text


def test_render_one():
    r = client.post("/advertorial/render-one", json={
        "block": {"type": "cta", "id": "c", "headline": "Go", "subtext": "", "buttonText": "Buy"},
        "options": {"productHandle": "glow-serum"},
    })
    assert r.status_code == 200
    assert 'href="/products/glow-serum"' in r.text
    assert "<style>" not in r.text


# ── Génération ────────────────────────────────────────────────────────────────

def test_generate_minimal():
    r = client.post("/advertorial/generate", json={"product_title": "Glow Serum", "archetype": "minimal"})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Glow Serum Advertorial"
    assert [b["type"] for b in body["blocks"]] == ["headline", "text", "disclaimer"]


def test_generate_wire_keys_are_camel_case():
    r = client.post("/advertorial/generate", json={"product_title": "Glow Serum", "archetype": "story", "angle": "Desire"})
    assert r.status_code == 200
    byline = next(b for b in r.json()["blocks"] if b["type"] == "authorByline")
    assert "publicationName" in byline
    assert "publication_name" not in byline


@pytest.mark.parametrize("payload", [
    {"product_title": "X", "archetype": "nope"},
    {"product_title": "X", "archetype": "story", "angle": "Fear"},
])
def test_generate_unknown_archetype_or_angle(payload):
    assert client.post("/advertorial/generate", json=payload).status_code == 400


def test_generate_ai_ok():
    blocks = [{"type": "headline", "id": "h", "text": "AI", "size": "large"}]
    with patch("advertorial_builder.router.generate_via_model", return_value=blocks) as gen:
        r = client.post("/advertorial/generate-ai", json={"product": {"title": "Glow Serum"}, "style_preset": "B"})
    assert r.status_code == 200
    assert r.json() == {"blocks": blocks}
    product, preset, structure = gen.call_args.args
    assert product.title == "Glow Serum"
    assert preset == "B"
    assert structure is None


def test_generate_ai_with_archetype_structure():
    with patch("advertorial_builder.router.generate_via_model", return_value=[]) as gen:
        r = client.post("/advertorial/generate-ai", json={"product": {"title": "X"}, "archetype": "minimal"})
    assert r.status_code == 200
    assert len(gen.call_args.args[2]) == 3


def test_generate_ai_missing_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    r = client.post("/advertorial/generate-ai", json={"product": {"title": "X"}})
    assert r.status_code == 503


def test_generate_ai_unknown_preset():
    r = client.post("/advertorial/generate-ai", json={"product": {"title": "X"}, "style_preset": "Z"})
    assert r.status_code == 400


@pytest.mark.parametrize("error", [ModelCallError("timeout"), MalformedResponse("not json", raw="oops")])
def test_generate_ai_upstream_failure(error):
    with patch("advertorial_builder.router.generate_via_model", side_effect=error):
        r = client.post("/advertorial/generate-ai", json={"product": {"title": "X"}})
    assert r.status_code == 502


def test_generate_ai_malformed_exposes_raw_excerpt():
    error = MalformedResponse("JSON invalide", raw="Sure! " + "x" * 600)
    with patch("advertorial_builder.router.generate_via_model", side_effect=error):
        r = client.post("/advertorial/generate-ai", json={"product": {"title": "X"}})
    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["error"] == "JSON invalide"
    assert detail["raw"].startswith("Sure! ")
    assert len(detail["raw"]) == 500


# ── Validation ────────────────────────────────────────────────────────────────

def test_validate_ok():
    r = client.post("/advertorial/validate", json={"blocks": [
        {"type": "divider", "id": "a"},
        {"type": "note", "id": "b", "text": "Hi", "style": "info"},
    ]})
    assert r.json() == {"valid": True, "errors": []}


def test_validate_reports_index():
    r = client.post("/advertorial/validate", json={"blocks": [
        {"type": "divider", "id": "a"},
        {"type": "unknown", "id": "b"},
        {"type": "headline", "id": "c", "size": "huge"},
        {"type": "divider", "id": "a"},
    ]})
    body = r.json()
    assert body["valid"] is False
    assert [e["index"] for e in body["errors"]] == [1, 2, 3]


# ── Catalogue ─────────────────────────────────────────────────────────────────

def test_catalog():
    blocks = client.get("/advertorial/catalog").json()["blocks"]
    assert len(blocks) == 23
    faq = next(b for b in blocks if b["type"] == "faq")
    assert faq["label"] == "FAQ"
    assert "items" in faq["schema"]["properties"]


def test_catalog_default():
    r = client.get("/advertorial/catalog/offerBox/default")
    assert r.status_code == 200
    body = r.json()
    assert body["type"] == "offerBox"
    assert body["id"].startswith("blk_")
    assert "buttonText" in body


def test_catalog_default_unknown_type():
    assert client.get("/advertorial/catalog/sparkle/default").status_code == 404


def test_archetypes():
    body = client.get("/advertorial/archetypes").json()
    assert len(body["archetypes"]) == 12
    assert body["angles"] == ["Pain", "Desire", "Comparison"]
    assert [p["key"] for p in body["presets"]] == ["A", "B", "C", "D"]
