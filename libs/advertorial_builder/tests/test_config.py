"""Tests config — lecture des variables d'environnement à l'appel."""
import pytest

from advertorial_builder import config
from advertorial_builder.errors import ConfigurationError
from advertorial_builder.renderer import RenderOptions


def test_api_key_required(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        config.anthropic_api_key()
    assert config.anthropic_api_key(required=False) == ""


def test_api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    assert config.anthropic_api_key() == "sk-test"


def test_model_defaults(monkeypatch):
    monkeypatch.delenv("ADVERTORIAL_MODEL", raising=False)
    monkeypatch.delenv("ADVERTORIAL_MAX_TOKENS", raising=False)
    assert config.model_name() == config.DEFAULT_MODEL
    assert config.max_tokens() == 8000


def test_max_tokens_invalid(monkeypatch):
    monkeypatch.setenv("ADVERTORIAL_MAX_TOKENS", "lots")
    with pytest.raises(ConfigurationError):
        config.max_tokens()


def test_accent_color_feeds_render_options(monkeypatch):
    monkeypatch.delenv("ADVERTORIAL_ACCENT_COLOR", raising=False)
    assert RenderOptions().accent_color == "#000000"
    monkeypatch.setenv("ADVERTORIAL_ACCENT_COLOR", "#6366f1")
    assert RenderOptions().accent_color == "#6366f1"
    assert RenderOptions(accentColor="#111111").accent_color == "#111111"


def test_shopify_settings(monkeypatch):
    monkeypatch.setenv("SHOPIFY_SHOP", "demo.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("SHOPIFY_API_VERSION", "2025-01")
    assert config.shopify_settings() == {
        "shop": "demo.myshopify.com", "access_token": "tok", "api_version": "2025-01",
    }
