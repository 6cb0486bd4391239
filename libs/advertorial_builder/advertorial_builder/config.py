"""
Configuration via variables d'environnement — lues à l'appel, jamais à l'import.

ANTHROPIC_API_KEY        clé API (requise pour la génération IA)
ADVERTORIAL_MODEL        modèle Claude (défaut claude-sonnet-4-6)
ADVERTORIAL_MAX_TOKENS   budget de sortie (défaut 8000)
ADVERTORIAL_ACCENT_COLOR couleur d'accent par défaut du rendu (#000000)
SHOPIFY_SHOP             ex. ma-boutique.myshopify.com
SHOPIFY_ACCESS_TOKEN     token Admin API
SHOPIFY_API_VERSION      défaut 2024-10
"""
import os

from .errors import ConfigurationError

DEFAULT_MODEL        = "claude-sonnet-4-6"
DEFAULT_MAX_TOKENS   = 8000
DEFAULT_ACCENT_COLOR = "#000000"
DEFAULT_API_VERSION  = "2024-10"


def anthropic_api_key(required: bool = True) -> str:
    key = os.getenv("ANTHROPIC_API_KEY", "")
    if required and not key:
        raise ConfigurationError("ANTHROPIC_API_KEY non configurée")
    return key


def model_name() -> str:
    return os.getenv("ADVERTORIAL_MODEL") or DEFAULT_MODEL


def max_tokens() -> int:
    raw = os.getenv("ADVERTORIAL_MAX_TOKENS")
    if not raw:
        return DEFAULT_MAX_TOKENS
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"ADVERTORIAL_MAX_TOKENS invalide : {raw!r}")


def accent_color() -> str:
    return os.getenv("ADVERTORIAL_ACCENT_COLOR") or DEFAULT_ACCENT_COLOR


def shopify_settings() -> dict:
    shop  = os.getenv("SHOPIFY_SHOP", "")
    token = os.getenv("SHOPIFY_ACCESS_TOKEN", "")
    if not shop or not token:
        raise ConfigurationError("SHOPIFY_SHOP / SHOPIFY_ACCESS_TOKEN non configurés")
    return {
        "shop":         shop,
        "access_token": token,
        "api_version":  os.getenv("SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
    }
