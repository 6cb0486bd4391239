"""Exceptions advertorial_builder — une racine, une sous-classe par surface en échec."""


class AdvertorialError(Exception):
    """Racine de toutes les erreurs du package."""


class ConfigurationError(AdvertorialError):
    """Configuration manquante (clé API, boutique Shopify…)."""


class ModelCallError(AdvertorialError):
    """Appel au modèle de langage en échec (réseau, auth, quota)."""


class MalformedResponse(AdvertorialError):
    """Réponse du modèle inexploitable : pas de texte, JSON invalide, pas un tableau."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = (raw or "")[:500]


class PublishError(AdvertorialError):
    """Publication Shopify refusée (userErrors, page absente, HTTP en erreur)."""
