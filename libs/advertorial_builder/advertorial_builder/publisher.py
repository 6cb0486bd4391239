"""
Module PUBLISHER — Catalogue produits + publication de pages Shopify
Admin GraphQL API : products (lecture) + pageCreate (publication immédiate)
"""
import datetime
import logging
from typing import Any, Dict, List, NamedTuple, Optional

import requests

from . import config
from .core.copy import handleize
from .errors import PublishError

log = logging.getLogger(__name__)

_GRAPHQL_URL = "https://{shop}/admin/api/{version}/graphql.json"
_TIMEOUT     = 15

_PRODUCTS_QUERY = """
query getProducts($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        handle
        description
        featuredImage { url }
      }
    }
  }
}"""

_PAGE_CREATE = """
mutation pageCreate($page: PageCreateInput!) {
  pageCreate(page: $page) {
    page { id title handle onlineStoreUrl isPublished publishedAt }
    userErrors { field message }
  }
}"""


class Product(NamedTuple):
    id: str
    title: str
    handle: str
    description: str
    image: Optional[str]


class PublishedPage(NamedTuple):
    id: str
    url: str


def page_handle(title: str) -> str:
    """Handle de page : minuscules, non-alphanumériques → '-', 50 caractères max."""
    return handleize(title, max_length=50)


class ShopifyClient:
    """Client Admin GraphQL minimal (un POST par opération, pas de retry)."""

    def __init__(self, shop: str, access_token: str, api_version: str = config.DEFAULT_API_VERSION):
        self.shop         = shop
        self.access_token = access_token
        self.api_version  = api_version

    @classmethod
    def from_env(cls) -> "ShopifyClient":
        """SHOPIFY_SHOP / SHOPIFY_ACCESS_TOKEN requis → sinon ConfigurationError."""
        return cls(**config.shopify_settings())

    @property
    def endpoint(self) -> str:
        return _GRAPHQL_URL.format(shop=self.shop, version=self.api_version)

    def _graphql(self, query: str, variables: Dict[str, Any]) -> dict:
        try:
            resp = requests.post(
                self.endpoint,
                json={"query": query, "variables": variables},
                headers={
                    "X-Shopify-Access-Token": self.access_token,
                    "Content-Type": "application/json",
                },
                timeout=_TIMEOUT,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            log.error("Shopify GraphQL %s : %s", self.shop, e)
            raise PublishError(f"Appel Shopify échoué : {e}") from e
        except ValueError as e:
            # Corps non JSON (page de maintenance HTML…)
            log.error("Shopify GraphQL %s : réponse non JSON", self.shop)
            raise PublishError(f"Réponse Shopify illisible : {e}") from e

        if data.get("errors"):
            log.error("Shopify GraphQL errors=%s", data["errors"])
            raise PublishError(f"Erreurs GraphQL : {data['errors']}")
        return data.get("data") or {}

    # ── Catalogue ──────────────────────────────────────────────────────────

    def fetch_products(self, first: int = 50) -> List[Product]:
        """Produits de la boutique (titre, handle, description, image principale)."""
        data  = self._graphql(_PRODUCTS_QUERY, {"first": first})
        edges = (data.get("products") or {}).get("edges") or []
        return [
            Product(
                id=node["id"],
                title=node.get("title", ""),
                handle=node.get("handle", ""),
                description=node.get("description") or "",
                image=(node.get("featuredImage") or {}).get("url"),
            )
            for node in (edge["node"] for edge in edges)
        ]

    # ── Publication ────────────────────────────────────────────────────────

    def create_page(self, title: str, body_html: str, handle: Optional[str] = None) -> PublishedPage:
        """
        Crée et publie immédiatement une page. Le corps est la sortie du renderer,
        telle quelle. userErrors ou page absente → PublishError.
        """
        page_input = {
            "title":       title,
            "handle":      handle or page_handle(title),
            "body":        body_html,
            "isPublished": True,
            "publishDate": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }
        result = self._graphql(_PAGE_CREATE, {"page": page_input}).get("pageCreate") or {}

        user_errors = result.get("userErrors") or []
        if user_errors:
            messages = ", ".join(e.get("message", "") for e in user_errors)
            log.error("pageCreate refusé [%s] : %s", page_input["handle"], messages)
            raise PublishError(f"Création de page refusée : {messages}")

        page = result.get("page")
        if not page:
            raise PublishError("Création de page : aucune page renvoyée")

        log.info("Page publiée : %s (%s)", page["id"], page_input["handle"])
        return PublishedPage(id=page["id"], url=page.get("onlineStoreUrl") or "")
