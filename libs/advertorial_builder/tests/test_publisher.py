"""Tests publication Shopify — requests.post mocké."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from advertorial_builder.errors import ConfigurationError, PublishError
from advertorial_builder.publisher import ShopifyClient, page_handle


def _response(payload, status_error=None):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.side_effect = status_error
    return resp


@pytest.fixture
def shop():
    return ShopifyClient("demo.myshopify.com", "shpat_test", api_version="2024-10")


def test_page_handle():
    assert page_handle("Glow Serum: The Solution Thousands Were Waiting For!") == \
        "glow-serum-the-solution-thousands-were-waiting-for"
    assert len(page_handle("x" * 80)) == 50


def test_endpoint(shop):
    assert shop.endpoint == "https://demo.myshopify.com/admin/api/2024-10/graphql.json"


def test_from_env(monkeypatch):
    monkeypatch.setenv("SHOPIFY_SHOP", "env.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "tok")
    monkeypatch.delenv("SHOPIFY_API_VERSION", raising=False)
    client = ShopifyClient.from_env()
    assert client.shop == "env.myshopify.com"
    assert client.access_token == "tok"
    assert client.api_version == "2024-10"


def test_from_env_missing(monkeypatch):
    monkeypatch.delenv("SHOPIFY_SHOP", raising=False)
    monkeypatch.delenv("SHOPIFY_ACCESS_TOKEN", raising=False)
    with pytest.raises(ConfigurationError):
        ShopifyClient.from_env()


# ── Catalogue ─────────────────────────────────────────────────────────────────

def test_fetch_products(shop):
    payload = {"data": {"products": {"edges": [
        {"node": {"id": "gid://shopify/Product/1", "title": "Glow Serum", "handle": "glow-serum",
                  "description": "Vitamin C", "featuredImage": {"url": "https://cdn/x.jpg"}}},
        {"node": {"id": "gid://shopify/Product/2", "title": "Bare", "handle": "bare",
                  "description": None, "featuredImage": None}},
    ]}}}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)) as post:
        products = shop.fetch_products(first=10)

    assert [p.handle for p in products] == ["glow-serum", "bare"]
    assert products[0].image == "https://cdn/x.jpg"
    assert products[1].description == ""
    assert products[1].image is None

    kwargs = post.call_args.kwargs
    assert post.call_args.args[0] == shop.endpoint
    assert kwargs["headers"]["X-Shopify-Access-Token"] == "shpat_test"
    assert kwargs["json"]["variables"] == {"first": 10}
    assert kwargs["timeout"] == 15


# ── Publication ───────────────────────────────────────────────────────────────

def test_create_page(shop):
    payload = {"data": {"pageCreate": {
        "page": {"id": "gid://shopify/Page/9", "onlineStoreUrl": "https://demo/pages/glow"},
        "userErrors": [],
    }}}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)) as post:
        page = shop.create_page("Glow Serum Advertorial", "<div>body</div>")

    assert page.id == "gid://shopify/Page/9"
    assert page.url == "https://demo/pages/glow"
    page_input = post.call_args.kwargs["json"]["variables"]["page"]
    assert page_input["handle"] == "glow-serum-advertorial"
    assert page_input["body"] == "<div>body</div>"
    assert page_input["isPublished"] is True
    assert page_input["publishDate"]


def test_create_page_explicit_handle(shop):
    payload = {"data": {"pageCreate": {"page": {"id": "p"}, "userErrors": []}}}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)) as post:
        page = shop.create_page("Title", "<p/>", handle="custom")
    assert post.call_args.kwargs["json"]["variables"]["page"]["handle"] == "custom"
    assert page.url == ""


def test_create_page_user_errors(shop):
    payload = {"data": {"pageCreate": {"page": None, "userErrors": [
        {"field": ["handle"], "message": "Handle has already been taken"},
    ]}}}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)):
        with pytest.raises(PublishError, match="already been taken"):
            shop.create_page("Title", "<p/>")


def test_create_page_no_page(shop):
    payload = {"data": {"pageCreate": {"page": None, "userErrors": []}}}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)):
        with pytest.raises(PublishError):
            shop.create_page("Title", "<p/>")


def test_graphql_errors(shop):
    payload = {"errors": [{"message": "Access denied"}]}
    with patch("advertorial_builder.publisher.requests.post", return_value=_response(payload)):
        with pytest.raises(PublishError, match="Access denied"):
            shop.fetch_products()


def test_http_error(shop):
    resp = _response({}, status_error=requests.HTTPError("401 Unauthorized"))
    with patch("advertorial_builder.publisher.requests.post", return_value=resp):
        with pytest.raises(PublishError):
            shop.create_page("Title", "<p/>")


def test_network_error(shop):
    with patch("advertorial_builder.publisher.requests.post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(PublishError):
            shop.fetch_products()


@pytest.mark.parametrize("decode_error", [
    ValueError("Expecting value: line 1 column 1 (char 0)"),
    requests.JSONDecodeError("Expecting value", "<html>Maintenance</html>", 0),
])
def test_non_json_body(shop, decode_error):
    resp = _response(None)
    resp.json.side_effect = decode_error
    with patch("advertorial_builder.publisher.requests.post", return_value=resp):
        with pytest.raises(PublishError):
            shop.create_page("Title", "<p/>")
