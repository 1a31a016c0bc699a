"""
Unit tests for ShopifyClient HTTP transport layer.

Tests domain normalization, base URL construction, REST calls and
error mapping to the transport exceptions.
"""
import pytest
from unittest.mock import MagicMock, patch

import httpx

from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.core.config import Settings
from aveconnect_shopify.core.exceptions import (
    ConfigurationError,
    ConnectionTimeoutError,
    TransportFailure,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_client(
    domain="test-store.myshopify.com",
    token="shpat_test",
    version="2025-07",
) -> ShopifyClient:
    """Create a ShopifyClient with explicit settings."""
    settings = Settings(
        shopify_store_domain=domain,
        shopify_admin_api_token=token,
        shopify_api_version=version,
    )
    return ShopifyClient(settings)


def _mock_response(status_code=200, json_data=None, text=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text if text is not None else ("{}" if json_data is None else "x")
    resp.json.return_value = json_data if json_data is not None else {}
    return resp


def _patch_httpx(response=None, side_effect=None):
    """Patch httpx.Client so ``client.request`` returns ``response``."""
    patcher = patch("aveconnect_shopify.clients.shopify_client.httpx.Client")
    mock_cls = patcher.start()
    http = MagicMock()
    if side_effect is not None:
        http.request.side_effect = side_effect
    else:
        http.request.return_value = response
    mock_cls.return_value.__enter__.return_value = http
    return patcher, mock_cls, http


# ---------------------------------------------------------------------------
# _normalize_store_domain
# ---------------------------------------------------------------------------

class TestNormalizeStoreDomain:
    """Tests for ShopifyClient._normalize_store_domain."""

    def test_none_returns_none(self):
        assert ShopifyClient._normalize_store_domain(None) is None

    def test_empty_string_returns_empty(self):
        assert ShopifyClient._normalize_store_domain("") == ""

    def test_bare_domain_appends_myshopify(self):
        assert ShopifyClient._normalize_store_domain("test-store") == "test-store.myshopify.com"

    def test_full_https_url_stripped(self):
        result = ShopifyClient._normalize_store_domain("https://test-store.myshopify.com")
        assert result == "test-store.myshopify.com"

    def test_http_url_and_trailing_slash_stripped(self):
        result = ShopifyClient._normalize_store_domain("http://test-store.myshopify.com/")
        assert result == "test-store.myshopify.com"

    def test_already_myshopify_untouched(self):
        result = ShopifyClient._normalize_store_domain("test-store.myshopify.com")
        assert result == "test-store.myshopify.com"


# ---------------------------------------------------------------------------
# _base_url
# ---------------------------------------------------------------------------

class TestBaseUrl:
    """Tests for ShopifyClient._base_url."""

    def test_versioned_admin_url(self):
        client = _make_client(domain="shop", version="2025-07")
        assert client._base_url() == "https://shop.myshopify.com/admin/api/2025-07"

    def test_missing_domain_raises(self):
        client = _make_client(domain=None)
        with pytest.raises(ConfigurationError):
            client._base_url()

    def test_missing_token_raises(self):
        client = _make_client(token=None)
        with pytest.raises(ConfigurationError):
            client._base_url()


# ---------------------------------------------------------------------------
# call_shopify
# ---------------------------------------------------------------------------

class TestCallShopify:
    """Tests for ShopifyClient.call_shopify."""

    def test_returns_json_body(self):
        patcher, _, http = _patch_httpx(_mock_response(200, {"products": []}))
        try:
            result = _make_client().call_shopify("GET", "/products.json", params={"limit": 5})
        finally:
            patcher.stop()

        assert result == {"products": []}
        kwargs = http.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://test-store.myshopify.com/admin/api/2025-07/products.json"
        assert kwargs["params"] == {"limit": 5}
        assert kwargs["headers"]["X-Shopify-Access-Token"] == "shpat_test"

    def test_path_without_leading_slash(self):
        patcher, _, http = _patch_httpx(_mock_response(200, {}))
        try:
            _make_client().call_shopify("GET", "orders/1.json")
        finally:
            patcher.stop()
        assert http.request.call_args.kwargs["url"].endswith("/2025-07/orders/1.json")

    def test_timeout_taken_from_settings(self):
        patcher, mock_cls, _ = _patch_httpx(_mock_response(200, {}))
        try:
            settings = Settings(
                shopify_store_domain="s",
                shopify_admin_api_token="t",
                shopify_request_timeout=7.5,
            )
            ShopifyClient(settings).call_shopify("GET", "/shop.json")
        finally:
            patcher.stop()
        mock_cls.assert_called_once_with(timeout=7.5)

    def test_http_error_status_raises(self):
        patcher, _, _ = _patch_httpx(_mock_response(422, text='{"errors":"bad"}'))
        try:
            with pytest.raises(TransportFailure) as exc_info:
                _make_client().call_shopify("POST", "/products.json", json={})
        finally:
            patcher.stop()
        assert exc_info.value.status_code == 422
        assert "bad" in exc_info.value.detail

    def test_empty_body_returns_empty_dict(self):
        patcher, _, _ = _patch_httpx(_mock_response(200, text=""))
        try:
            assert _make_client().call_shopify("DELETE", "/products/1.json") == {}
        finally:
            patcher.stop()

    def test_invalid_json_raises(self):
        resp = _mock_response(200, text="<html>")
        resp.json.side_effect = ValueError("no json")
        patcher, _, _ = _patch_httpx(resp)
        try:
            with pytest.raises(TransportFailure):
                _make_client().call_shopify("GET", "/products.json")
        finally:
            patcher.stop()

    def test_timeout_maps_to_connection_timeout(self):
        patcher, _, _ = _patch_httpx(side_effect=httpx.ReadTimeout("slow"))
        try:
            with pytest.raises(ConnectionTimeoutError):
                _make_client().call_shopify("GET", "/products.json")
        finally:
            patcher.stop()

    def test_connect_error_maps_to_transport_failure(self):
        patcher, _, _ = _patch_httpx(side_effect=httpx.ConnectError("refused"))
        try:
            with pytest.raises(TransportFailure) as exc_info:
                _make_client().call_shopify("GET", "/products.json")
        finally:
            patcher.stop()
        assert not isinstance(exc_info.value, ConnectionTimeoutError)

    def test_missing_config_raises_before_request(self):
        patcher, _, http = _patch_httpx(_mock_response(200, {}))
        try:
            with pytest.raises(ConfigurationError):
                _make_client(token=None).call_shopify("GET", "/products.json")
        finally:
            patcher.stop()
        http.request.assert_not_called()


# ---------------------------------------------------------------------------
# Verb helpers
# ---------------------------------------------------------------------------

class TestVerbHelpers:
    """Tests for get/post/put/delete delegation."""

    def test_get(self):
        client = _make_client()
        with patch.object(client, "call_shopify", return_value={"ok": 1}) as mock_call:
            assert client.get("/x.json", params={"a": 1}) == {"ok": 1}
        mock_call.assert_called_once_with("GET", "/x.json", params={"a": 1})

    def test_post(self):
        client = _make_client()
        with patch.object(client, "call_shopify", return_value={}) as mock_call:
            client.post("/x.json", json={"b": 2})
        mock_call.assert_called_once_with("POST", "/x.json", json={"b": 2})

    def test_put(self):
        client = _make_client()
        with patch.object(client, "call_shopify", return_value={}) as mock_call:
            client.put("/x/1.json", json={"c": 3})
        mock_call.assert_called_once_with("PUT", "/x/1.json", json={"c": 3})

    def test_delete(self):
        client = _make_client()
        with patch.object(client, "call_shopify", return_value={}) as mock_call:
            client.delete("/x/1.json")
        mock_call.assert_called_once_with("DELETE", "/x/1.json")
