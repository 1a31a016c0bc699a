"""
Pytest configuration and shared fixtures for the AveConnect Shopify tests.

Provides real settings, mocked transports and sample documents.
"""
import pytest
from unittest.mock import MagicMock


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from aveconnect_shopify.core.config import Settings
    return Settings(
        shopify_store_domain="test-store.myshopify.com",
        shopify_admin_api_token="shpat_test_token",
        shopify_api_version="2025-07",
        shopify_request_timeout=5.0,
        shopify_status_namespace="aveconnect",
        shopify_status_key="status",
        shopify_status_sync_enabled=True,
    )


# ---------------------------------------------------------------------------
# Transports (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_shopify_client():
    """Mocked ShopifyClient (REST transport only)."""
    client = MagicMock()
    client.call_shopify = MagicMock(return_value={})
    client.get = MagicMock(return_value={})
    client.post = MagicMock(return_value={})
    client.put = MagicMock(return_value={})
    client.delete = MagicMock(return_value={})
    return client


@pytest.fixture
def mock_graphql():
    """Mocked ShopifyGraphQLClient; ``query`` returns unwrapped ``data``."""
    graphql = MagicMock()
    graphql.query = MagicMock(return_value={})
    return graphql


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_product():
    """Product with one option, two variants and a primary image."""
    return {
        "product": {
            "title": "T",
            "vendor": "AveConnect",
            "product_type": "Shirts",
            "tags": "summer, cotton",
            "status": "ACTIVE",
            "options": [{"name": "Size"}],
            "variants": [
                {"price": "10.00", "sku": "A", "option1": "S"},
                {"price": "12.50", "sku": "B", "option1": "M"},
            ],
            "image": {"src": "https://cdn.example.com/t.png", "alt": "T"},
        }
    }
