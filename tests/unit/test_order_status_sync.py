"""
Unit tests for OrderStatusSync and ShopifyMetafieldService.
"""
import json
import logging

import pytest
from unittest.mock import MagicMock

from aveconnect_shopify.core.constants.graphql import MUTATION_METAFIELDS_SET
from aveconnect_shopify.core.exceptions import (
    InvalidIdentifier,
    TransportFailure,
    ValidationFailure,
)
from aveconnect_shopify.services.metafield_service import ShopifyMetafieldService
from aveconnect_shopify.services.order_status_sync import OrderStatusSync


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ShopifyMetafieldService
# ---------------------------------------------------------------------------

class TestMetafieldService:
    """Tests for ShopifyMetafieldService.set."""

    def test_sets_json_metafield(self, mock_graphql, mock_settings):
        mock_graphql.query.return_value = {
            "metafieldsSet": {"metafields": [{"id": "gid://shopify/Metafield/1"}], "userErrors": []}
        }
        service = ShopifyMetafieldService(mock_graphql, mock_settings)

        result = service.set({"ownerId": "gid://shopify/Order/5", "value": {"status": "ok"}})

        query, variables = mock_graphql.query.call_args.args
        assert query == MUTATION_METAFIELDS_SET
        metafield = variables["metafields"][0]
        assert metafield["ownerId"] == "gid://shopify/Order/5"
        assert metafield["namespace"] == "aveconnect"
        assert metafield["key"] == "status"
        assert metafield["type"] == "json"
        assert json.loads(metafield["value"]) == {"status": "ok"}
        assert result["metafields"][0]["id"] == "gid://shopify/Metafield/1"

    def test_owner_kind_normalizes_bare_id(self, mock_graphql, mock_settings):
        from aveconnect_shopify.utils.gid import ResourceKind

        service = ShopifyMetafieldService(mock_graphql, mock_settings)
        service.set({"ownerId": "5", "value": 1}, owner_kind=ResourceKind.PRODUCT)

        metafield = mock_graphql.query.call_args.args[1]["metafields"][0]
        assert metafield["ownerId"] == "gid://shopify/Product/5"

    def test_bare_owner_without_kind_rejected(self, mock_graphql, mock_settings):
        service = ShopifyMetafieldService(mock_graphql, mock_settings)
        with pytest.raises(InvalidIdentifier):
            service.set({"ownerId": "5", "value": 1})
        mock_graphql.query.assert_not_called()

    def test_missing_value_rejected(self, mock_graphql, mock_settings):
        service = ShopifyMetafieldService(mock_graphql, mock_settings)
        with pytest.raises(ValidationFailure):
            service.set({"ownerId": "gid://shopify/Order/5"})

    def test_user_errors_returned(self, mock_graphql, mock_settings):
        mock_graphql.query.return_value = {"metafieldsSet": {"userErrors": [{"message": "bad"}]}}
        service = ShopifyMetafieldService(mock_graphql, mock_settings)
        result = service.set({"ownerId": "gid://shopify/Order/5", "value": 1})
        assert result["userErrors"] == [{"message": "bad"}]


# ---------------------------------------------------------------------------
# OrderStatusSync
# ---------------------------------------------------------------------------

class TestOrderStatusSync:
    """Tests for OrderStatusSync best-effort policy."""

    def test_after_note_writes_status(self):
        metafields = MagicMock()
        metafields.set.return_value = {"userErrors": []}

        result = OrderStatusSync(metafields).after_note("123", "hello")

        metafields.set.assert_called_once_with(
            {"ownerId": "gid://shopify/Order/123", "value": {"status": "note_added", "message": "hello"}}
        )
        assert result == {"userErrors": []}

    def test_after_timeline_comment_status(self):
        metafields = MagicMock()
        OrderStatusSync(metafields).after_timeline_comment("gid://shopify/Order/1", "m")
        value = metafields.set.call_args.args[0]["value"]
        assert value == {"status": "timeline_comment_added", "message": "m"}

    def test_transport_failure_swallowed_and_logged(self, caplog):
        metafields = MagicMock()
        metafields.set.side_effect = TransportFailure("down", status_code=503)

        with caplog.at_level(logging.WARNING, logger="shopify_order_status_sync"):
            result = OrderStatusSync(metafields).after_note("123", "hello")

        assert result is None
        assert "status sync skipped" in caplog.text

    def test_invalid_order_id_swallowed(self):
        metafields = MagicMock()
        assert OrderStatusSync(metafields).sync("no-digits", "x", "y") is None
        metafields.set.assert_not_called()

    def test_unrelated_errors_propagate(self):
        metafields = MagicMock()
        metafields.set.side_effect = RuntimeError("bug")
        with pytest.raises(RuntimeError):
            OrderStatusSync(metafields).after_note("123", "hello")
