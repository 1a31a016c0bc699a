"""
Shopify transaction service — REST ``orders/<id>/transactions.json``.
"""
import logging
from typing import Any, Dict, List

from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.utils.gid import IdLike, ResourceKind, normalize
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_transactions")


class ShopifyTransactionService:
    def __init__(self, client: ShopifyClient) -> None:
        self._client = client

    @staticmethod
    def _path(order_id: IdLike) -> str:
        return f"/orders/{normalize(order_id, ResourceKind.ORDER).numeric_id}/transactions.json"

    def list(self, order_id: IdLike) -> List[Dict[str, Any]]:
        data = self._client.get(self._path(order_id))
        return data.get("transactions") or []

    def create(self, order_id: IdLike, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Record a transaction (capture, refund, ...) against an order.

        Args:
            order_id: bare or global order id
            data: ``{"transaction": {currency, amount, kind, ...}}``
        """
        require_valid("transaction.create", data)
        path = self._path(order_id)
        logger.info("shopify transaction create path=%s payload=%s", path, data)
        response = self._client.post(path, json=data)
        transaction = response.get("transaction") or {}
        logger.info(
            "shopify transaction created id=%s kind=%s", transaction.get("id"), transaction.get("kind")
        )
        return transaction
