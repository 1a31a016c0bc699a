"""
Order status sync — best-effort post-action hook for order mutations.

After an order mutation succeeds, a ``{status, message}`` pair is written
to a json metafield on the order. The write is telemetry: any SDK error it
raises is logged and dropped so it can never fail the mutation that
triggered it.
"""
import logging
from typing import Any, Dict, Optional

from aveconnect_shopify.core.constants.shopify import STATUS_NOTE_ADDED, STATUS_TIMELINE_COMMENT
from aveconnect_shopify.core.exceptions import AveConnectShopifyError
from aveconnect_shopify.services.metafield_service import ShopifyMetafieldService
from aveconnect_shopify.utils.gid import IdLike, ResourceKind, to_gid

logger = logging.getLogger("shopify_order_status_sync")


class OrderStatusSync:
    def __init__(self, metafields: ShopifyMetafieldService) -> None:
        self._metafields = metafields

    def sync(self, order_id: IdLike, status: str, message: str) -> Optional[Dict[str, Any]]:
        """Write the status pair; returns the metafieldsSet payload, or None if it failed."""
        try:
            owner_id = to_gid(order_id, ResourceKind.ORDER)
            return self._metafields.set(
                {"ownerId": owner_id, "value": {"status": status, "message": message}}
            )
        except AveConnectShopifyError as exc:
            logger.warning(
                "shopify order status sync skipped order_id=%s status=%s error=%s",
                order_id, status, exc,
            )
            return None

    def after_note(self, order_id: IdLike, note: str) -> Optional[Dict[str, Any]]:
        return self.sync(order_id, STATUS_NOTE_ADDED, note)

    def after_timeline_comment(self, order_id: IdLike, message: str) -> Optional[Dict[str, Any]]:
        return self.sync(order_id, STATUS_TIMELINE_COMMENT, message)
