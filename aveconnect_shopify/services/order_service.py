"""
Shopify order service — GraphQL order mutations.

Notes and timeline comments are composite-free single calls whose user
errors are handed back to the caller; a successful note or comment fires
the optional ``OrderStatusSync`` hook. Cancel and fulfillment have no
partial-success notion, so their user errors are raised.
"""
import logging
from typing import Any, Dict, List, Optional

from aveconnect_shopify.clients.shopify_graphql_client import ShopifyGraphQLClient
from aveconnect_shopify.core.constants.graphql import (
    MUTATION_FULFILLMENT_CREATE,
    MUTATION_ORDER_CANCEL,
    MUTATION_ORDER_UPDATE,
    MUTATION_TIMELINE_COMMENT_CREATE,
    QUERY_FULFILLMENT_ORDERS,
    QUERY_ORDER,
)
from aveconnect_shopify.core.exceptions import (
    InvalidArgument,
    MissingDependencyError,
    RemoteApplicationError,
)
from aveconnect_shopify.services.order_status_sync import OrderStatusSync
from aveconnect_shopify.utils.gid import IdLike, ResourceKind, to_gid
from aveconnect_shopify.utils.translators import (
    order_from_remote,
    order_to_remote,
    timeline_comment_to_remote,
    unwrap_edges,
)
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_orders")

_FULFILLABLE_STATUSES = ("OPEN", "IN_PROGRESS")


class ShopifyOrderService:
    def __init__(
        self,
        graphql: ShopifyGraphQLClient,
        status_sync: Optional[OrderStatusSync] = None,
    ) -> None:
        self._graphql = graphql
        self._status_sync = status_sync

    def get_order(self, order_id: IdLike) -> Optional[Dict[str, Any]]:
        data = self._graphql.query(QUERY_ORDER, {"id": to_gid(order_id, ResourceKind.ORDER)})
        node = data.get("order")
        if not node:
            return None
        return order_from_remote(node)

    def add_note(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Set the note on an order (``{"order": {"id", "note"}}``).

        The id may be bare (``"123"``) or a global id. Returns the unwrapped
        response; ``orderUpdate.userErrors`` is left for the caller to inspect.
        """
        require_valid("order.note", data)
        order_input = order_to_remote(data["order"])
        response = self._graphql.query(MUTATION_ORDER_UPDATE, {"input": order_input})

        errors = (response.get("orderUpdate") or {}).get("userErrors") or []
        if errors:
            logger.info("shopify orderUpdate id=%s errors=%s", order_input["id"], errors)
        elif self._status_sync is not None:
            self._status_sync.after_note(order_input["id"], order_input.get("note") or "")
        return response

    def add_timeline_comment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Add a staff timeline comment to an order (``{"order": {"id", "message"}}``)."""
        require_valid("order.timeline_comment", data)
        comment_input = timeline_comment_to_remote(data["order"])
        response = self._graphql.query(MUTATION_TIMELINE_COMMENT_CREATE, {"input": comment_input})

        errors = (response.get("timelineCommentCreate") or {}).get("userErrors") or []
        if errors:
            logger.info(
                "shopify timelineCommentCreate id=%s errors=%s", comment_input["subjectId"], errors
            )
        elif self._status_sync is not None:
            self._status_sync.after_timeline_comment(
                comment_input["subjectId"], comment_input.get("message") or ""
            )
        return response

    def cancel_order(
        self,
        order_id: IdLike,
        reason: str,
        refund: bool = False,
        restock: bool = False,
        notify_customer: bool = False,
        staff_note: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Cancel an order.

        Raises:
            InvalidArgument: ``reason`` is not a valid OrderCancelReason
            RemoteApplicationError: Shopify rejected the cancellation
        """
        arguments = {
            "order_id": str(order_id),
            "reason": reason,
            "refund": refund,
            "restock": restock,
            "notify_customer": notify_customer,
            "staff_note": staff_note,
        }
        require_valid("order.cancel", arguments, error_cls=InvalidArgument)

        variables = {
            "orderId": to_gid(order_id, ResourceKind.ORDER),
            "reason": reason,
            "refund": refund,
            "restock": restock,
            "notifyCustomer": notify_customer,
            "staffNote": staff_note,
        }
        response = self._graphql.query(MUTATION_ORDER_CANCEL, variables)
        payload = response.get("orderCancel") or {}
        errors = payload.get("orderCancelUserErrors") or payload.get("userErrors") or []
        if errors:
            raise RemoteApplicationError("orderCancel", errors)
        logger.info("shopify order cancel requested id=%s reason=%s", variables["orderId"], reason)
        return payload

    def _fulfillment_order_ids(self, order_gid: str) -> List[str]:
        data = self._graphql.query(QUERY_FULFILLMENT_ORDERS, {"id": order_gid})
        order = data.get("order")
        if not order:
            raise MissingDependencyError("order", f"Order {order_gid} not found")

        open_orders = [
            node
            for node in unwrap_edges(order.get("fulfillmentOrders"))
            if node.get("status") in _FULFILLABLE_STATUSES
        ]
        if not open_orders:
            raise MissingDependencyError(
                "fulfillment order", f"Order {order_gid} has no open fulfillment orders"
            )
        for node in open_orders:
            location = (node.get("assignedLocation") or {}).get("location") or {}
            if not location.get("id"):
                raise MissingDependencyError(
                    "location", f"Fulfillment order {node.get('id')} has no assigned location"
                )
        return [node["id"] for node in open_orders]

    def fulfill_order(
        self,
        order_id: IdLike,
        tracking: Optional[Dict[str, str]] = None,
        notify_customer: bool = False,
    ) -> Dict[str, Any]:
        """
        Fulfill every open fulfillment order of an order.

        Raises:
            MissingDependencyError: no open fulfillment order, or one without a location
            RemoteApplicationError: Shopify rejected the fulfillment
        """
        arguments: Dict[str, Any] = {
            "order_id": str(order_id),
            "notify_customer": notify_customer,
            "tracking": tracking,
        }
        require_valid("order.fulfill", arguments)

        order_gid = to_gid(order_id, ResourceKind.ORDER)
        fulfillment_order_ids = self._fulfillment_order_ids(order_gid)

        fulfillment: Dict[str, Any] = {
            "lineItemsByFulfillmentOrder": [
                {"fulfillmentOrderId": fo_id} for fo_id in fulfillment_order_ids
            ],
            "notifyCustomer": notify_customer,
        }
        if tracking:
            fulfillment["trackingInfo"] = {
                key: value for key, value in tracking.items() if value is not None
            }

        response = self._graphql.query(MUTATION_FULFILLMENT_CREATE, {"fulfillment": fulfillment})
        payload = response.get("fulfillmentCreate") or {}
        errors = payload.get("userErrors") or []
        if errors:
            raise RemoteApplicationError("fulfillmentCreate", errors)
        logger.info(
            "shopify order fulfilled id=%s fulfillment_orders=%s", order_gid, fulfillment_order_ids
        )
        return payload
