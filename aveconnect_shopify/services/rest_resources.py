"""
REST resources — one-call CRUD on ``products.json`` and ``orders.json``.

Each resource is a thin wrapper over ``ShopifyClient``: ids are reduced to
their bare number (global ids are accepted), and every create/update body
is checked against its catalogue schema before it is sent.
"""
import logging
from typing import Any, Dict, List, Optional

from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.utils.gid import IdLike, ResourceKind, normalize
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_rest")


class RestResource:
    """CRUD over ``/<collection>.json`` and ``/<collection>/<id>.json``."""

    collection: str = ""
    singular: str = ""
    kind: ResourceKind = ResourceKind.PRODUCT
    create_schema: str = ""
    update_schema: str = ""

    def __init__(self, client: ShopifyClient) -> None:
        self._client = client

    def _item_path(self, resource_id: IdLike) -> str:
        numeric_id = normalize(resource_id, self.kind).numeric_id
        return f"/{self.collection}/{numeric_id}.json"

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        data = self._client.get(f"/{self.collection}.json", params=params)
        return data.get(self.collection) or []

    def get(self, resource_id: IdLike) -> Optional[Dict[str, Any]]:
        data = self._client.get(self._item_path(resource_id))
        return data.get(self.singular)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_valid(self.create_schema, data)
        logger.info("shopify %s create payload=%s", self.singular, data)
        response = self._client.post(f"/{self.collection}.json", json=data)
        created = response.get(self.singular) or {}
        logger.info("shopify %s created id=%s", self.singular, created.get("id"))
        return created

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update the resource whose ``id`` is carried inside the document."""
        require_valid(self.update_schema, data)
        resource_id = data[self.singular]["id"]
        logger.info("shopify %s update id=%s payload=%s", self.singular, resource_id, data)
        response = self._client.put(self._item_path(resource_id), json=data)
        return response.get(self.singular) or {}

    def delete(self, resource_id: IdLike) -> bool:
        self._client.delete(self._item_path(resource_id))
        logger.info("shopify %s deleted id=%s", self.singular, resource_id)
        return True


class ProductResource(RestResource):
    collection = "products"
    singular = "product"
    kind = ResourceKind.PRODUCT
    create_schema = "product.rest.create"
    update_schema = "product.rest.update"


class OrderResource(RestResource):
    collection = "orders"
    singular = "order"
    kind = ResourceKind.ORDER
    create_schema = "order.rest.create"
    update_schema = "order.rest.update"
