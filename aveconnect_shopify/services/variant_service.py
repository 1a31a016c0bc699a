"""
Shopify variant service — REST ``variants/<id>.json``.
"""
import logging
from typing import Any, Dict

from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.utils.gid import IdLike, ResourceKind, normalize
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_variants")


class ShopifyVariantService:
    def __init__(self, client: ShopifyClient) -> None:
        self._client = client

    def update(self, variant_id: IdLike, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update one variant. ``data`` is ``{"variant": {...}}``; its ``id`` is
        taken from ``variant_id`` and sent as a bare number.
        """
        numeric_id = normalize(variant_id, ResourceKind.PRODUCT_VARIANT).numeric_id
        variant = {**(data.get("variant") or {}), "id": numeric_id}
        require_valid("variant.update", {"variant": variant})

        body = {"variant": {**variant, "id": int(numeric_id)}}
        logger.info("shopify variant update id=%s payload=%s", numeric_id, body)
        response = self._client.put(f"/variants/{numeric_id}.json", json=body)
        return response.get("variant") or {}
