"""
Shopify metafield service — ``metafieldsSet`` for json metafields.
"""
import logging
from typing import Any, Dict, Optional

from aveconnect_shopify.clients.shopify_graphql_client import ShopifyGraphQLClient
from aveconnect_shopify.core.config import Settings
from aveconnect_shopify.core.constants.graphql import MUTATION_METAFIELDS_SET
from aveconnect_shopify.core.exceptions import InvalidIdentifier
from aveconnect_shopify.utils.gid import ResourceKind, is_gid, to_gid
from aveconnect_shopify.utils.translators import metafield_to_remote
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_metafields")


class ShopifyMetafieldService:
    def __init__(self, graphql: ShopifyGraphQLClient, settings: Settings) -> None:
        self._graphql = graphql
        self._default_namespace = settings.shopify_status_namespace
        self._default_key = settings.shopify_status_key

    def set(
        self,
        data: Dict[str, Any],
        owner_kind: Optional[ResourceKind] = None,
    ) -> Dict[str, Any]:
        """
        Write one json metafield.

        Args:
            data: ``{ownerId, value, namespace?, key?}``
            owner_kind: when given, ``ownerId`` may be a bare number and is
                normalized to that kind; otherwise it must already be a global id

        Returns:
            dict: the ``metafieldsSet`` payload (``metafields`` and ``userErrors``)
        """
        require_valid("metafield.set", data)
        owner_id = data["ownerId"]
        if owner_kind is not None:
            owner_id = to_gid(owner_id, owner_kind)
        elif not is_gid(owner_id):
            raise InvalidIdentifier(owner_id, "owner")

        metafield = metafield_to_remote(
            {**data, "ownerId": owner_id},
            default_namespace=self._default_namespace,
            default_key=self._default_key,
        )
        response = self._graphql.query(MUTATION_METAFIELDS_SET, {"metafields": [metafield]})
        payload = response.get("metafieldsSet") or {}
        if payload.get("userErrors"):
            logger.info(
                "shopify metafieldsSet owner=%s errors=%s", owner_id, payload.get("userErrors")
            )
        return payload
