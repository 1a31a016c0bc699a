import logging
from typing import Any, Dict, Optional

from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.core.exceptions import TransportFailure

logger = logging.getLogger("shopify_graphql_client")


class ShopifyGraphQLClient:
    """
    GraphQL transport over the REST client's ``/graphql.json`` endpoint.

    ``query`` always unwraps the envelope and returns ``data``: callers read
    ``response["orderCancel"]["userErrors"]``, never ``response["data"]...``.
    A non-empty top-level ``errors`` array is a transport failure; per-mutation
    ``userErrors`` inside ``data`` are returned untouched for the caller.
    """

    def __init__(self, client: ShopifyClient) -> None:
        self._client = client

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        envelope = self._client.call_shopify("POST", "/graphql.json", json=payload)

        if not isinstance(envelope, dict):
            raise TransportFailure(f"Malformed GraphQL envelope: {envelope!r}")
        if envelope.get("errors"):
            logger.info("shopify graphql errors=%s", envelope.get("errors"))
            raise TransportFailure(str(envelope.get("errors")), status_code=502)
        data = envelope.get("data")
        if data is None:
            raise TransportFailure("GraphQL envelope has no data", status_code=502)
        return data
