"""
Lazy DI container — wiring for the Shopify clients and services.

``AveConnectShopify`` builds the whole object graph from one ``Settings``
instance (useful for multiple shops in one process). The ``get_*``
functions are process-wide singletons bound to the environment settings.
"""

from functools import lru_cache
from typing import Optional

from aveconnect_shopify.core.config import Settings, settings
from aveconnect_shopify.clients.shopify_client import ShopifyClient
from aveconnect_shopify.clients.shopify_graphql_client import ShopifyGraphQLClient
from aveconnect_shopify.services.metafield_service import ShopifyMetafieldService
from aveconnect_shopify.services.order_service import ShopifyOrderService
from aveconnect_shopify.services.order_status_sync import OrderStatusSync
from aveconnect_shopify.services.rest_resources import OrderResource, ProductResource
from aveconnect_shopify.services.shopify_orchestrator import ShopifyOrchestrator
from aveconnect_shopify.services.transaction_service import ShopifyTransactionService
from aveconnect_shopify.services.variant_service import ShopifyVariantService


class AveConnectShopify:
    """Facade exposing every service for one shop."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.client = ShopifyClient(self.settings)
        self.graphql = ShopifyGraphQLClient(self.client)

        self.products = ShopifyOrchestrator(self.graphql)
        self.metafields = ShopifyMetafieldService(self.graphql, self.settings)
        self.status_sync = (
            OrderStatusSync(self.metafields) if self.settings.shopify_status_sync_enabled else None
        )
        self.orders = ShopifyOrderService(self.graphql, status_sync=self.status_sync)

        self.rest_products = ProductResource(self.client)
        self.rest_orders = OrderResource(self.client)
        self.transactions = ShopifyTransactionService(self.client)
        self.variants = ShopifyVariantService(self.client)


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_shopify_client():
    return ShopifyClient(settings)


@lru_cache(maxsize=1)
def get_shopify_graphql_client():
    return ShopifyGraphQLClient(get_shopify_client())


# -- Shopify Services ------------------------------------------------------

@lru_cache(maxsize=1)
def get_shopify_orchestrator():
    return ShopifyOrchestrator(get_shopify_graphql_client())


@lru_cache(maxsize=1)
def get_metafield_service():
    return ShopifyMetafieldService(get_shopify_graphql_client(), settings)


@lru_cache(maxsize=1)
def get_order_status_sync():
    if not settings.shopify_status_sync_enabled:
        return None
    return OrderStatusSync(get_metafield_service())


@lru_cache(maxsize=1)
def get_order_service():
    return ShopifyOrderService(get_shopify_graphql_client(), status_sync=get_order_status_sync())


@lru_cache(maxsize=1)
def get_product_resource():
    return ProductResource(get_shopify_client())


@lru_cache(maxsize=1)
def get_order_resource():
    return OrderResource(get_shopify_client())


@lru_cache(maxsize=1)
def get_transaction_service():
    return ShopifyTransactionService(get_shopify_client())


@lru_cache(maxsize=1)
def get_variant_service():
    return ShopifyVariantService(get_shopify_client())
