"""
Constants package — re-exports from domain-specific modules.

Usage:
    from aveconnect_shopify.core.constants.shopify import PRICE_PATTERN
    from aveconnect_shopify.core.constants.graphql import MUTATION_PRODUCT_CREATE
    # or import everything:
    from aveconnect_shopify.core.constants import graphql, shopify
"""

from aveconnect_shopify.core.constants import graphql, shopify
from aveconnect_shopify.core.constants.shopify import (
    GID_PLATFORM,
    GID_PREFIX,
    OPTION_PLACEHOLDER_VALUE,
    MAX_VARIANT_OPTIONS,
    PRODUCT_STATUSES_REST,
    PRODUCT_STATUSES_GRAPHQL,
    ORDER_CANCEL_REASONS,
    PRICE_PATTERN,
    CURRENCY_PATTERN,
)

__all__ = [
    "graphql",
    "shopify",
    "GID_PLATFORM",
    "GID_PREFIX",
    "OPTION_PLACEHOLDER_VALUE",
    "MAX_VARIANT_OPTIONS",
    "PRODUCT_STATUSES_REST",
    "PRODUCT_STATUSES_GRAPHQL",
    "ORDER_CANCEL_REASONS",
    "PRICE_PATTERN",
    "CURRENCY_PATTERN",
]
