"""
Resource translators — pure mapping between REST-shaped documents and
GraphQL inputs/nodes.

REST side: flat snake_case fields, bare numeric ids, comma-joined tags.
GraphQL side: camelCase fields, ``gid://`` ids, tag arrays, edge/node wrappers.

No function here performs I/O, so every quirk of the remote schema can be
unit-tested without a client.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from aveconnect_shopify.core.constants.shopify import (
    MAX_VARIANT_OPTIONS,
    OPTION_PLACEHOLDER_VALUE,
)
from aveconnect_shopify.core.exceptions import MissingOptionDefinition
from aveconnect_shopify.utils.gid import ResourceKind, to_bare_id, to_gid


# ── Shared helpers ────────────────────────────────────────────────

def unwrap_edges(connection: Any) -> List[Dict[str, Any]]:
    """Flatten ``{edges: [{node}]}`` / ``{nodes: [...]}`` / plain lists into a list."""
    if not connection:
        return []
    if isinstance(connection, list):
        return [item.get("node", item) if isinstance(item, dict) else item for item in connection]
    if "edges" in connection:
        return [edge.get("node") or {} for edge in connection.get("edges") or []]
    if "nodes" in connection:
        return list(connection.get("nodes") or [])
    return []


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def split_tags(tags: Any) -> Optional[List[str]]:
    if tags is None:
        return None
    if isinstance(tags, str):
        return [tag.strip() for tag in tags.split(",") if tag.strip()]
    return [str(tag) for tag in tags]


def join_tags(tags: Any) -> str:
    if not tags:
        return ""
    if isinstance(tags, str):
        return tags
    return ", ".join(str(tag) for tag in tags)


# ── Product ───────────────────────────────────────────────────────

def options_to_remote(options: Optional[Sequence[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    """
    Option definitions for ``productCreate``.

    Each option gets a single placeholder value; the real values are
    created by the variants that select them.
    """
    if not options:
        return None
    return [
        {"name": option.get("name"), "values": [{"name": OPTION_PLACEHOLDER_VALUE}]}
        for option in options
    ]


def product_to_remote(product: Dict[str, Any]) -> Dict[str, Any]:
    """Build a ``ProductInput`` from a REST-shaped product document."""
    status = product.get("status")
    product_input = {
        "title": product.get("title"),
        "descriptionHtml": product.get("body_html", product.get("descriptionHtml")),
        "vendor": product.get("vendor"),
        "productType": product.get("product_type", product.get("productType")),
        "handle": product.get("handle"),
        "tags": split_tags(product.get("tags")),
        "status": status.upper() if isinstance(status, str) else None,
        "productOptions": options_to_remote(product.get("options")),
    }
    if product.get("id") is not None:
        product_input["id"] = to_gid(product["id"], ResourceKind.PRODUCT)
    return _drop_none(product_input)


def _options_from_remote(node: Dict[str, Any]) -> List[Dict[str, Any]]:
    raw_options = node.get("options")
    if raw_options is None:
        raw_options = node.get("productOptions") or []
    options = []
    for option in raw_options:
        raw_values = option.get("values")
        if raw_values is None:
            raw_values = option.get("optionValues") or []
        values = [
            value.get("name") if isinstance(value, dict) else value
            for value in raw_values
        ]
        options.append({
            "name": option.get("name"),
            "values": [value for value in values if value != OPTION_PLACEHOLDER_VALUE],
        })
    return options


def _image_from_remote(image: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not image:
        return None
    return {
        "id": to_bare_id(image.get("id")),
        "src": image.get("src") or image.get("url"),
        "alt": image.get("altText") or image.get("alt"),
    }


def product_from_remote(node: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rebuild a REST-shaped product from a GraphQL product node.

    Global ids become bare numbers, tags are comma-joined, edge/node
    wrappers are flattened. ``template_suffix`` and ``published_scope``
    have no GraphQL counterpart and are always ``None``.
    """
    status = node.get("status")
    remote_id = node.get("id")
    return {
        "id": to_bare_id(remote_id),
        "title": node.get("title"),
        "body_html": node.get("descriptionHtml"),
        "vendor": node.get("vendor"),
        "product_type": node.get("productType"),
        "created_at": node.get("createdAt"),
        "handle": node.get("handle"),
        "updated_at": node.get("updatedAt"),
        "published_at": node.get("publishedAt"),
        "template_suffix": None,
        "published_scope": None,
        "tags": join_tags(node.get("tags")),
        "status": status.lower() if isinstance(status, str) else None,
        "admin_graphql_api_id": remote_id,
        "variants": [variant_from_remote(v) for v in unwrap_edges(node.get("variants"))],
        "options": _options_from_remote(node),
        "images": [_image_from_remote(i) for i in unwrap_edges(node.get("images"))],
        "image": _image_from_remote(node.get("featuredImage")),
    }


# ── Variant ───────────────────────────────────────────────────────

def _price(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def check_option_bindings(variant: Dict[str, Any], declared: int) -> None:
    """Raise ``MissingOptionDefinition`` when ``variant`` selects an undeclared option slot."""
    for position in range(1, MAX_VARIANT_OPTIONS + 1):
        if variant.get(f"option{position}") and position > declared:
            raise MissingOptionDefinition(position, declared)


def variant_option_values(
    variant: Dict[str, Any],
    option_names: Sequence[str],
) -> List[Dict[str, str]]:
    """Bind ``option1..option3`` to the product's option names by position."""
    check_option_bindings(variant, len(option_names))
    values = []
    for position in range(1, MAX_VARIANT_OPTIONS + 1):
        value = variant.get(f"option{position}")
        if value:
            values.append({"name": value, "optionName": option_names[position - 1]})
    return values


def variant_to_remote(
    variant: Dict[str, Any],
    option_names: Sequence[str],
    media_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Build one ``ProductVariantsBulkInput`` entry."""
    variant_input: Dict[str, Any] = {
        "inventoryItem": {"sku": variant.get("sku")},
        "price": _price(variant.get("price")),
        "compareAtPrice": _price(variant.get("compareAtPrice", variant.get("compare_at_price"))),
    }
    positional = any(variant.get(f"option{n}") for n in range(1, MAX_VARIANT_OPTIONS + 1))
    # explicit optionValues win when there are no option names to bind against
    if positional and (option_names or not variant.get("optionValues")):
        variant_input["optionValues"] = variant_option_values(variant, option_names)
    elif variant.get("optionValues"):
        variant_input["optionValues"] = variant["optionValues"]
    if variant.get("taxable") is not None:
        variant_input["taxable"] = variant["taxable"]
    if variant.get("id") is not None:
        variant_input["id"] = to_gid(variant["id"], ResourceKind.PRODUCT_VARIANT)
    if media_id:
        variant_input["mediaId"] = media_id
    return _drop_none(variant_input)


def variant_from_remote(node: Dict[str, Any]) -> Dict[str, Any]:
    inventory_item = node.get("inventoryItem") or {}
    variant = {
        "id": to_bare_id(node.get("id")),
        "title": node.get("title"),
        "price": node.get("price"),
        "compare_at_price": node.get("compareAtPrice"),
        "position": node.get("position"),
        "sku": node.get("sku") or inventory_item.get("sku"),
        "barcode": node.get("barcode"),
        "taxable": node.get("taxable"),
        "inventory_policy": (node.get("inventoryPolicy") or "").lower() or None,
        "inventory_item_id": to_bare_id(inventory_item.get("id")),
        "created_at": node.get("createdAt"),
        "updated_at": node.get("updatedAt"),
    }
    if node.get("selectedOptions") is not None:
        variant["selected_options"] = node["selectedOptions"]
    return variant


# ── Image ─────────────────────────────────────────────────────────

def image_to_remote(image: Dict[str, Any]) -> Dict[str, Any]:
    """Build one ``CreateMediaInput`` entry from ``{alt|altText, src}``."""
    return {
        "alt": image.get("alt", image.get("altText")),
        "mediaContentType": "IMAGE",
        "originalSource": image.get("src"),
    }


# ── Order ─────────────────────────────────────────────────────────

def order_to_remote(order: Dict[str, Any]) -> Dict[str, Any]:
    """Build an ``OrderInput``; the id is normalized to an Order global id."""
    order_input = dict(order)
    order_input["id"] = to_gid(order["id"], ResourceKind.ORDER)
    return order_input


def timeline_comment_to_remote(order: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "subjectId": to_gid(order["id"], ResourceKind.ORDER),
        "message": order.get("message"),
    }


def order_from_remote(node: Dict[str, Any]) -> Dict[str, Any]:
    line_items = []
    for item in unwrap_edges(node.get("lineItems")):
        line_items.append({
            "id": to_bare_id(item.get("id")),
            "title": item.get("title"),
            "quantity": item.get("quantity"),
            "sku": item.get("sku"),
            "variant_id": to_bare_id((item.get("variant") or {}).get("id")),
        })
    return {
        "id": to_bare_id(node.get("id")),
        "admin_graphql_api_id": node.get("id"),
        "name": node.get("name"),
        "note": node.get("note"),
        "email": node.get("email"),
        "created_at": node.get("createdAt"),
        "updated_at": node.get("updatedAt"),
        "cancelled_at": node.get("cancelledAt"),
        "cancel_reason": (node.get("cancelReason") or "").lower() or None,
        "financial_status": (node.get("displayFinancialStatus") or "").lower() or None,
        "fulfillment_status": (node.get("displayFulfillmentStatus") or "").lower() or None,
        "tags": join_tags(node.get("tags")),
        "line_items": line_items,
    }


# ── Metafield ─────────────────────────────────────────────────────

def metafield_to_remote(
    data: Dict[str, Any],
    default_namespace: str,
    default_key: str,
) -> Dict[str, Any]:
    """Build one ``MetafieldsSetInput`` carrying ``value`` as a json metafield."""
    return {
        "ownerId": data["ownerId"],
        "namespace": data.get("namespace") or default_namespace,
        "key": data.get("key") or default_key,
        "type": "json",
        "value": json.dumps(data["value"]),
    }
