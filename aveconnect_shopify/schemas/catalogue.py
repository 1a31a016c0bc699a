"""
Validation schema catalogue — one rule table per resource/operation pair.

Update schemas are derived from the create tables with ``relaxed`` so the
difference between the two is data (which identifier stays required),
not a second hand-written copy.
"""
from typing import Dict, Mapping

from aveconnect_shopify.core.constants.shopify import (
    CURRENCY_PATTERN,
    FINANCIAL_STATUSES,
    HANDLE_PATTERN,
    IMAGE_URL_PATTERN,
    INVENTORY_POLICIES,
    ORDER_CANCEL_REASONS,
    PRICE_PATTERN,
    PRODUCT_STATUSES_GRAPHQL,
    PRODUCT_STATUSES_REST,
    PUBLISHED_SCOPES,
    TITLE_PATTERN,
    TRANSACTION_KINDS,
    WEIGHT_UNITS,
)
from aveconnect_shopify.utils.validation import FieldRule, relaxed


def _object(fields: Mapping[str, FieldRule], required: bool = False) -> FieldRule:
    return FieldRule("object", required=required, fields=dict(fields))


def _array_of(item: FieldRule, required: bool = False) -> FieldRule:
    return FieldRule("array", required=required, items=item)


_PRICE = FieldRule("string", pattern=PRICE_PATTERN)

# ── Products ──────────────────────────────────────────────────────

VARIANT_FIELDS: Dict[str, FieldRule] = {
    "title": FieldRule("string"),
    "price": FieldRule("string", required=True, pattern=PRICE_PATTERN),
    "position": FieldRule("number", minimum=1),
    "inventory_policy": FieldRule(enum=INVENTORY_POLICIES),
    "compareAtPrice": _PRICE,
    "compare_at_price": _PRICE,
    "option1": FieldRule("string"),
    "option2": FieldRule("string"),
    "option3": FieldRule("string"),
    "taxable": FieldRule("boolean"),
    "grams": FieldRule("number", minimum=0),
    "sku": FieldRule("string"),
    "weight": FieldRule("number", minimum=0),
    "weight_unit": FieldRule(enum=WEIGHT_UNITS),
    "inventoryQuantity": FieldRule("number", minimum=0),
    "image_id": FieldRule("integer"),
}

OPTION_FIELDS: Dict[str, FieldRule] = {
    "id": FieldRule("number"),
    "product_id": FieldRule("number"),
    "name": FieldRule("string"),
    "position": FieldRule("number", minimum=1),
    "values": _array_of(FieldRule("string")),
}

IMAGE_FIELDS: Dict[str, FieldRule] = {
    "alt": FieldRule("string"),
    "altText": FieldRule("string"),
    "src": FieldRule("string", pattern=IMAGE_URL_PATTERN),
    "variant_ids": _array_of(FieldRule("number")),
}

PRODUCT_FIELDS: Dict[str, FieldRule] = {
    "title": FieldRule("string", required=True, pattern=TITLE_PATTERN),
    "body_html": FieldRule("string"),
    "handle": FieldRule("string", pattern=HANDLE_PATTERN),
    "vendor": FieldRule("string"),
    "product_type": FieldRule("string"),
    "status": FieldRule(enum=PRODUCT_STATUSES_GRAPHQL),
    "tags": FieldRule("string"),
    "published_scope": FieldRule(enum=PUBLISHED_SCOPES),
    "variants": _array_of(_object(VARIANT_FIELDS)),
    "options": _array_of(_object(OPTION_FIELDS)),
    "images": _array_of(_object(IMAGE_FIELDS)),
    "image": _object(IMAGE_FIELDS),
}

PRODUCT_UPDATE_FIELDS: Dict[str, FieldRule] = {
    "id": FieldRule("string", required=True),
    **relaxed(PRODUCT_FIELDS),
    # updates may carry tags already split into a list
    "tags": FieldRule("any"),
}

PRODUCT_REST_FIELDS: Dict[str, FieldRule] = {
    **PRODUCT_FIELDS,
    "status": FieldRule(enum=PRODUCT_STATUSES_REST),
}

# ── Orders ────────────────────────────────────────────────────────

LINE_ITEM_FIELDS: Dict[str, FieldRule] = {
    "variant_id": FieldRule("number"),
    "title": FieldRule("string"),
    "price": _PRICE,
    "quantity": FieldRule("integer", required=True, minimum=1),
}

ORDER_REST_FIELDS: Dict[str, FieldRule] = {
    "line_items": _array_of(_object(LINE_ITEM_FIELDS), required=True),
    "email": FieldRule("string"),
    "currency": FieldRule("string", pattern=CURRENCY_PATTERN),
    "financial_status": FieldRule(enum=FINANCIAL_STATUSES),
    "note": FieldRule("string"),
    "tags": FieldRule("string"),
}

ORDER_REST_UPDATE_FIELDS: Dict[str, FieldRule] = {
    "id": FieldRule("number", required=True),
    **relaxed(ORDER_REST_FIELDS),
}

ORDER_NOTE_FIELDS: Dict[str, FieldRule] = {
    "id": FieldRule("string", required=True),
    "note": FieldRule("string", required=True),
}

ORDER_TIMELINE_COMMENT_FIELDS: Dict[str, FieldRule] = {
    "id": FieldRule("string", required=True),
    "message": FieldRule("string", required=True),
}

# ── Catalogue ─────────────────────────────────────────────────────

SCHEMAS: Dict[str, Dict[str, FieldRule]] = {
    "product.create": {
        "product": _object(PRODUCT_FIELDS, required=True),
    },
    "product.update": {
        "product": _object(PRODUCT_UPDATE_FIELDS, required=True),
    },
    "product.rest.create": {
        "product": _object(PRODUCT_REST_FIELDS, required=True),
    },
    "product.rest.update": {
        "product": _object(
            {"id": FieldRule("any", required=True), **relaxed(PRODUCT_REST_FIELDS)},
            required=True,
        ),
    },
    "variant.create": dict(VARIANT_FIELDS),
    "variant.update": {
        "variant": _object(
            {
                "id": FieldRule("string", required=True),
                "title": FieldRule("string"),
                "image_id": FieldRule("integer"),
                "price": _PRICE,
                "sku": FieldRule("string"),
            },
            required=True,
        ),
    },
    "order.rest.create": {
        "order": _object(ORDER_REST_FIELDS, required=True),
    },
    "order.rest.update": {
        "order": _object(ORDER_REST_UPDATE_FIELDS, required=True),
    },
    "order.note": {
        "order": _object(ORDER_NOTE_FIELDS, required=True),
    },
    "order.timeline_comment": {
        "order": _object(ORDER_TIMELINE_COMMENT_FIELDS, required=True),
    },
    "order.cancel": {
        "order_id": FieldRule("string", required=True),
        "reason": FieldRule(required=True, enum=ORDER_CANCEL_REASONS),
        "refund": FieldRule("boolean"),
        "restock": FieldRule("boolean"),
        "notify_customer": FieldRule("boolean"),
        "staff_note": FieldRule("string"),
    },
    "order.fulfill": {
        "order_id": FieldRule("string", required=True),
        "notify_customer": FieldRule("boolean"),
        "tracking": _object(
            {
                "number": FieldRule("string"),
                "url": FieldRule("string"),
                "company": FieldRule("string"),
            }
        ),
    },
    "transaction.create": {
        "transaction": _object(
            {
                "currency": FieldRule("string", required=True, pattern=CURRENCY_PATTERN),
                "amount": FieldRule("string", required=True, pattern=PRICE_PATTERN),
                "kind": FieldRule(required=True, enum=TRANSACTION_KINDS),
            },
            required=True,
        ),
    },
    "metafield.set": {
        "ownerId": FieldRule("string", required=True),
        "value": FieldRule("any", required=True),
        "namespace": FieldRule("string"),
        "key": FieldRule("string"),
    },
}
