"""
Shopify orchestrator — multi-step product provisioning over GraphQL.

Shopify has no single mutation that creates a product together with its
media and variants, so ``create_product`` runs four dependent calls:

1. CreateBase            productCreate (base attributes + option definitions)
2. AttachMedia           productCreateMedia            (skipped without images)
3. CreateVariants        productVariantsBulkCreate     (skipped without variants)
4. DeleteDefaultVariant  productVariantsBulkDelete     (only if a default was captured)

Only step 1 is fatal. Later steps record their user errors into the
``ProvisioningResult`` and the default-variant cleanup runs whenever
step 1 produced one, whatever happened in between.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from aveconnect_shopify.clients.shopify_graphql_client import ShopifyGraphQLClient
from aveconnect_shopify.core.constants.graphql import (
    MUTATION_PRODUCT_CREATE,
    MUTATION_PRODUCT_CREATE_MEDIA,
    MUTATION_PRODUCT_DELETE,
    MUTATION_PRODUCT_UPDATE,
    MUTATION_VARIANTS_BULK_CREATE,
    MUTATION_VARIANTS_BULK_DELETE,
    QUERY_PRODUCTS,
)
from aveconnect_shopify.core.exceptions import RemoteApplicationError, TransportFailure
from aveconnect_shopify.schemas.provisioning import ProvisioningResult
from aveconnect_shopify.utils.gid import ResourceKind, to_gid
from aveconnect_shopify.utils.translators import (
    check_option_bindings,
    image_to_remote,
    product_from_remote,
    product_to_remote,
    unwrap_edges,
    variant_to_remote,
)
from aveconnect_shopify.utils.validation import require_valid

logger = logging.getLogger("shopify_orchestrator")

_COLLECTION_KEYS = ("options", "variants", "images", "image")


def _collect_images(product: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Primary ``image`` first, then ``images`` in order."""
    images = []
    if product.get("image"):
        images.append(product["image"])
    images.extend(product.get("images") or [])
    return images


def _option_names(product: Dict[str, Any]) -> List[str]:
    return [option.get("name") for option in product.get("options") or []]


class ShopifyOrchestrator:
    """High-level Shopify product operations."""

    def __init__(self, graphql: ShopifyGraphQLClient) -> None:
        self._graphql = graphql

    # ── Read / delete ─────────────────────────────────────────────

    def list_products(self, first: int = 10) -> Dict[str, Any]:
        """Fetch products and reshape them like the REST ``products.json`` payload."""
        data = self._graphql.query(QUERY_PRODUCTS, {"first": first})
        nodes = unwrap_edges(data.get("products"))
        return {"products": [product_from_remote(node) for node in nodes]}

    def delete_product(self, product_id: Any) -> Dict[str, Any]:
        """Delete a product; any user error is raised."""
        product_gid = to_gid(product_id, ResourceKind.PRODUCT)
        data = self._graphql.query(MUTATION_PRODUCT_DELETE, {"input": {"id": product_gid}})
        payload = data.get("productDelete") or {}
        errors = payload.get("userErrors") or []
        if errors:
            raise RemoteApplicationError("productDelete", errors)
        logger.info("shopify product deleted id=%s", product_gid)
        return payload

    # ── Create workflow ───────────────────────────────────────────

    def create_product(self, data: Dict[str, Any]) -> ProvisioningResult:
        """
        Provision a product with its options, media and variants.

        Args:
            data: ``{"product": {...}}`` in REST shape (see ``product.create`` schema)

        Returns:
            ProvisioningResult: per-step outcomes; ``failed`` is set only when
            the base product could not be created.

        Raises:
            ValidationFailure: the document fails ``product.create``
            MissingOptionDefinition: a variant selects an undeclared option slot
            TransportFailure: a call failed at the transport level
        """
        require_valid("product.create", data)
        product = data["product"]
        option_names = _option_names(product)
        variants = product.get("variants") or []
        for variant in variants:
            check_option_bindings(variant, len(option_names))

        result = ProvisioningResult()
        self._create_base(product, result)
        if result.failed:
            return result

        try:
            images = _collect_images(product)
            if images:
                self._attach_media(result.product_id, images, result)
            if variants:
                self._create_variants(
                    result.product_id,
                    variants,
                    option_names,
                    has_primary_image=bool(product.get("image")),
                    result=result,
                )
        finally:
            if result.default_variant_id:
                self._delete_default_variant(result)

        logger.info(
            "shopify product provisioned id=%s steps=%s errors=%s",
            result.product_id, result.steps, result.has_errors,
        )
        return result

    def _create_base(self, product: Dict[str, Any], result: ProvisioningResult) -> None:
        product_input = product_to_remote(product)
        logger.info("shopify productCreate input=%s", product_input)
        data = self._graphql.query(MUTATION_PRODUCT_CREATE, {"input": product_input})
        result.steps.append("create_base")

        payload = data.get("productCreate") or {}
        errors = payload.get("userErrors") or []
        created = payload.get("product") or {}
        if errors or not created.get("id"):
            result.failed = True
            result.user_errors = errors or [
                {"field": None, "message": "productCreate returned no product"}
            ]
            logger.info("shopify productCreate failed errors=%s", result.user_errors)
            return

        result.product = created
        result.product_id = created["id"]
        result.handle = created.get("handle")

        # Shopify injects one default variant for the placeholder option values;
        # without options there is nothing misconfigured to clean up.
        if product_input.get("productOptions"):
            defaults = unwrap_edges(created.get("variants"))
            if defaults:
                result.default_variant_id = defaults[0].get("id")
        logger.info(
            "shopify productCreate id=%s default_variant=%s",
            result.product_id, result.default_variant_id,
        )

    def _attach_media(
        self,
        product_id: str,
        images: Sequence[Dict[str, Any]],
        result: ProvisioningResult,
    ) -> None:
        media_input = [image_to_remote(image) for image in images]
        data = self._graphql.query(
            MUTATION_PRODUCT_CREATE_MEDIA,
            {"productId": product_id, "media": media_input},
        )
        result.steps.append("attach_media")

        payload = data.get("productCreateMedia") or {}
        result.media = payload.get("media") or []
        result.media_errors = payload.get("mediaUserErrors") or []
        if result.media_errors:
            logger.info("shopify productCreateMedia partial errors=%s", result.media_errors)

    @staticmethod
    def _resolve_media_id(
        variant: Dict[str, Any],
        media: Sequence[Dict[str, Any]],
        has_primary_image: bool,
    ) -> Optional[str]:
        """Media whose alt text equals the variant SKU; else the primary image, if any."""
        sku = variant.get("sku")
        if sku:
            for item in media:
                if item.get("alt") == sku and item.get("id"):
                    return item["id"]
        if has_primary_image and media:
            return media[0].get("id")
        return None

    def _create_variants(
        self,
        product_id: str,
        variants: Sequence[Dict[str, Any]],
        option_names: Sequence[str],
        has_primary_image: bool,
        result: ProvisioningResult,
    ) -> None:
        variants_input = [
            variant_to_remote(
                variant,
                option_names,
                media_id=self._resolve_media_id(variant, result.media, has_primary_image),
            )
            for variant in variants
        ]
        result.variants_input = variants_input
        data = self._graphql.query(
            MUTATION_VARIANTS_BULK_CREATE,
            {"productId": product_id, "variants": variants_input},
        )
        result.steps.append("create_variants")

        payload = data.get("productVariantsBulkCreate") or {}
        result.variant_errors = payload.get("userErrors") or []
        result.variants = [
            {**node, "sku": (node.get("inventoryItem") or {}).get("sku")}
            for node in payload.get("productVariants") or []
        ]
        if result.variant_errors:
            logger.info("shopify productVariantsBulkCreate errors=%s", result.variant_errors)

    def _delete_default_variant(self, result: ProvisioningResult) -> None:
        result.steps.append("delete_default_variant")
        try:
            data = self._graphql.query(
                MUTATION_VARIANTS_BULK_DELETE,
                {"productId": result.product_id, "variantsIds": [result.default_variant_id]},
            )
        except TransportFailure as exc:
            logger.warning(
                "shopify default variant cleanup failed product_id=%s variant_id=%s error=%s",
                result.product_id, result.default_variant_id, exc,
            )
            result.default_variant_deleted = False
            result.cleanup_errors = [{"field": None, "message": str(exc)}]
            return

        payload = data.get("productVariantsBulkDelete") or {}
        result.cleanup_errors = payload.get("userErrors") or []
        result.default_variant_deleted = not result.cleanup_errors
        logger.info(
            "shopify default variant cleanup product_id=%s variant_id=%s deleted=%s",
            result.product_id, result.default_variant_id, result.default_variant_deleted,
        )

    # ── Update workflow ───────────────────────────────────────────

    def update_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update base attributes, then attach media and upsert variants.

        Every supplied section is attempted even when an earlier one
        reports user errors; the raw payloads come back merged in one dict.
        Without ``options`` in the document, a variant may carry
        ``optionValues`` for the options the product already has.
        """
        require_valid("product.update", data)
        product = data["product"]
        option_names = _option_names(product)
        variants = product.get("variants") or []
        for variant in variants:
            if option_names or not variant.get("optionValues"):
                check_option_bindings(variant, len(option_names))

        product_gid = to_gid(product["id"], ResourceKind.PRODUCT)
        base = {key: value for key, value in product.items() if key not in _COLLECTION_KEYS}
        product_input = product_to_remote(base)
        logger.info("shopify productUpdate id=%s input=%s", product_gid, product_input)

        response: Dict[str, Any] = dict(
            self._graphql.query(MUTATION_PRODUCT_UPDATE, {"input": product_input})
        )

        images = _collect_images(product)
        if images:
            media_input = [image_to_remote(image) for image in images]
            response["imagesSent"] = media_input
            response["imagesResult"] = self._graphql.query(
                MUTATION_PRODUCT_CREATE_MEDIA,
                {"productId": product_gid, "media": media_input},
            )

        if variants:
            variants_input = [
                variant_to_remote(
                    variant,
                    option_names,
                    media_id=(
                        to_gid(variant["image_id"], ResourceKind.MEDIA_IMAGE)
                        if variant.get("image_id") is not None
                        else None
                    ),
                )
                for variant in variants
            ]
            response["variantsSent"] = variants_input
            response["variantsResult"] = self._graphql.query(
                MUTATION_VARIANTS_BULK_CREATE,
                {"productId": product_gid, "variants": variants_input},
            )

        return response
