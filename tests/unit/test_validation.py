"""
Unit tests for the schema validator adapter and the schema catalogue.
"""
import copy

import pytest

from aveconnect_shopify.core.exceptions import InvalidArgument, ValidationFailure
from aveconnect_shopify.schemas.catalogue import PRODUCT_FIELDS, SCHEMAS
from aveconnect_shopify.utils.validation import FieldRule, relaxed, require_valid, validate


pytestmark = pytest.mark.unit


def _paths(result):
    return [v["path"] for v in result.violations]


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

class TestValidate:
    """Tests for validate against catalogue schemas."""

    def test_valid_product_create(self, sample_product):
        assert validate("product.create", sample_product).ok is True

    def test_missing_title(self):
        result = validate("product.create", {"product": {"vendor": "V"}})
        assert result.ok is False
        assert "product.title" in _paths(result)

    def test_missing_product_object(self):
        result = validate("product.create", {})
        assert result.ok is False
        assert "product" in _paths(result)

    def test_bad_variant_price_reports_indexed_path(self):
        doc = {"product": {"title": "T", "variants": [{"price": "10.00"}, {"price": "1.234"}]}}
        result = validate("product.create", doc)
        assert result.ok is False
        assert _paths(result) == ["product.variants[1].price"]

    def test_numeric_price_rejected(self):
        doc = {"product": {"title": "T", "variants": [{"price": 10}]}}
        assert validate("product.create", doc).ok is False

    def test_status_enum(self):
        doc = {"product": {"title": "T", "status": "LIVE"}}
        assert validate("product.create", doc).ok is False

    def test_rest_status_is_lowercase(self):
        assert validate("product.rest.create", {"product": {"title": "T", "status": "draft"}}).ok
        assert not validate("product.rest.create", {"product": {"title": "T", "status": "DRAFT"}}).ok

    def test_image_url_must_be_image(self):
        doc = {"product": {"title": "T", "images": [{"src": "https://x/a.pdf"}]}}
        result = validate("product.create", doc)
        assert _paths(result) == ["product.images[0].src"]

    def test_unknown_fields_allowed(self):
        doc = {"product": {"title": "T", "metafields_global_title_tag": "x"}}
        assert validate("product.create", doc).ok is True

    def test_does_not_mutate_document(self, sample_product):
        before = copy.deepcopy(sample_product)
        validate("product.create", sample_product)
        assert sample_product == before

    def test_update_requires_only_id(self):
        assert validate("product.update", {"product": {"id": "123"}}).ok is True
        assert validate("product.update", {"product": {"title": "T"}}).ok is False

    def test_update_still_checks_nested_rules(self):
        doc = {"product": {"id": "1", "variants": [{"price": "abc"}]}}
        assert validate("product.update", doc).ok is False

    def test_update_variants_need_no_price(self):
        doc = {"product": {"id": "1", "variants": [{"sku": "A"}]}}
        assert validate("product.update", doc).ok is True

    def test_order_cancel_reason(self):
        assert validate("order.cancel", {"order_id": "1", "reason": "FRAUD"}).ok is True
        assert validate("order.cancel", {"order_id": "1", "reason": "MAYBE"}).ok is False

    def test_transaction_currency(self):
        doc = {"transaction": {"currency": "usd", "amount": "1.00", "kind": "capture"}}
        assert _paths(validate("transaction.create", doc)) == ["transaction.currency"]

    def test_line_item_quantity_minimum(self):
        doc = {"order": {"line_items": [{"quantity": 0}]}}
        assert _paths(validate("order.rest.create", doc)) == ["order.line_items[0].quantity"]

    def test_image_id_must_be_integer(self):
        assert validate("variant.update", {"variant": {"id": "1", "image_id": 123}}).ok is True
        result = validate("variant.update", {"variant": {"id": "1", "image_id": 123.0}})
        assert _paths(result) == ["variant.image_id"]

    def test_unknown_schema(self):
        with pytest.raises(ValueError):
            validate("nope", {})

    def test_non_mapping_document(self):
        result = validate("order.note", None)
        assert result.ok is False
        assert _paths(result) == ["document"]

    def test_every_catalogue_schema_builds(self):
        for name in SCHEMAS:
            assert validate(name, {}).ok in (True, False)


# ---------------------------------------------------------------------------
# require_valid
# ---------------------------------------------------------------------------

class TestRequireValid:
    """Tests for require_valid."""

    def test_passes_silently(self):
        assert require_valid("order.note", {"order": {"id": "1", "note": "n"}}) is None

    def test_raises_validation_failure(self):
        with pytest.raises(ValidationFailure) as exc_info:
            require_valid("order.note", {"order": {"id": "1"}})
        assert exc_info.value.schema == "order.note"
        assert exc_info.value.violations[0]["path"] == "order.note"

    def test_custom_error_class(self):
        with pytest.raises(InvalidArgument):
            require_valid("order.cancel", {"order_id": "1", "reason": "MAYBE"}, error_cls=InvalidArgument)


# ---------------------------------------------------------------------------
# relaxed
# ---------------------------------------------------------------------------

class TestRelaxed:
    """Tests for relaxed."""

    def test_drops_required(self):
        fields = relaxed(PRODUCT_FIELDS)
        assert fields["title"].required is False

    def test_keeps_requested(self):
        fields = relaxed(PRODUCT_FIELDS, keep_required=("title",))
        assert fields["title"].required is True

    def test_keeps_other_rules(self):
        fields = relaxed(PRODUCT_FIELDS)
        assert fields["title"].pattern == PRODUCT_FIELDS["title"].pattern

    def test_recurses_into_array_items(self):
        fields = relaxed(PRODUCT_FIELDS)
        assert fields["variants"].items.fields["price"].required is False
        assert PRODUCT_FIELDS["variants"].items.fields["price"].required is True

    def test_nested_object(self):
        table = {"a": FieldRule("object", fields={"b": FieldRule("string", required=True)})}
        assert relaxed(table)["a"].fields["b"].required is False
