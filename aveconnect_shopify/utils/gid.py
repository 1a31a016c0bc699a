"""
Global identifier helpers — bare numeric ids <-> ``gid://shopify/<Kind>/<n>``.

REST endpoints speak bare numbers, GraphQL speaks namespaced global ids.
``normalize`` is idempotent: feeding its output back in returns an equal
identifier, so callers can normalize at every boundary without tracking
which form they hold.
"""
import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from aveconnect_shopify.core.constants.shopify import GID_PREFIX
from aveconnect_shopify.core.exceptions import InvalidIdentifier


class ResourceKind(str, Enum):
    PRODUCT = "Product"
    ORDER = "Order"
    PRODUCT_VARIANT = "ProductVariant"
    INVENTORY_ITEM = "InventoryItem"
    IMAGE = "Image"
    MEDIA_IMAGE = "MediaImage"
    LOCATION = "Location"
    FULFILLMENT_ORDER = "FulfillmentOrder"
    METAFIELD = "Metafield"


_ANY_GID = re.compile(r"^gid://[^/]+/[A-Za-z]+/(\d+)(\?.*)?$")
_NON_DIGITS = re.compile(r"\D")


class GlobalIdentifier(BaseModel):
    """Bare numeric id tagged with its resource kind."""

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    numeric_id: str

    @property
    def gid(self) -> str:
        return f"{GID_PREFIX}{self.kind.value}/{self.numeric_id}"

    def __str__(self) -> str:
        return self.gid


IdLike = Union[str, int, GlobalIdentifier]


def _kind_pattern(kind: ResourceKind) -> re.Pattern:
    return re.compile(rf"^{re.escape(GID_PREFIX)}{kind.value}/(\d+)$")


def normalize(raw_id: IdLike, kind: ResourceKind) -> GlobalIdentifier:
    """
    Normalize ``raw_id`` into a ``kind`` global identifier.

    - ``gid://shopify/<kind>/<n>`` is returned as the same identifier
    - anything else has every non-digit stripped and the digits wrapped

    Raises:
        InvalidIdentifier: when no digits remain after stripping
    """
    kind = ResourceKind(kind)
    if isinstance(raw_id, GlobalIdentifier):
        if raw_id.kind == kind:
            return raw_id
        raw_id = raw_id.numeric_id

    text = str(raw_id) if raw_id is not None else ""
    match = _kind_pattern(kind).match(text)
    if match:
        return GlobalIdentifier(kind=kind, numeric_id=match.group(1))

    digits = _NON_DIGITS.sub("", text)
    if not digits:
        raise InvalidIdentifier(raw_id, kind.value)
    return GlobalIdentifier(kind=kind, numeric_id=digits)


def to_gid(raw_id: IdLike, kind: ResourceKind) -> str:
    """Shorthand for ``str(normalize(raw_id, kind))``."""
    return normalize(raw_id, kind).gid


def is_gid(value: object, kind: Optional[ResourceKind] = None) -> bool:
    if not isinstance(value, str):
        return False
    if kind is None:
        return bool(_ANY_GID.match(value))
    return bool(_kind_pattern(ResourceKind(kind)).match(value))


def to_bare_id(value: Optional[IdLike]) -> Optional[str]:
    """
    Rewrite any global id back to its bare number.

    Bare ids pass through as strings and ``None`` stays ``None`` so the
    helper can be applied blindly to optional fields of remote nodes.
    """
    if value is None:
        return None
    if isinstance(value, GlobalIdentifier):
        return value.numeric_id
    text = str(value)
    match = _ANY_GID.match(text)
    if match:
        return match.group(1)
    return text
