"""
AveConnect Shopify — Admin API client with multi-step product provisioning.
"""
from aveconnect_shopify.container import AveConnectShopify
from aveconnect_shopify.core.config import Settings, get_settings
from aveconnect_shopify.core.exceptions import (
    AveConnectShopifyError,
    ConfigurationError,
    ConnectionTimeoutError,
    InvalidArgument,
    InvalidIdentifier,
    MissingDependencyError,
    MissingOptionDefinition,
    NonRetryableError,
    RemoteApplicationError,
    RetryableError,
    TransportFailure,
    ValidationFailure,
)
from aveconnect_shopify.schemas.provisioning import ProvisioningResult
from aveconnect_shopify.utils.gid import GlobalIdentifier, ResourceKind, normalize, to_gid
from aveconnect_shopify.utils.validation import validate

__version__ = "1.0.0"

__all__ = [
    "AveConnectShopify",
    "Settings",
    "get_settings",
    "AveConnectShopifyError",
    "ConfigurationError",
    "ConnectionTimeoutError",
    "InvalidArgument",
    "InvalidIdentifier",
    "MissingDependencyError",
    "MissingOptionDefinition",
    "NonRetryableError",
    "RemoteApplicationError",
    "RetryableError",
    "TransportFailure",
    "ValidationFailure",
    "ProvisioningResult",
    "GlobalIdentifier",
    "ResourceKind",
    "normalize",
    "to_gid",
    "validate",
]
