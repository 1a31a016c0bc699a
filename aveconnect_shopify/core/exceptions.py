"""
Custom exception hierarchy for the AveConnect Shopify SDK.

Exceptions are categorized as:
- RetryableError: transport-level failures the caller may choose to retry
- NonRetryableError: permanent errors (bad input, missing upstream data,
  remote rejections) where retrying the same request won't help

The SDK itself never retries; the split exists so callers can wire
their own retry policy with a single ``except RetryableError``.
"""
from typing import Any, Dict, List, Optional


class AveConnectShopifyError(Exception):
    """Base exception for the AveConnect Shopify SDK."""
    pass


# ============================================
# RETRYABLE ERRORS
# ============================================
class RetryableError(AveConnectShopifyError):
    """
    Base class for errors where a retry might succeed.

    - Network timeouts
    - Temporary service unavailability (5xx)
    """
    pass


class TransportFailure(RetryableError):
    """
    Connection or HTTP-level failure talking to Shopify.

    Covers non-2xx responses, undecodable bodies and GraphQL envelopes
    carrying top-level ``errors``.
    """
    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.detail = detail
        self.status_code = status_code
        message = f"Shopify API error: {detail}"
        if status_code is not None:
            message = f"Shopify API error ({status_code}): {detail}"
        super().__init__(message)


class ConnectionTimeoutError(TransportFailure):
    """Connection or timeout error - typically transient."""
    pass


# ============================================
# NON-RETRYABLE ERRORS
# ============================================
class NonRetryableError(AveConnectShopifyError):
    """
    Base class for errors that should NOT be retried.

    - Validation failures
    - Identifiers that cannot be normalized
    - Missing upstream resources
    - Remote application errors (userErrors)
    """
    pass


class ConfigurationError(NonRetryableError):
    """Shop domain or access token missing."""
    pass


class ValidationFailure(NonRetryableError):
    """
    Input document rejected by a schema before any network call.

    ``violations`` is a list of ``{"path": ..., "message": ...}`` dicts.
    """
    def __init__(self, schema: str, violations: List[Dict[str, str]]):
        self.schema = schema
        self.violations = violations
        summary = "; ".join(f"{v['path']}: {v['message']}" for v in violations)
        super().__init__(f"{schema} validation failed: {summary}")


class InvalidArgument(ValidationFailure):
    """A scalar argument (e.g. a cancel reason) is outside its allowed set."""
    pass


class InvalidIdentifier(NonRetryableError):
    """Identifier contains no digits to build a global id from."""
    def __init__(self, raw_id: Any, kind: str):
        self.raw_id = raw_id
        self.kind = kind
        super().__init__(f"Cannot build a {kind} global id from {raw_id!r}")


class MissingOptionDefinition(NonRetryableError):
    """A variant references option position n but fewer options are declared."""
    def __init__(self, position: int, declared: int):
        self.position = position
        self.declared = declared
        super().__init__(
            f"Variant references option{position} but product declares {declared} option(s)"
        )


class MissingDependencyError(NonRetryableError):
    """An upstream identifier a step depends on was not found."""
    def __init__(self, dependency: str, message: Optional[str] = None):
        self.dependency = dependency
        super().__init__(message or f"Required {dependency} not found")


class RemoteApplicationError(NonRetryableError):
    """
    Shopify executed the call but rejected it (``userErrors``).

    Raised only by single-shot operations; composite workflows record
    user errors into their result instead.
    """
    def __init__(self, operation: str, user_errors: List[Dict[str, Any]]):
        self.operation = operation
        self.user_errors = user_errors
        messages = "; ".join(str(e.get("message")) for e in user_errors)
        super().__init__(f"{operation} failed: {messages}")
