import logging
from typing import Any, Dict, Optional

import httpx

from aveconnect_shopify.core.config import Settings
from aveconnect_shopify.core.exceptions import (
    ConfigurationError,
    ConnectionTimeoutError,
    TransportFailure,
)

logger = logging.getLogger("shopify_client")


class ShopifyClient:
    """REST transport for the Shopify Admin API (``/admin/api/<version>/...json``)."""

    def __init__(self, settings: Settings) -> None:
        raw_domain = settings.shopify_store_domain
        self._store_domain = self._normalize_store_domain(raw_domain)
        self._token = settings.shopify_admin_api_token
        self._api_version = settings.shopify_api_version
        self._timeout = settings.shopify_request_timeout
        logger.info(
            "ShopifyClient initialized: domain=%s (raw: %s) version=%s",
            self._store_domain, raw_domain, self._api_version,
        )

    @property
    def api_version(self) -> str:
        return self._api_version

    @staticmethod
    def _normalize_store_domain(domain: Optional[str]) -> Optional[str]:
        """
        Normalize Shopify store domain to ensure it has .myshopify.com suffix.

        Handles these formats:
        - "my-store" -> "my-store.myshopify.com"
        - "my-store.myshopify.com" -> "my-store.myshopify.com" (unchanged)
        - "https://my-store.myshopify.com" -> "my-store.myshopify.com" (strips protocol)
        """
        if not domain:
            return domain

        domain = domain.replace("https://", "").replace("http://", "")
        domain = domain.rstrip("/")

        if not domain.endswith(".myshopify.com"):
            domain = f"{domain}.myshopify.com"

        return domain

    def _base_url(self) -> str:
        if not self._store_domain or not self._token:
            raise ConfigurationError("Shopify store domain or access token missing")
        return f"https://{self._store_domain}/admin/api/{self._api_version}"

    def call_shopify(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Issue one REST call and return the decoded JSON body.

        ``path`` is relative to the versioned base, with or without a
        leading slash (``"/products.json"`` or ``"products/1.json"``).

        Raises:
            TransportFailure: non-2xx status or undecodable body
            ConnectionTimeoutError: the request timed out
        """
        base = self._base_url()
        url = f"{base}/{path.lstrip('/')}"
        logger.info("shopify request method=%s path=%s params=%s", method, path, params)

        headers = {
            "X-Shopify-Access-Token": self._token or "",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.request(method=method, url=url, headers=headers, json=json, params=params)
        except httpx.TimeoutException as exc:
            logger.error("shopify timeout method=%s path=%s error=%s", method, path, exc)
            raise ConnectionTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error("shopify transport error method=%s path=%s error=%s", method, path, exc)
            raise TransportFailure(str(exc)) from exc

        logger.info("shopify response status=%s path=%s", resp.status_code, path)
        if resp.status_code >= 400:
            raise TransportFailure(resp.text, status_code=resp.status_code)

        if not resp.text:
            return {}
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportFailure(
                f"Invalid JSON body: {resp.text[:200]}", status_code=resp.status_code
            ) from exc

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.call_shopify("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.call_shopify("POST", path, json=json)

    def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.call_shopify("PUT", path, json=json)

    def delete(self, path: str) -> Dict[str, Any]:
        return self.call_shopify("DELETE", path)
