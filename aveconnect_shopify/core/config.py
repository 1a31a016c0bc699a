import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict


load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Shopify
    shopify_store_domain: Optional[str] = os.getenv("SHOPIFY_STORE_DOMAIN")
    shopify_admin_api_token: Optional[str] = os.getenv("SHOPIFY_ADMIN_API_TOKEN")
    shopify_api_version: str = os.getenv("SHOPIFY_API_VERSION", "2025-07")
    shopify_request_timeout: float = float(os.getenv("SHOPIFY_REQUEST_TIMEOUT", "30"))

    # Order status side-channel (json metafield written after order mutations)
    shopify_status_namespace: str = os.getenv("SHOPIFY_STATUS_NAMESPACE", "aveconnect")
    shopify_status_key: str = os.getenv("SHOPIFY_STATUS_KEY", "status")
    shopify_status_sync_enabled: bool = os.getenv("SHOPIFY_STATUS_SYNC_ENABLED", "true").lower() == "true"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = Settings()
