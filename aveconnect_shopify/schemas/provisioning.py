"""
Provisioning schemas — aggregate outcome of a product create workflow.

Built fresh for every workflow run and handed back to the caller;
nothing here is persisted.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ProvisioningResult(BaseModel):
    # Step 1: CreateBase
    product: Optional[Dict[str, Any]] = None
    product_id: Optional[str] = None
    handle: Optional[str] = None
    default_variant_id: Optional[str] = None
    user_errors: List[Dict[str, Any]] = Field(default_factory=list)
    failed: bool = False

    # Step 2: AttachMedia
    media: List[Dict[str, Any]] = Field(default_factory=list)
    media_errors: List[Dict[str, Any]] = Field(default_factory=list)

    # Step 3: CreateVariants
    variants: List[Dict[str, Any]] = Field(default_factory=list)
    variants_input: List[Dict[str, Any]] = Field(default_factory=list)
    variant_errors: List[Dict[str, Any]] = Field(default_factory=list)

    # Step 4: DeleteDefaultVariant
    default_variant_deleted: Optional[bool] = None
    cleanup_errors: List[Dict[str, Any]] = Field(default_factory=list)

    steps: List[str] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(
            self.user_errors or self.media_errors or self.variant_errors or self.cleanup_errors
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
