"""Region entity model."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from storefront.core.utils import format_whole

DEFAULT_REGION_ID = "global"
DEFAULT_FREE_SHIPPING_THRESHOLD = 4000


class Region(BaseModel):
    """Sales region with its currency and free-shipping threshold."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    code: str
    flag: str = "🌎"
    currency: str = "USD"
    free_shipping_threshold: int = Field(
        DEFAULT_FREE_SHIPPING_THRESHOLD, ge=0, description="Threshold in minor units"
    )

    @classmethod
    def default(cls) -> Region:
        return cls(
            id=DEFAULT_REGION_ID,
            name="Global",
            code="Global",
            flag="🌎",
            currency="USD",
            free_shipping_threshold=DEFAULT_FREE_SHIPPING_THRESHOLD,
        )

    @property
    def label(self) -> str:
        return f"{self.flag} ({self.code})"

    @property
    def free_shipping_hint(self) -> str:
        return f"free shipping on {self.code} orders over {format_whole(self.free_shipping_threshold)}"
