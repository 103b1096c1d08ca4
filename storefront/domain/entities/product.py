"""Product entity model."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from storefront.core.utils import format_whole
from storefront.domain.value_objects import ProductCategory, ProductType, RoastLevel


class Product(BaseModel):
    """Catalog product; replaced wholesale on reload, never edited."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    id: str = Field(..., description="Opaque product ID")
    name: str
    slug: str = ""
    description: str = ""
    price_cents: int = Field(..., ge=0, description="Unit price in minor units")
    category: ProductCategory = ProductCategory.ORIGINALS
    roast_level: RoastLevel | None = None
    weight_oz: int = 12
    bean_type: str = "whole beans"
    product_type: ProductType = ProductType.ONE_TIME
    highlight_color: str = "#ff24bd"
    region_id: str = ""
    in_stock: bool = True

    @property
    def is_subscription(self) -> bool:
        return self.product_type == ProductType.SUBSCRIPTION

    @property
    def price_display(self) -> str:
        return format_whole(self.price_cents)

    @property
    def details_line(self) -> str:
        """Roast, weight and bean type (weight only when unroasted)."""
        if self.roast_level is not None:
            return f"{self.roast_level.label} | {self.weight_oz}oz | {self.bean_type}"
        return f"{self.weight_oz}oz"
