"""Value Objects for domain model."""
from __future__ import annotations

from enum import Enum


class ProductCategory(str, Enum):
    """Catalog sections."""

    FEATURED = "featured"
    ORIGINALS = "originals"

    @property
    def label(self) -> str:
        return f"~ {self.value} ~"


class RoastLevel(str, Enum):
    """Coffee roast levels."""

    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"

    @property
    def label(self) -> str:
        return f"{self.value} roast"


class ProductType(str, Enum):
    """How a product is sold."""

    SUBSCRIPTION = "subscription"
    ONE_TIME = "one_time"


class OrderStatus(str, Enum):
    """Order lifecycle statuses."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class SubscriptionStatus(str, Enum):
    """Subscription statuses."""

    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"


__all__ = [
    "ProductCategory",
    "RoastLevel",
    "ProductType",
    "OrderStatus",
    "SubscriptionStatus",
]
