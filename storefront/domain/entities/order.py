"""Order and subscription snapshot models."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.core.utils import format_cents
from storefront.domain.value_objects import OrderStatus, SubscriptionStatus

from .address import ShippingAddress
from .product import Product


class OrderItem(BaseModel):
    """Purchased line: the product as it was when added, and its quantity."""

    id: str
    product: Product
    quantity: int = Field(..., gt=0)

    @property
    def total_cents(self) -> int:
        return self.product.price_cents * self.quantity


class Order(BaseModel):
    """Completed purchase as stored by the backend."""

    id: str | None = Field(None, description="Backend-assigned ID")
    user_id: str
    items: list[OrderItem] = Field(default_factory=list)
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    subtotal_cents: int = Field(0, ge=0)
    shipping_cents: int = Field(0, ge=0)
    total_cents: int = Field(0, ge=0)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def short_id(self) -> str:
        return (self.id or "")[:8]

    @property
    def total_display(self) -> str:
        return format_cents(self.total_cents)

    @property
    def subtotal_display(self) -> str:
        return format_cents(self.subtotal_cents)

    @property
    def shipping_display(self) -> str:
        return format_cents(self.shipping_cents)

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class Subscription(BaseModel):
    """Recurring delivery of a subscription product."""

    id: str | None = None
    user_id: str
    product_id: str
    product_name: str
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    next_delivery: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
