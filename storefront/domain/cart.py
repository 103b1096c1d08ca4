"""Session cart: one line per product, quantities always positive."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from storefront.core.utils import format_whole

from .entities import OrderItem, Product


@dataclass
class CartItem:
    """Single line in the cart.

    ``product`` is a snapshot taken when the line was created; reloading the
    catalog does not change it.
    """

    product: Product
    quantity: int
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def total_cents(self) -> int:
        return self.product.price_cents * self.quantity

    @property
    def total_display(self) -> str:
        return format_whole(self.total_cents)

    def to_order_item(self) -> OrderItem:
        return OrderItem(id=self.id, product=self.product, quantity=self.quantity)


@dataclass
class Cart:
    """Ordered cart lines keyed by product id for merging."""

    items: list[CartItem] = field(default_factory=list)

    def find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    def add(self, product: Product, quantity: int = 1) -> None:
        """Merge into the existing line for this product or append a new one."""
        if quantity < 1:
            return
        item = self.find(product.id)
        if item is not None:
            item.quantity += quantity
        else:
            self.items.append(CartItem(product=product, quantity=quantity))

    def remove(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product.id != product_id]

    def set_quantity(self, product_id: str, quantity: int) -> None:
        item = self.find(product_id)
        if item is None:
            return
        if quantity <= 0:
            self.remove(product_id)
        else:
            item.quantity = quantity

    def increment(self, product_id: str) -> None:
        item = self.find(product_id)
        if item is not None:
            item.quantity += 1

    def decrement(self, product_id: str) -> None:
        item = self.find(product_id)
        if item is None:
            return
        if item.quantity > 1:
            item.quantity -= 1
        else:
            self.remove(product_id)

    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def subtotal_cents(self) -> int:
        return sum(item.total_cents for item in self.items)

    @property
    def subtotal_display(self) -> str:
        return format_whole(self.subtotal_cents())

    def is_empty(self) -> bool:
        return not self.items

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)
