"""
Cart-tab line selection and quantity edits.
"""
from __future__ import annotations

from storefront.domain.cart import CartItem
from storefront.domain.navigation import clamp_index, cycle_next, cycle_prev


class CartMixin:
    """Mixin for editing cart lines from the cart tab."""

    @property
    def selected_cart_item(self) -> CartItem | None:
        if 0 <= self.cart_item_index < len(self.cart.items):
            return self.cart.items[self.cart_item_index]
        return None

    def next_cart_item(self) -> None:
        self.cart_item_index = cycle_next(self.cart_item_index, len(self.cart.items))

    def prev_cart_item(self) -> None:
        self.cart_item_index = cycle_prev(self.cart_item_index, len(self.cart.items))

    def increment_selected_item(self) -> None:
        item = self.selected_cart_item
        if item is not None:
            self.cart.increment(item.product_id)

    def decrement_selected_item(self) -> None:
        item = self.selected_cart_item
        if item is not None:
            self.cart.decrement(item.product_id)
            self.cart_item_index = clamp_index(self.cart_item_index, len(self.cart.items))

    def remove_selected_item(self) -> None:
        item = self.selected_cart_item
        if item is not None:
            self.cart.remove(item.product_id)
            self.cart_item_index = clamp_index(self.cart_item_index, len(self.cart.items))
