"""
Saved shipping addresses: loading, persisting, deleting and selecting.

Addresses are a convenience. Backend failures here are logged and
swallowed so checkout can always continue.
"""
from __future__ import annotations

import logging

from storefront.core.exceptions import BackendException
from storefront.domain.checkout_fsm import AtPayment, AtShipping, ShippingMode
from storefront.domain.entities import SavedAddress, ShippingAddress
from storefront.domain.fields import SHIPPING_FIELDS
from storefront.domain.navigation import clamp_index, cycle_next, cycle_prev

logger = logging.getLogger(__name__)

MAX_SAVED_ADDRESSES = 3


class AddressMixin:
    """Mixin for the shipping step's saved-address list."""

    @property
    def address_option_count(self) -> int:
        """Saved addresses plus the trailing "add new address" option."""
        return len(self.saved_addresses) + 1

    @property
    def is_selecting_address(self) -> bool:
        return self.checkout == AtShipping(ShippingMode.SELECT_ADDRESS)

    async def load_saved_addresses(self) -> None:
        try:
            addresses = await self.backend.get_saved_addresses(self.identity.fingerprint)
        except BackendException as e:
            logger.warning("Saved address load failed: %s", e)
            addresses = []
        self.saved_addresses = addresses[:MAX_SAVED_ADDRESSES]
        self.address_select_index = clamp_index(self.address_select_index, self.address_option_count)

    async def save_address(self) -> None:
        """Persist the working address unless incomplete, a duplicate, or over the limit."""
        address = self.shipping_address
        if not address.is_complete() or len(self.saved_addresses) >= MAX_SAVED_ADDRESSES:
            return
        if any(saved.matches(address) for saved in self.saved_addresses):
            return

        draft = SavedAddress.from_shipping(address, self.identity.fingerprint)
        try:
            created = await self.backend.save_address(draft)
        except BackendException as e:
            logger.warning("Saving address failed: %s", e)
            return

        self.saved_addresses.insert(0, created)
        del self.saved_addresses[MAX_SAVED_ADDRESSES:]

    async def delete_address(self, index: int) -> None:
        if not 0 <= index < len(self.saved_addresses):
            return
        address = self.saved_addresses[index]
        if address.id is not None:
            try:
                await self.backend.delete_address(address.id)
            except BackendException as e:
                logger.warning("Deleting address %s failed: %s", address.id, e)
        del self.saved_addresses[index]
        self.address_select_index = clamp_index(self.address_select_index, self.address_option_count)

    async def remove_selected_address(self) -> None:
        if self.address_select_index < len(self.saved_addresses):
            await self.delete_address(self.address_select_index)

    def next_address_option(self) -> None:
        self.address_select_index = cycle_next(self.address_select_index, self.address_option_count)

    def prev_address_option(self) -> None:
        self.address_select_index = cycle_prev(self.address_select_index, self.address_option_count)

    def select_address_option(self) -> None:
        """Use the highlighted saved address, or open the new-address form."""
        if not self.is_selecting_address:
            return
        if self.address_select_index < len(self.saved_addresses):
            self.shipping_address = self.saved_addresses[self.address_select_index].to_shipping()
            self.active_input = None
            self.checkout = AtPayment()
            logger.info("Checkout: saved address selected, moving to payment")
        else:
            self.checkout = AtShipping(ShippingMode.ADD_NEW_ADDRESS)
            self.shipping_address = ShippingAddress()
            self.active_input = SHIPPING_FIELDS[0]
