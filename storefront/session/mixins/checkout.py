"""
Checkout transitions: Cart -> Shipping -> Payment -> Confirmation -> Cart.

``next_checkout_step`` is the single "advance" action and
``prev_checkout_step`` the single "retreat" action. Validation gates
report the first empty required field as the notification and leave
the state unchanged.
"""
from __future__ import annotations

import logging

from storefront.core.exceptions import BackendException, ValidationException
from storefront.domain.checkout_fsm import (
    PAYMENT_OPTIONS,
    AtCart,
    AtConfirmation,
    AtPayment,
    AtShipping,
    PaymentMethod,
    ShippingMode,
    choose_payment_method,
    retreat_state,
)
from storefront.domain.entities import Order, PaymentInfo
from storefront.domain.fields import (
    REQUIRED_PAYMENT_FIELDS,
    REQUIRED_SHIPPING_FIELDS,
    InputField,
    validate_required,
)
from storefront.domain.navigation import cycle_next, cycle_prev
from storefront.domain.order_math import calc_shipping_cents, calc_total_cents
from storefront.session.state import Tab

logger = logging.getLogger(__name__)


class CheckoutMixin:
    """Mixin for the checkout state machine."""

    @property
    def shipping_cents(self) -> int:
        return calc_shipping_cents(self.cart.subtotal_cents(), self.region, self.flat_shipping_cents)

    @property
    def total_cents(self) -> int:
        return calc_total_cents(self.cart.subtotal_cents(), self.shipping_cents)

    async def next_checkout_step(self) -> None:
        """Advance the checkout if the current step allows it."""
        self.notification = None

        match self.checkout:
            case AtCart():
                if self.cart.is_empty():
                    return
                self.checkout = AtShipping(ShippingMode.SELECT_ADDRESS)
                self.address_select_index = 0
                self.active_input = None

            case AtShipping(mode=ShippingMode.SELECT_ADDRESS):
                # An option must be chosen explicitly via select_address_option.
                return

            case AtShipping(mode=ShippingMode.ADD_NEW_ADDRESS):
                try:
                    validate_required(self.shipping_address, REQUIRED_SHIPPING_FIELDS)
                except ValidationException as e:
                    self.notification = e.message
                    return
                await self.save_address()
                self.active_input = None
                self.checkout = AtPayment()

            case AtPayment(method=None):
                # The method is chosen via select_payment_method.
                return

            case AtPayment(method=PaymentMethod.SSH):
                try:
                    validate_required(self.payment_info, REQUIRED_PAYMENT_FIELDS)
                except ValidationException as e:
                    self.notification = e.message
                    return
                self.active_input = None
                self.checkout = AtConfirmation(PaymentMethod.SSH)

            case AtPayment(method=PaymentMethod.BROWSER):
                self.checkout = AtConfirmation(PaymentMethod.BROWSER)

            case AtConfirmation():
                if self.submit_orders and not await self._place_order():
                    return
                self._finish_checkout()
                return

        logger.info("Checkout advanced to %s", self.checkout_step.value)

    def prev_checkout_step(self) -> None:
        """Step back; from the cart step this leaves checkout for the shop."""
        self.notification = None

        match self.checkout:
            case AtCart():
                self.current_tab = Tab.SHOP
                return
            case AtShipping() | AtPayment():
                self.active_input = None
            case AtConfirmation(method=method):
                self.active_input = (
                    InputField.PAYMENT_NAME if method is PaymentMethod.SSH else None
                )

        self.checkout = retreat_state(self.checkout)

    def next_payment_option(self) -> None:
        self.payment_option_index = cycle_next(self.payment_option_index, len(PAYMENT_OPTIONS))

    def prev_payment_option(self) -> None:
        self.payment_option_index = cycle_prev(self.payment_option_index, len(PAYMENT_OPTIONS))

    def select_payment_method(self) -> None:
        if self.checkout != AtPayment():
            return
        method = choose_payment_method(self.payment_option_index)
        self.checkout = AtPayment(method)
        self.active_input = InputField.PAYMENT_NAME if method is PaymentMethod.SSH else None

    def build_order(self) -> Order:
        subtotal = self.cart.subtotal_cents()
        shipping = self.shipping_cents
        return Order(
            user_id=self.identity.fingerprint,
            items=[item.to_order_item() for item in self.cart.items],
            shipping_address=self.shipping_address.model_copy(),
            subtotal_cents=subtotal,
            shipping_cents=shipping,
            total_cents=calc_total_cents(subtotal, shipping),
        )

    async def _place_order(self) -> bool:
        order = self.build_order()
        try:
            created = await self.backend.create_order(order)
        except BackendException as e:
            logger.warning("Order submission failed: %s", e)
            self.notification = f"Failed to place order: {e.message}"
            return False
        self.orders.insert(0, created)
        logger.info("Order placed: %s (%d items)", created.id, self.cart.total_items())
        return True

    def _finish_checkout(self) -> None:
        self.cart.clear()
        self.cart_item_index = 0
        self.checkout = AtCart()
        self.active_input = None
        self.payment_info = PaymentInfo()
        self.payment_option_index = 0
        self.current_tab = Tab.HOME
        logger.info("Checkout completed, back to cart step")
