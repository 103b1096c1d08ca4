"""
Keystroke handling for the active form field.
"""
from __future__ import annotations

from pydantic import BaseModel

from storefront.domain.checkout_fsm import AtPayment, AtShipping, PaymentMethod, ShippingMode
from storefront.domain.fields import (
    PAYMENT_FIELDS,
    SHIPPING_FIELDS,
    FormKind,
    InputField,
    delete_char,
    insert_char,
    next_field,
)


class InputMixin:
    """Mixin routing characters and backspace to the active field."""

    def _form_for(self, field: InputField) -> BaseModel:
        if field.form is FormKind.SHIPPING:
            return self.shipping_address
        return self.payment_info

    def handle_input_char(self, char: str) -> None:
        self.notification = None
        if self.active_input is None:
            return
        insert_char(self._form_for(self.active_input), self.active_input, char)

    def handle_input_backspace(self) -> None:
        if self.active_input is None:
            return
        delete_char(self._form_for(self.active_input), self.active_input)

    def next_input_field(self) -> None:
        self.notification = None
        match self.checkout:
            case AtShipping(mode=ShippingMode.ADD_NEW_ADDRESS):
                self.active_input = next_field(self.active_input, SHIPPING_FIELDS)
            case AtPayment(method=PaymentMethod.SSH):
                self.active_input = next_field(self.active_input, PAYMENT_FIELDS)
            case _:
                pass
