"""Checkout steps and their sub-modes as mutually exclusive states.

Each state is a small frozen record; the session holds exactly one of them.
Transitions that need the backend or touch session data live in the
checkout mixin; the pure parts (state shapes, backward moves) live here.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias, assert_never


class CheckoutStep(str, Enum):
    CART = "cart"
    SHIPPING = "shipping"
    PAYMENT = "payment"
    CONFIRMATION = "confirmation"

    @property
    def label(self) -> str:
        return self.value


CHECKOUT_STEPS: tuple[CheckoutStep, ...] = tuple(CheckoutStep)


class ShippingMode(str, Enum):
    SELECT_ADDRESS = "select_address"
    ADD_NEW_ADDRESS = "add_new_address"


class PaymentMethod(str, Enum):
    SSH = "ssh"
    BROWSER = "browser"

    @property
    def label(self) -> str:
        return "pay in terminal" if self is PaymentMethod.SSH else "pay in browser"


# Index order of the payment-method list.
PAYMENT_OPTIONS: tuple[PaymentMethod, ...] = (PaymentMethod.SSH, PaymentMethod.BROWSER)


@dataclass(frozen=True, slots=True)
class AtCart:
    step: ClassVar[CheckoutStep] = CheckoutStep.CART


@dataclass(frozen=True, slots=True)
class AtShipping:
    mode: ShippingMode = ShippingMode.SELECT_ADDRESS
    step: ClassVar[CheckoutStep] = CheckoutStep.SHIPPING


@dataclass(frozen=True, slots=True)
class AtPayment:
    """``method`` unset means the method list is shown."""

    method: PaymentMethod | None = None
    step: ClassVar[CheckoutStep] = CheckoutStep.PAYMENT


@dataclass(frozen=True, slots=True)
class AtConfirmation:
    method: PaymentMethod
    step: ClassVar[CheckoutStep] = CheckoutStep.CONFIRMATION


CheckoutState: TypeAlias = AtCart | AtShipping | AtPayment | AtConfirmation


def payment_method_of(state: CheckoutState) -> PaymentMethod | None:
    match state:
        case AtPayment(method=method) | AtConfirmation(method=method):
            return method
        case AtCart() | AtShipping():
            return None
        case _:
            assert_never(state)


def shipping_mode_of(state: CheckoutState) -> ShippingMode | None:
    match state:
        case AtShipping(mode=mode):
            return mode
        case AtCart() | AtPayment() | AtConfirmation():
            return None
        case _:
            assert_never(state)


def retreat_state(state: CheckoutState) -> CheckoutState:
    """Backward move for every state (``AtCart`` stays put; leaving is the caller's job)."""
    match state:
        case AtCart():
            return state
        case AtShipping(mode=ShippingMode.ADD_NEW_ADDRESS):
            return AtShipping(ShippingMode.SELECT_ADDRESS)
        case AtShipping(mode=ShippingMode.SELECT_ADDRESS):
            return AtCart()
        case AtPayment():
            return AtShipping(ShippingMode.SELECT_ADDRESS)
        case AtConfirmation(method=method):
            return AtPayment(method)
        case _:
            assert_never(state)


def choose_payment_method(option_index: int) -> PaymentMethod:
    """Index 0 is the in-terminal form; anything else is the browser hand-off."""
    return PaymentMethod.SSH if option_index == 0 else PaymentMethod.BROWSER
