"""Checkout form fields: ordering, labels and per-keystroke edit rules."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from storefront.core.exceptions import ValidationException


class FormKind(str, Enum):
    SHIPPING = "shipping"
    PAYMENT = "payment"


class InputField(str, Enum):
    """Input targets; "no active field" is represented by ``None``."""

    # Shipping (left column, then right column)
    NAME = "name"
    STREET_1 = "street_1"
    STREET_2 = "street_2"
    CITY = "city"
    STATE = "state"
    COUNTRY = "country"
    PHONE = "phone"
    POSTAL_CODE = "postal_code"
    # Payment
    PAYMENT_NAME = "payment_name"
    PAYMENT_EMAIL = "payment_email"
    CARD_NUMBER = "card_number"
    EXPIRY_MONTH = "expiry_month"
    EXPIRY_YEAR = "expiry_year"
    CVV = "cvv"

    @property
    def rules(self) -> FieldRules:
        return FIELD_RULES[self]

    @property
    def form(self) -> FormKind:
        return FIELD_RULES[self].form


@dataclass(frozen=True, slots=True)
class FieldRules:
    form: FormKind
    attribute: str
    label: str
    digits_only: bool = False
    max_length: int | None = None

    def accepts(self, current: str, char: str) -> bool:
        """Whether typing ``char`` onto ``current`` is allowed."""
        if self.digits_only and not (len(char) == 1 and char in "0123456789"):
            return False
        if self.max_length is not None and len(current) >= self.max_length:
            return False
        return True


FIELD_RULES: dict[InputField, FieldRules] = {
    InputField.NAME: FieldRules(FormKind.SHIPPING, "name", "name"),
    InputField.STREET_1: FieldRules(FormKind.SHIPPING, "street_1", "street"),
    InputField.STREET_2: FieldRules(FormKind.SHIPPING, "street_2", "street 2"),
    InputField.CITY: FieldRules(FormKind.SHIPPING, "city", "city"),
    InputField.STATE: FieldRules(FormKind.SHIPPING, "state", "state"),
    InputField.COUNTRY: FieldRules(FormKind.SHIPPING, "country", "country"),
    InputField.PHONE: FieldRules(FormKind.SHIPPING, "phone", "phone"),
    InputField.POSTAL_CODE: FieldRules(FormKind.SHIPPING, "postal_code", "postal code"),
    InputField.PAYMENT_NAME: FieldRules(FormKind.PAYMENT, "name", "name"),
    InputField.PAYMENT_EMAIL: FieldRules(FormKind.PAYMENT, "email", "email"),
    InputField.CARD_NUMBER: FieldRules(
        FormKind.PAYMENT, "card_number", "card number", digits_only=True, max_length=16
    ),
    InputField.EXPIRY_MONTH: FieldRules(
        FormKind.PAYMENT, "expiry_month", "expiry month", digits_only=True, max_length=2
    ),
    InputField.EXPIRY_YEAR: FieldRules(
        FormKind.PAYMENT, "expiry_year", "expiry year", digits_only=True, max_length=4
    ),
    InputField.CVV: FieldRules(FormKind.PAYMENT, "cvv", "cvv", digits_only=True, max_length=3),
}

SHIPPING_FIELDS: tuple[InputField, ...] = (
    InputField.NAME,
    InputField.STREET_1,
    InputField.STREET_2,
    InputField.CITY,
    InputField.STATE,
    InputField.COUNTRY,
    InputField.PHONE,
    InputField.POSTAL_CODE,
)

PAYMENT_FIELDS: tuple[InputField, ...] = (
    InputField.PAYMENT_NAME,
    InputField.PAYMENT_EMAIL,
    InputField.CARD_NUMBER,
    InputField.EXPIRY_MONTH,
    InputField.EXPIRY_YEAR,
    InputField.CVV,
)

# Checked in this order at the new-address gate; phone is required here.
REQUIRED_SHIPPING_FIELDS: tuple[InputField, ...] = (
    InputField.NAME,
    InputField.STREET_1,
    InputField.CITY,
    InputField.COUNTRY,
    InputField.PHONE,
    InputField.POSTAL_CODE,
)

REQUIRED_PAYMENT_FIELDS: tuple[InputField, ...] = PAYMENT_FIELDS


def next_field(current: InputField | None, ordering: tuple[InputField, ...]) -> InputField:
    """Following field in ``ordering``, wrapping past the last.

    A field outside the ordering (or none) moves to the first field.
    """
    if current not in ordering:
        return ordering[0]
    index = ordering.index(current)
    return ordering[(index + 1) % len(ordering)]


def insert_char(form: BaseModel, field: InputField, char: str) -> bool:
    """Append ``char`` to the field if its rules allow; returns whether it did."""
    rules = field.rules
    current = getattr(form, rules.attribute)
    if not rules.accepts(current, char):
        return False
    setattr(form, rules.attribute, current + char)
    return True


def delete_char(form: BaseModel, field: InputField) -> bool:
    """Drop the last character; no-op on an empty value."""
    rules = field.rules
    current = getattr(form, rules.attribute)
    if not current:
        return False
    setattr(form, rules.attribute, current[:-1])
    return True


def first_empty_field(form: BaseModel, required: tuple[InputField, ...]) -> InputField | None:
    for field in required:
        if not getattr(form, field.rules.attribute):
            return field
    return None


def validate_required(form: BaseModel, required: tuple[InputField, ...]) -> None:
    """Raise ``ValidationException`` naming the first empty required field."""
    empty = first_empty_field(form, required)
    if empty is not None:
        raise ValidationException(empty.rules.label)
