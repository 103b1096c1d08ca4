"""Shipping address and saved-address models."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

ADDRESS_FIELDS = (
    "name",
    "street_1",
    "street_2",
    "city",
    "state",
    "country",
    "phone",
    "postal_code",
)


class AddressFields(BaseModel):
    """Free-text address lines shared by draft and saved addresses."""

    name: str = ""
    street_1: str = ""
    street_2: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    phone: str = ""
    postal_code: str = ""

    def display_line(self) -> str:
        """One-line summary: street, city, state, country, postal code."""
        parts = [self.street_1, self.city, self.state, self.country, self.postal_code]
        return ", ".join(part for part in parts if part)

    def address_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in ADDRESS_FIELDS}


class ShippingAddress(AddressFields):
    """Working address edited during checkout."""

    def is_complete(self) -> bool:
        # state, street_2 and phone are optional
        return all((self.name, self.street_1, self.city, self.country, self.postal_code))


class SavedAddress(AddressFields):
    """Address persisted for a user; ``id`` and ``created_at`` come from the backend."""

    id: str | None = Field(None, description="Backend-assigned ID")
    user_fingerprint: str = Field(..., description="Owning user fingerprint")
    created_at: datetime | None = None

    @classmethod
    def from_shipping(cls, address: ShippingAddress, user_fingerprint: str) -> SavedAddress:
        return cls(user_fingerprint=user_fingerprint, **address.address_dict())

    def to_shipping(self) -> ShippingAddress:
        return ShippingAddress(**self.address_dict())

    def matches(self, address: AddressFields) -> bool:
        """Same street, city and postal code counts as a duplicate."""
        return (
            self.street_1 == address.street_1
            and self.city == address.city
            and self.postal_code == address.postal_code
        )

    def to_row(self) -> dict:
        """Insert payload; unset ``id``/``created_at`` are left to the backend."""
        return self.model_dump(mode="json", exclude_none=True)
