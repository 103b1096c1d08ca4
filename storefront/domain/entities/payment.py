"""Card payment form model."""
from __future__ import annotations

from pydantic import BaseModel

MASKED_PLACEHOLDER = "****"


class PaymentInfo(BaseModel):
    """Card details typed in the checkout form."""

    name: str = ""
    email: str = ""
    card_number: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    cvv: str = ""

    def is_complete(self) -> bool:
        return all(
            (
                self.name,
                self.email,
                self.card_number,
                self.expiry_month,
                self.expiry_year,
                self.cvv,
            )
        )

    def masked_card(self) -> str:
        if len(self.card_number) >= 4:
            return f"**** **** **** {self.card_number[-4:]}"
        return MASKED_PLACEHOLDER
