"""
Main session class combining all mixins.
"""
from __future__ import annotations

import logging

from .core import SessionCore
from .mixins import (
    AccountMixin,
    AddressMixin,
    CartMixin,
    CatalogMixin,
    CheckoutMixin,
    InputMixin,
)

logger = logging.getLogger(__name__)


class StorefrontSession(
    SessionCore,
    CatalogMixin,
    CartMixin,
    AddressMixin,
    InputMixin,
    CheckoutMixin,
    AccountMixin,
):
    """
    Workflow engine for one terminal storefront session.

    Combines all session functionality through mixins:
    - CatalogMixin: regions, products, shop navigation, add to cart
    - CartMixin: cart line selection and quantity edits
    - AddressMixin: saved addresses and address selection
    - InputMixin: form field editing
    - CheckoutMixin: checkout transitions and order submission
    - AccountMixin: order history and subscriptions
    """

    async def load_initial_data(self) -> None:
        """Regions, then products for the chosen region, then saved addresses."""
        await self.load_regions()
        await self.load_products()
        await self.load_saved_addresses()
        logger.info(
            "Initial data loaded: region=%s products=%d saved_addresses=%d",
            self.region.id,
            len(self.products),
            len(self.saved_addresses),
        )
