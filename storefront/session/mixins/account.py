"""
Account tab: order history and subscriptions.
"""
from __future__ import annotations

import logging

from storefront.core.exceptions import BackendException

logger = logging.getLogger(__name__)


class AccountMixin:
    """Mixin for the account tab."""

    def next_account_section(self) -> None:
        self.account_section = self.account_section.next()

    def prev_account_section(self) -> None:
        self.account_section = self.account_section.prev()

    async def load_account_data(self) -> None:
        user_id = self.identity.fingerprint
        try:
            self.orders = await self.backend.get_orders(user_id)
        except BackendException as e:
            logger.warning("Order history load failed: %s", e)
            self.orders = []
        try:
            self.subscriptions = await self.backend.get_subscriptions(user_id)
        except BackendException as e:
            logger.warning("Subscription load failed: %s", e)
            self.subscriptions = []
