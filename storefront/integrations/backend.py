"""Subset of backend API required by the storefront session."""
from __future__ import annotations

from typing import Protocol

from storefront.domain.entities import Order, Product, Region, SavedAddress, Subscription


class StorefrontBackend(Protocol):
    """Every call may raise ``BackendException``."""

    async def get_regions(self) -> list[Region]: ...

    async def get_products(self, region_id: str | None = None) -> list[Product]: ...

    async def get_saved_addresses(self, user_fingerprint: str) -> list[SavedAddress]: ...

    async def save_address(self, address: SavedAddress) -> SavedAddress: ...

    async def delete_address(self, address_id: str) -> None: ...

    async def get_orders(self, user_id: str) -> list[Order]: ...

    async def get_subscriptions(self, user_id: str) -> list[Subscription]: ...

    async def create_order(self, order: Order) -> Order: ...

    async def create_subscription(self, subscription: Subscription) -> Subscription: ...
