"""Shared pytest fixtures: in-memory backend, manual clock, sample catalog."""
from __future__ import annotations

import itertools

import pytest

from storefront.core.cache import DataCache
from storefront.core.config import BackendConfig, Settings
from storefront.core.exceptions import BackendException
from storefront.core.identity import UserIdentity
from storefront.domain.entities import (
    Order,
    Product,
    Region,
    SavedAddress,
    Subscription,
)
from storefront.domain.value_objects import ProductCategory, ProductType, RoastLevel
from storefront.session import StorefrontSession


class ManualClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend:
    """In-memory backend; set ``fail`` to an operation name (or "*") to break it."""

    def __init__(
        self,
        regions: list[Region] | None = None,
        products: list[Product] | None = None,
        saved_addresses: list[SavedAddress] | None = None,
    ) -> None:
        self.regions = list(regions or [])
        self.products = list(products or [])
        self.saved_addresses = list(saved_addresses or [])
        self.orders: list[Order] = []
        self.subscriptions: list[Subscription] = []
        self.fail: set[str] = set()
        self.calls: list[str] = []
        self._ids = itertools.count(1)

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail or "*" in self.fail:
            raise BackendException(operation, "503 - unavailable", status=503)

    async def get_regions(self) -> list[Region]:
        self._enter("get_regions")
        return list(self.regions)

    async def get_products(self, region_id: str | None = None) -> list[Product]:
        self._enter("get_products")
        return [
            p for p in self.products if p.in_stock and (region_id is None or p.region_id == region_id)
        ]

    async def get_saved_addresses(self, user_fingerprint: str) -> list[SavedAddress]:
        self._enter("get_saved_addresses")
        return [a for a in self.saved_addresses if a.user_fingerprint == user_fingerprint][:3]

    async def save_address(self, address: SavedAddress) -> SavedAddress:
        self._enter("save_address")
        created = address.model_copy(update={"id": f"addr-{next(self._ids)}"})
        self.saved_addresses.insert(0, created)
        return created

    async def delete_address(self, address_id: str) -> None:
        self._enter("delete_address")
        self.saved_addresses = [a for a in self.saved_addresses if a.id != address_id]

    async def get_orders(self, user_id: str) -> list[Order]:
        self._enter("get_orders")
        return [o for o in self.orders if o.user_id == user_id]

    async def get_subscriptions(self, user_id: str) -> list[Subscription]:
        self._enter("get_subscriptions")
        return [s for s in self.subscriptions if s.user_id == user_id]

    async def create_order(self, order: Order) -> Order:
        self._enter("create_order")
        created = order.model_copy(update={"id": f"order-{next(self._ids)}"})
        self.orders.insert(0, created)
        return created

    async def create_subscription(self, subscription: Subscription) -> Subscription:
        self._enter("create_subscription")
        created = subscription.model_copy(update={"id": f"sub-{next(self._ids)}"})
        self.subscriptions.insert(0, created)
        return created


def make_product(
    product_id: str,
    name: str | None = None,
    price_cents: int = 2200,
    region_id: str = "uz",
    **overrides,
) -> Product:
    data = {
        "id": product_id,
        "name": name or product_id,
        "slug": product_id,
        "description": f"{product_id} coffee",
        "price_cents": price_cents,
        "category": ProductCategory.ORIGINALS,
        "roast_level": RoastLevel.LIGHT,
        "weight_oz": 12,
        "bean_type": "whole beans",
        "product_type": ProductType.ONE_TIME,
        "region_id": region_id,
    }
    data.update(overrides)
    return Product(**data)


def make_saved_address(fingerprint: str, **overrides) -> SavedAddress:
    data = {
        "id": "addr-jane",
        "user_fingerprint": fingerprint,
        "name": "Jane",
        "street_1": "1 Main St",
        "city": "Springfield",
        "country": "US",
        "postal_code": "00000",
    }
    data.update(overrides)
    return SavedAddress(**data)


UZ = Region(
    id="uz", name="Uzbekistan", code="UZ", flag="🇺🇿", currency="USD", free_shipping_threshold=4000
)
US = Region(id="us", name="United States", code="US", flag="🇺🇸", currency="USD")


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def identity() -> UserIdentity:
    return UserIdentity.from_digest(b"test-user-key")


@pytest.fixture
def products() -> list[Product]:
    return [
        make_product("cron", price_cents=3000, category=ProductCategory.FEATURED),
        make_product("object-object", price_cents=2200),
        make_product("nil", price_cents=1800, roast_level=RoastLevel.DARK),
    ]


@pytest.fixture
def backend(products: list[Product]) -> FakeBackend:
    us_products = [make_product("us-blend", region_id="us")]
    return FakeBackend(regions=[UZ, US], products=products + us_products)


@pytest.fixture
def settings() -> Settings:
    return Settings(backend=BackendConfig(url="", api_key="", timeout=1.0), submit_orders=True)


@pytest.fixture
def session(backend: FakeBackend, identity: UserIdentity, settings: Settings, clock: ManualClock):
    return StorefrontSession(
        backend, identity, settings, cache=DataCache(clock=clock), clock=clock
    )


@pytest.fixture
async def loaded_session(session: StorefrontSession) -> StorefrontSession:
    await session.load_initial_data()
    session.skip_splash()
    return session


@pytest.fixture()
async def aiohttp_client():
    """Minimal aiohttp_client fixture to avoid pytest-aiohttp dependency."""
    clients: list[object] = []

    async def _make_client(app):
        from aiohttp.test_utils import TestClient, TestServer

        server = TestServer(app)
        client = TestClient(server)
        await client.start_server()
        clients.append(client)
        return client

    try:
        yield _make_client
    finally:
        for client in clients:
            await client.close()
