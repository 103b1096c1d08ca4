"""
Tests for region and product loading.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.core.exceptions import BackendException
from storefront.domain.entities import Order, Region
from storefront.session import LoadingState, StorefrontSession

from .conftest import UZ, US


class TestLoadRegions:
    """Tests for region loading and fallbacks."""

    @pytest.mark.asyncio
    async def test_first_region_selected(self, session):
        await session.load_regions()

        assert session.regions == [UZ, US]
        assert session.region == UZ
        assert session.loading is LoadingState.IDLE

    @pytest.mark.asyncio
    async def test_current_region_kept_when_present(self, session):
        session.region = US
        await session.load_regions()

        assert session.region == US

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_default(self, session, backend):
        backend.fail.add("get_regions")

        await session.load_regions()

        assert session.region == Region.default()
        assert session.regions == [Region.default()]
        assert session.loading is LoadingState.ERROR
        assert session.notification.startswith("Failed to load regions: ")

    @pytest.mark.asyncio
    async def test_empty_result_uses_default(self, session, backend):
        backend.regions = []

        await session.load_regions()

        assert session.region.id == "global"
        assert session.notification is None

    @pytest.mark.asyncio
    async def test_cached_regions_skip_backend(self, session, backend):
        await session.load_regions()
        await session.load_regions()

        assert backend.calls.count("get_regions") == 1

    @pytest.mark.asyncio
    async def test_regions_refetched_after_ttl(self, session, backend, clock):
        await session.load_regions()
        clock.advance(1801)
        await session.load_regions()

        assert backend.calls.count("get_regions") == 2


class TestLoadProducts:
    """Tests for product loading."""

    @pytest.mark.asyncio
    async def test_products_for_current_region(self, session):
        await session.load_regions()
        await session.load_products()

        assert [p.id for p in session.products] == ["cron", "object-object", "nil"]

    @pytest.mark.asyncio
    async def test_cached_per_region(self, session, backend):
        await session.load_regions()
        await session.load_products()
        await session.load_products()

        assert backend.calls.count("get_products") == 1

    @pytest.mark.asyncio
    async def test_failure_gives_empty_catalog(self, session, backend):
        await session.load_regions()
        backend.fail.add("get_products")

        await session.load_products()

        assert session.products == []
        assert session.loading is LoadingState.ERROR
        assert session.notification.startswith("Failed to load products: ")

    @pytest.mark.asyncio
    async def test_out_of_range_selection_reset(self, session, backend):
        await session.load_regions()
        session.selected_product_index = 7

        await session.load_products()

        assert session.selected_product_index == 0


class TestCycleRegion:
    """Tests for switching region."""

    @pytest.mark.asyncio
    async def test_cycle_loads_new_region_products(self, loaded_session):
        loaded_session.next_product()
        loaded_session.increase_quantity()

        await loaded_session.cycle_region()

        assert loaded_session.region == US
        assert [p.id for p in loaded_session.products] == ["us-blend"]
        assert loaded_session.selected_product_index == 0
        assert loaded_session.product_quantity == 1

    @pytest.mark.asyncio
    async def test_cycle_wraps(self, loaded_session):
        await loaded_session.cycle_region()
        await loaded_session.cycle_region()

        assert loaded_session.region == UZ

    @pytest.mark.asyncio
    async def test_cart_survives_region_change(self, loaded_session):
        loaded_session.add_to_cart()
        await loaded_session.cycle_region()

        assert loaded_session.cart.items[0].product_id == "cron"


@pytest.mark.asyncio
async def test_load_initial_data_order(session, backend) -> None:
    await session.load_initial_data()

    assert backend.calls == ["get_regions", "get_products", "get_saved_addresses"]


class TestAccountData:
    """Tests for order history and subscriptions."""

    @pytest.mark.asyncio
    async def test_load_account_data(self, session, backend):
        backend.orders = [Order(id="o1", user_id=session.identity.fingerprint)]
        await session.load_account_data()

        assert [o.id for o in session.orders] == ["o1"]
        assert session.subscriptions == []

    @pytest.mark.asyncio
    async def test_failures_give_empty_lists(self, session, backend):
        session.orders = ["stale"]
        backend.fail.add("*")

        await session.load_account_data()

        assert session.orders == []
        assert session.subscriptions == []


@pytest.mark.asyncio
async def test_product_failure_reported_with_backend_message(identity, settings, clock) -> None:
    backend = MagicMock()
    backend.get_regions = AsyncMock(return_value=[UZ])
    backend.get_products = AsyncMock(
        side_effect=BackendException("get_products", "timeout")
    )
    session = StorefrontSession(backend, identity, settings, clock=clock)

    await session.load_regions()
    await session.load_products()

    backend.get_products.assert_awaited_once_with("uz")
    assert session.notification == "Failed to load products: get_products: timeout"
