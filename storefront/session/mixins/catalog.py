"""
Region and product loading, catalog navigation and add-to-cart.
"""
from __future__ import annotations

import logging

from storefront.core.exceptions import BackendException
from storefront.domain.entities import Product, Region
from storefront.domain.navigation import cycle_next, cycle_prev
from storefront.session.state import LoadingState

logger = logging.getLogger(__name__)

MAX_PRODUCT_QUANTITY = 99


class CatalogMixin:
    """Mixin for regions, products and the shop tab."""

    async def load_regions(self) -> None:
        """Load regions (cache first); fall back to the default region on failure."""
        cached = self.cache.get_regions()
        if cached is not None:
            self._apply_regions(cached)
            return

        self.loading = LoadingState.LOADING
        try:
            regions = await self.backend.get_regions()
        except BackendException as e:
            logger.warning("Region load failed: %s", e)
            self.loading = LoadingState.ERROR
            self.notification = f"Failed to load regions: {e.message}"
            self.regions = [Region.default()]
            self.region = Region.default()
            return

        self.loading = LoadingState.IDLE
        if not regions:
            logger.info("No regions configured, using default region")
            self.regions = [Region.default()]
            self.region = Region.default()
            return

        self.cache.set_regions(regions)
        self._apply_regions(regions)

    def _apply_regions(self, regions: list[Region]) -> None:
        self.regions = list(regions)
        for region in self.regions:
            if region.id == self.region.id:
                self.region = region
                return
        if self.regions:
            self.region = self.regions[0]

    async def load_products(self) -> None:
        """Load products for the current region (cache first)."""
        region_id = self.region.id
        cached = self.cache.get_products(region_id)
        if cached is not None:
            self.products = cached
            self._clamp_product_index()
            return

        self.loading = LoadingState.LOADING
        try:
            products = await self.backend.get_products(region_id)
        except BackendException as e:
            logger.warning("Product load failed for region %s: %s", region_id, e)
            self.loading = LoadingState.ERROR
            self.notification = f"Failed to load products: {e.message}"
            self.products = []
            self._clamp_product_index()
            return

        self.cache.set_products(region_id, products)
        self.products = products
        self.loading = LoadingState.IDLE
        self._clamp_product_index()

    async def change_region(self, region: Region) -> None:
        self.region = region
        await self.load_products()
        self.selected_product_index = 0
        self.product_quantity = 1

    async def cycle_region(self) -> None:
        if not self.regions:
            return
        ids = [region.id for region in self.regions]
        current = ids.index(self.region.id) if self.region.id in ids else 0
        await self.change_region(self.regions[cycle_next(current, len(self.regions))])

    def _clamp_product_index(self) -> None:
        if self.selected_product_index >= len(self.products):
            self.selected_product_index = 0

    @property
    def selected_product(self) -> Product | None:
        if 0 <= self.selected_product_index < len(self.products):
            return self.products[self.selected_product_index]
        return None

    def next_product(self) -> None:
        if self.products:
            self.selected_product_index = cycle_next(self.selected_product_index, len(self.products))
            self.product_quantity = 1

    def prev_product(self) -> None:
        if self.products:
            self.selected_product_index = cycle_prev(self.selected_product_index, len(self.products))
            self.product_quantity = 1

    def increase_quantity(self) -> None:
        self.product_quantity = min(self.product_quantity + 1, MAX_PRODUCT_QUANTITY)

    def decrease_quantity(self) -> None:
        self.product_quantity = max(self.product_quantity - 1, 1)

    def add_to_cart(self) -> None:
        product = self.selected_product
        if product is None:
            return
        self.cart.add(product, self.product_quantity)
        logger.debug("Added %s x%d to cart", product.id, self.product_quantity)
        self.product_quantity = 1
