"""Short-lived in-memory caches for regions and per-region product lists.

Entries expire a fixed time after being written. Expired entries are not
swept; they read as a miss and get overwritten on the next ``set``.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from storefront.domain.entities import Product, Region

from .config import DEFAULT_PRODUCTS_TTL, DEFAULT_REGIONS_TTL
from .exceptions import CacheException

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]

PRODUCTS_NAMESPACE = "products"
REGIONS_NAMESPACE = "regions"
GLOBAL_QUALIFIER = "all"


def make_key(namespace: str, qualifier: str) -> str:
    """Build a cache key from a namespace and a qualifier."""
    return f"{namespace}:{qualifier}"


@dataclass
class CacheEntry(Generic[T]):
    """Cached value with its absolute expiry instant."""

    value: T
    expires_at: float

    def is_alive(self, now: float) -> bool:
        return now < self.expires_at


class TTLCache(Generic[T]):
    """Key/value store where every entry lives ``ttl`` seconds."""

    def __init__(self, ttl: float, clock: Clock | None = None) -> None:
        if ttl <= 0:
            raise CacheException(f"TTL must be positive, got {ttl}")
        self.ttl = ttl
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry[T]] = {}

    def get(self, namespace: str, qualifier: str) -> T | None:
        key = make_key(namespace, qualifier)
        entry = self._entries.get(key)
        if entry is None or not entry.is_alive(self._clock()):
            logger.debug("Cache miss: %s", key)
            return None
        logger.debug("Cache hit: %s", key)
        return entry.value

    def set(self, namespace: str, qualifier: str, value: T) -> None:
        key = make_key(namespace, qualifier)
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + self.ttl)

    def has(self, namespace: str, qualifier: str) -> bool:
        return self.get(namespace, qualifier) is not None

    def invalidate(self, namespace: str, qualifier: str) -> None:
        self._entries.pop(make_key(namespace, qualifier), None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        # Counts dead entries too; nothing is reclaimed until overwritten.
        return len(self._entries)


class DataCache:
    """Regions (single global entry) and product lists keyed by region id."""

    def __init__(
        self,
        products_ttl: float = DEFAULT_PRODUCTS_TTL,
        regions_ttl: float = DEFAULT_REGIONS_TTL,
        clock: Clock | None = None,
    ) -> None:
        self.products: TTLCache[list[Product]] = TTLCache(products_ttl, clock)
        self.regions: TTLCache[list[Region]] = TTLCache(regions_ttl, clock)

    def get_products(self, region_id: str) -> list[Product] | None:
        products = self.products.get(PRODUCTS_NAMESPACE, region_id)
        return list(products) if products is not None else None

    def set_products(self, region_id: str, products: list[Product]) -> None:
        self.products.set(PRODUCTS_NAMESPACE, region_id, list(products))

    def get_regions(self) -> list[Region] | None:
        regions = self.regions.get(REGIONS_NAMESPACE, GLOBAL_QUALIFIER)
        return list(regions) if regions is not None else None

    def set_regions(self, regions: list[Region]) -> None:
        self.regions.set(REGIONS_NAMESPACE, GLOBAL_QUALIFIER, list(regions))
