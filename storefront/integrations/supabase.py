"""
Supabase (PostgREST) client for catalog, saved addresses and orders.

Tables: ``regions``, ``products``, ``saved_addresses``, ``orders``,
``subscriptions``. Credentials come from ``SUPABASE_URL`` and
``SUPABASE_ANON_KEY``.

Every failure (transport, timeout, non-2xx status, malformed payload) is
raised as ``BackendException``; callers decide whether it matters.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from storefront.core.config import BackendConfig
from storefront.core.exceptions import BackendException
from storefront.domain.entities import Order, Product, Region, SavedAddress, Subscription

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SAVED_ADDRESS_LIMIT = 3


def region_from_row(row: dict[str, Any]) -> Region:
    """The ``regions`` table keeps the threshold in whole currency units."""
    data = dict(row)
    if data.get("free_shipping_threshold") is not None:
        data["free_shipping_threshold"] = int(data["free_shipping_threshold"]) * 100
    return Region.model_validate(data)


class SupabaseClient:
    """
    Async REST client for the storefront tables.

    Example:
    ```python
    client = SupabaseClient(settings.backend)
    regions = await client.get_regions()
    products = await client.get_products(regions[0].id)
    await client.close()
    ```
    """

    def __init__(self, config: BackendConfig):
        self.config = config
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            headers = {
                "apikey": self.config.api_key,
                "Authorization": f"Bearer {self.config.api_key}",
            }
            self._session = aiohttp.ClientSession(headers=headers, timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    def _rest_url(self, table: str) -> str:
        return f"{self.config.url}/rest/v1/{table}"

    async def _request(
        self,
        operation: str,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        payload: Any = None,
    ) -> Any:
        if not self.config.configured:
            raise BackendException(operation, "backend is not configured")

        headers: dict[str, str] = {}
        if payload is not None:
            headers["Prefer"] = "return=representation"

        try:
            session = await self._get_session()
            async with session.request(
                method,
                self._rest_url(table),
                params=params,
                json=payload,
                headers=headers,
            ) as response:
                if response.status < 200 or response.status >= 300:
                    body = await response.text()
                    raise BackendException(
                        operation, f"{response.status} - {body}", status=response.status
                    )
                if response.status == 204 or method == "DELETE":
                    return None
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise BackendException(operation, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise BackendException(operation, f"invalid JSON response: {e}") from e

    @staticmethod
    def _parse_rows(
        operation: str, data: Any, parse: Callable[[dict[str, Any]], M]
    ) -> list[M]:
        if not isinstance(data, list):
            raise BackendException(operation, "expected a list of rows")
        try:
            return [parse(row) for row in data]
        except (ValidationError, TypeError, ValueError) as e:
            raise BackendException(operation, f"malformed row: {e}") from e

    def _first_created(self, operation: str, data: Any, model: type[M], fallback: M) -> M:
        rows = self._parse_rows(operation, data or [], model.model_validate)
        return rows[0] if rows else fallback

    # ===================== CATALOG =====================

    async def get_regions(self) -> list[Region]:
        data = await self._request(
            "get_regions", "GET", "regions", params={"order": "name.asc"}
        )
        return self._parse_rows("get_regions", data, region_from_row)

    async def get_products(self, region_id: str | None = None) -> list[Product]:
        """In-stock products, ordered by category then name."""
        params = {"in_stock": "eq.true", "order": "category.asc,name.asc"}
        if region_id:
            params["region_id"] = f"eq.{region_id}"
        data = await self._request("get_products", "GET", "products", params=params)
        return self._parse_rows("get_products", data, Product.model_validate)

    # ===================== SAVED ADDRESSES =====================

    async def get_saved_addresses(self, user_fingerprint: str) -> list[SavedAddress]:
        """Most recent addresses first, at most three."""
        params = {
            "user_fingerprint": f"eq.{user_fingerprint}",
            "order": "created_at.desc",
            "limit": str(SAVED_ADDRESS_LIMIT),
        }
        data = await self._request(
            "get_saved_addresses", "GET", "saved_addresses", params=params
        )
        return self._parse_rows("get_saved_addresses", data, SavedAddress.model_validate)

    async def save_address(self, address: SavedAddress) -> SavedAddress:
        data = await self._request(
            "save_address", "POST", "saved_addresses", payload=address.to_row()
        )
        return self._first_created("save_address", data, SavedAddress, address)

    async def delete_address(self, address_id: str) -> None:
        await self._request(
            "delete_address", "DELETE", "saved_addresses", params={"id": f"eq.{address_id}"}
        )

    # ===================== ORDERS =====================

    async def get_orders(self, user_id: str) -> list[Order]:
        params = {"user_id": f"eq.{user_id}", "order": "created_at.desc"}
        data = await self._request("get_orders", "GET", "orders", params=params)
        return self._parse_rows("get_orders", data, Order.model_validate)

    async def get_subscriptions(self, user_id: str) -> list[Subscription]:
        params = {"user_id": f"eq.{user_id}", "order": "created_at.desc"}
        data = await self._request("get_subscriptions", "GET", "subscriptions", params=params)
        return self._parse_rows("get_subscriptions", data, Subscription.model_validate)

    async def create_order(self, order: Order) -> Order:
        data = await self._request("create_order", "POST", "orders", payload=order.to_row())
        return self._first_created("create_order", data, Order, order)

    async def create_subscription(self, subscription: Subscription) -> Subscription:
        data = await self._request(
            "create_subscription", "POST", "subscriptions", payload=subscription.to_row()
        )
        return self._first_created("create_subscription", data, Subscription, subscription)

    async def health_check(self) -> bool:
        if not self.config.configured:
            return False
        try:
            session = await self._get_session()
            async with session.get(f"{self.config.url}/rest/v1/") as response:
                return 200 <= response.status < 300
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Backend health check failed: %s", e)
            return False
