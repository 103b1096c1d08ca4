"""Shared helpers for order totals and shipping."""
from __future__ import annotations

from .entities import Region


def calc_shipping_cents(subtotal_cents: int, region: Region, flat_fee_cents: int) -> int:
    """Free at or above the region threshold, flat fee below it."""
    if subtotal_cents >= region.free_shipping_threshold:
        return 0
    return flat_fee_cents


def calc_total_cents(subtotal_cents: int, shipping_cents: int) -> int:
    return subtotal_cents + shipping_cents
