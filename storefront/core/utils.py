"""Shared formatting helpers."""
from __future__ import annotations


def format_whole(cents: int) -> str:
    """Price label in whole currency units (``$30``)."""
    return f"${cents // 100}"


def format_cents(cents: int) -> str:
    """Exact amount with two decimals (``$30.50``)."""
    sign = "-" if cents < 0 else ""
    cents = abs(cents)
    return f"{sign}${cents // 100}.{cents % 100:02d}"
