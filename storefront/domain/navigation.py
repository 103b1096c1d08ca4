"""Cyclic list navigation and account sections."""
from __future__ import annotations

from enum import Enum


def cycle_next(index: int, length: int) -> int:
    if length <= 0:
        return index
    return (index + 1) % length


def cycle_prev(index: int, length: int) -> int:
    if length <= 0:
        return index
    return length - 1 if index <= 0 else min(index - 1, length - 1)


def clamp_index(index: int, length: int) -> int:
    """Keep a selection inside ``[0, length)``; 0 for an empty list."""
    if length <= 0:
        return 0
    return min(index, length - 1)


class AccountSection(str, Enum):
    ORDER_HISTORY = "order_history"
    SUBSCRIPTIONS = "subscriptions"
    FAQ = "faq"
    ABOUT = "about"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    def next(self) -> AccountSection:
        members = list(AccountSection)
        return members[cycle_next(members.index(self), len(members))]

    def prev(self) -> AccountSection:
        members = list(AccountSection)
        return members[cycle_prev(members.index(self), len(members))]
