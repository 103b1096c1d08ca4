"""Top-level UI context enums."""
from __future__ import annotations

from enum import Enum


class Tab(str, Enum):
    HOME = "home"
    SHOP = "shop"
    ACCOUNT = "account"
    CART = "cart"


class LoadingState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
