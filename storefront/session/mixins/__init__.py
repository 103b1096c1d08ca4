"""
Session mixins package.
"""
from __future__ import annotations

from .account import AccountMixin
from .addresses import AddressMixin
from .cart import CartMixin
from .catalog import CatalogMixin
from .checkout import CheckoutMixin
from .input import InputMixin

__all__ = [
    "AccountMixin",
    "AddressMixin",
    "CartMixin",
    "CatalogMixin",
    "CheckoutMixin",
    "InputMixin",
]
