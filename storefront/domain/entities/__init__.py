"""Domain entities package."""

from .address import SavedAddress, ShippingAddress
from .order import Order, OrderItem, Subscription
from .payment import PaymentInfo
from .product import Product
from .region import Region

__all__ = [
    "Product",
    "Region",
    "ShippingAddress",
    "SavedAddress",
    "PaymentInfo",
    "Order",
    "OrderItem",
    "Subscription",
]
