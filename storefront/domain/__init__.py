"""Domain package."""

from .cart import Cart, CartItem
from .checkout_fsm import (
    AtCart,
    AtConfirmation,
    AtPayment,
    AtShipping,
    CheckoutState,
    CheckoutStep,
    PaymentMethod,
    ShippingMode,
)
from .entities import (
    Order,
    OrderItem,
    PaymentInfo,
    Product,
    Region,
    SavedAddress,
    ShippingAddress,
    Subscription,
)
from .fields import InputField
from .navigation import AccountSection
from .value_objects import (
    OrderStatus,
    ProductCategory,
    ProductType,
    RoastLevel,
    SubscriptionStatus,
)

__all__ = [
    # Entities
    "Product",
    "Region",
    "ShippingAddress",
    "SavedAddress",
    "PaymentInfo",
    "Order",
    "OrderItem",
    "Subscription",
    "Cart",
    "CartItem",
    # Checkout
    "CheckoutState",
    "CheckoutStep",
    "ShippingMode",
    "PaymentMethod",
    "AtCart",
    "AtShipping",
    "AtPayment",
    "AtConfirmation",
    "InputField",
    "AccountSection",
    # Value Objects
    "ProductCategory",
    "RoastLevel",
    "ProductType",
    "OrderStatus",
    "SubscriptionStatus",
]
