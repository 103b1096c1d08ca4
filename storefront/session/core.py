"""
Session state shared by all session mixins.

One ``StorefrontSession`` exists per run; it exclusively owns the cart,
the address/payment drafts and the loaded catalog. Nothing else writes them.
"""
from __future__ import annotations

import logging
import time

from storefront.core.cache import Clock, DataCache
from storefront.core.config import DEFAULT_FLAT_SHIPPING_CENTS, Settings
from storefront.core.identity import UserIdentity
from storefront.domain.cart import Cart
from storefront.domain.checkout_fsm import (
    AtCart,
    CheckoutState,
    CheckoutStep,
    PaymentMethod,
    ShippingMode,
    payment_method_of,
    shipping_mode_of,
)
from storefront.domain.entities import (
    Order,
    PaymentInfo,
    Product,
    Region,
    SavedAddress,
    ShippingAddress,
    Subscription,
)
from storefront.domain.fields import InputField
from storefront.domain.navigation import AccountSection
from storefront.integrations.backend import StorefrontBackend

from .state import LoadingState, Tab

logger = logging.getLogger(__name__)

SPLASH_SECONDS = 5.0


class SessionCore:
    """Base session with all mutable state and lifecycle helpers."""

    def __init__(
        self,
        backend: StorefrontBackend,
        identity: UserIdentity,
        settings: Settings | None = None,
        cache: DataCache | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.backend = backend
        self.identity = identity
        self.settings = settings
        self._clock = clock or time.monotonic
        if cache is None:
            cache = (
                DataCache(settings.products_cache_ttl, settings.regions_cache_ttl, self._clock)
                if settings is not None
                else DataCache(clock=self._clock)
            )
        self.cache = cache

        self.running = True
        self.current_tab = Tab.HOME
        self.show_splash = True
        self.splash_started = self._clock()
        self.loading = LoadingState.IDLE
        self.notification: str | None = None

        # Catalog
        self.region = Region.default()
        self.regions: list[Region] = []
        self.products: list[Product] = []
        self.selected_product_index = 0
        self.product_quantity = 1

        # Account
        self.orders: list[Order] = []
        self.subscriptions: list[Subscription] = []
        self.account_section = AccountSection.ORDER_HISTORY

        # Cart and checkout
        self.cart = Cart()
        self.cart_item_index = 0
        self.checkout: CheckoutState = AtCart()
        self.payment_option_index = 0
        self.address_select_index = 0
        self.shipping_address = ShippingAddress()
        self.saved_addresses: list[SavedAddress] = []
        self.payment_info = PaymentInfo()
        self.active_input: InputField | None = None

    @property
    def flat_shipping_cents(self) -> int:
        if self.settings is None:
            return DEFAULT_FLAT_SHIPPING_CENTS
        return self.settings.flat_shipping_cents

    @property
    def submit_orders(self) -> bool:
        return self.settings.submit_orders if self.settings is not None else False

    @property
    def checkout_step(self) -> CheckoutStep:
        return self.checkout.step

    @property
    def shipping_mode(self) -> ShippingMode | None:
        return shipping_mode_of(self.checkout)

    @property
    def payment_method(self) -> PaymentMethod | None:
        return payment_method_of(self.checkout)

    def check_splash_timeout(self) -> None:
        if self.show_splash and self._clock() - self.splash_started >= SPLASH_SECONDS:
            self.show_splash = False

    def skip_splash(self) -> None:
        self.show_splash = False

    def set_tab(self, tab: Tab) -> None:
        self.current_tab = tab

    def clear_notification(self) -> None:
        self.notification = None

    def quit(self) -> None:
        logger.info("Session quit requested")
        self.running = False
