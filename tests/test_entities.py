"""
Tests for domain entities.
"""
import pytest
from pydantic import ValidationError

from storefront.domain.entities import (
    Order,
    PaymentInfo,
    Region,
    SavedAddress,
    ShippingAddress,
    Subscription,
)
from storefront.domain.value_objects import RoastLevel, SubscriptionStatus

from .conftest import make_product, make_saved_address


class TestShippingAddress:
    """Tests for ShippingAddress."""

    def test_complete_without_optional_fields(self):
        address = ShippingAddress(
            name="Jane", street_1="1 Main St", city="Springfield", country="US", postal_code="00000"
        )
        assert address.is_complete()

    @pytest.mark.parametrize("missing", ["name", "street_1", "city", "country", "postal_code"])
    def test_incomplete_when_required_field_missing(self, missing):
        data = {
            "name": "Jane",
            "street_1": "1 Main St",
            "city": "Springfield",
            "country": "US",
            "postal_code": "00000",
        }
        data[missing] = ""
        assert not ShippingAddress(**data).is_complete()

    def test_display_line_skips_empty_parts(self):
        address = ShippingAddress(
            street_1="1 Main St", city="Springfield", country="US", postal_code="00000"
        )
        assert address.display_line() == "1 Main St, Springfield, US, 00000"


class TestSavedAddress:
    """Tests for SavedAddress conversions."""

    def test_round_trip_through_shipping(self):
        saved = make_saved_address("fp", phone="555")
        shipping = saved.to_shipping()

        assert isinstance(shipping, ShippingAddress)
        assert shipping.phone == "555"
        restored = SavedAddress.from_shipping(shipping, "fp")
        assert restored.address_dict() == saved.address_dict()
        assert restored.id is None

    def test_matches_on_street_city_postal(self):
        saved = make_saved_address("fp")
        same = ShippingAddress(name="Other", street_1="1 Main St", city="Springfield", postal_code="00000")
        different = same.model_copy(update={"postal_code": "11111"})

        assert saved.matches(same)
        assert not saved.matches(different)

    def test_to_row_omits_backend_fields(self):
        row = SavedAddress.from_shipping(ShippingAddress(name="Jane"), "fp").to_row()

        assert "id" not in row
        assert "created_at" not in row
        assert row["user_fingerprint"] == "fp"


class TestPaymentInfo:
    """Tests for PaymentInfo."""

    def test_masked_card_shows_last_four(self):
        info = PaymentInfo(card_number="4242424242421234")
        assert info.masked_card() == "**** **** **** 1234"

    def test_masked_card_short_number(self):
        assert PaymentInfo(card_number="12").masked_card() == "****"

    def test_is_complete_requires_all_fields(self):
        info = PaymentInfo(
            name="Jane",
            email="j@example.com",
            card_number="4242424242424242",
            expiry_month="12",
            expiry_year="2030",
            cvv="123",
        )
        assert info.is_complete()
        assert not info.model_copy(update={"cvv": ""}).is_complete()


class TestProduct:
    """Tests for Product display helpers."""

    def test_price_display_whole_units(self):
        assert make_product("cron", price_cents=2250).price_display == "$22"

    def test_details_line_with_roast(self):
        product = make_product("cron", roast_level=RoastLevel.MEDIUM, weight_oz=12)
        assert product.details_line == "medium roast | 12oz | whole beans"

    def test_details_line_without_roast(self):
        assert make_product("kit", roast_level=None, weight_oz=5).details_line == "5oz"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            make_product("cron", price_cents=-1)

    def test_products_are_immutable(self):
        product = make_product("cron")
        with pytest.raises(ValidationError):
            product.name = "changed"


class TestRegion:
    """Tests for Region."""

    def test_default_region(self):
        region = Region.default()

        assert region.id == "global"
        assert region.code == "Global"
        assert region.flag == "🌎"
        assert region.free_shipping_threshold == 4000
        assert region.label == "🌎 (Global)"

    def test_free_shipping_hint(self):
        assert Region.default().free_shipping_hint == "free shipping on Global orders over $40"


def test_order_displays_and_short_id() -> None:
    order = Order(
        id="0123456789abcdef",
        user_id="fp",
        subtotal_cents=3000,
        shipping_cents=800,
        total_cents=3800,
    )

    assert order.short_id == "01234567"
    assert order.total_display == "$38.00"
    assert order.shipping_display == "$8.00"


def test_subscription_is_active() -> None:
    sub = Subscription(user_id="fp", product_id="p", product_name="Cron")
    assert sub.is_active
    assert not sub.model_copy(update={"status": SubscriptionStatus.PAUSED}).is_active
