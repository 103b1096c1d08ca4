"""
Tests for the session cart.
"""
from storefront.domain.cart import Cart, CartItem

from .conftest import make_product


class TestCartAdd:
    """Tests for adding products."""

    def test_add_same_product_merges_quantity(self):
        cart = Cart()
        product = make_product("cron", price_cents=3000)

        cart.add(product, 2)
        cart.add(product, 3)

        assert len(cart) == 1
        assert cart.items[0].quantity == 5

    def test_add_keeps_insertion_order(self):
        cart = Cart()
        cart.add(make_product("b"))
        cart.add(make_product("a"))
        cart.add(make_product("b"))

        assert [item.product_id for item in cart.items] == ["b", "a"]

    def test_add_zero_quantity_is_noop(self):
        cart = Cart()
        cart.add(make_product("cron"), 0)

        assert cart.is_empty()

    def test_line_keeps_product_snapshot(self):
        cart = Cart()
        cart.add(make_product("cron", price_cents=3000))
        cart.add(make_product("cron", price_cents=9999))

        assert cart.items[0].product.price_cents == 3000


class TestCartQuantities:
    """Tests for quantity edits."""

    def test_decrement_at_one_removes_line(self):
        cart = Cart()
        cart.add(make_product("cron"), 1)

        cart.decrement("cron")

        assert cart.find("cron") is None
        assert cart.is_empty()

    def test_decrement_above_one(self):
        cart = Cart()
        cart.add(make_product("cron"), 3)
        cart.decrement("cron")

        assert cart.find("cron").quantity == 2

    def test_set_quantity_zero_removes(self):
        cart = Cart()
        cart.add(make_product("cron"), 3)
        cart.set_quantity("cron", 0)

        assert cart.is_empty()

    def test_unknown_product_is_ignored(self):
        cart = Cart()
        cart.add(make_product("cron"))
        cart.increment("nope")
        cart.decrement("nope")
        cart.set_quantity("nope", 5)

        assert cart.total_items() == 1


def test_subtotal_is_exact_sum_of_lines() -> None:
    cart = Cart()
    cart.add(make_product("a", price_cents=2200), 2)
    cart.add(make_product("b", price_cents=1850), 3)

    assert cart.subtotal_cents() == 2200 * 2 + 1850 * 3
    assert cart.total_items() == 5
    assert cart.subtotal_display == "$99"


def test_clear_empties_cart() -> None:
    cart = Cart()
    cart.add(make_product("a"))
    cart.clear()

    assert cart.is_empty()
    assert cart.subtotal_cents() == 0


def test_cart_item_ids_are_unique_and_carry_to_order_items() -> None:
    product = make_product("cron", price_cents=3000)
    first = CartItem(product=product, quantity=2)
    second = CartItem(product=product, quantity=1)

    assert first.id != second.id
    order_item = first.to_order_item()
    assert order_item.id == first.id
    assert order_item.total_cents == 6000
