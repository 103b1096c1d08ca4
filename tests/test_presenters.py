"""
Tests for the read-only session views.
"""
import pytest

from storefront.domain.checkout_fsm import AtShipping, CheckoutStep, ShippingMode
from storefront.interfaces.presenters import render_text, snapshot
from storefront.session import Tab

from .conftest import make_saved_address


@pytest.mark.asyncio
async def test_snapshot_cart_totals(loaded_session) -> None:
    loaded_session.add_to_cart()
    loaded_session.set_tab(Tab.CART)

    view = snapshot(loaded_session)

    assert view.step is CheckoutStep.CART
    assert view.total_items == 1
    assert view.subtotal_display == "$30.00"
    assert view.shipping_display == "$8.00"
    assert view.total_display == "$38.00"
    assert view.cart_lines[0].selected
    assert ("c", "checkout") in view.hints


@pytest.mark.asyncio
async def test_address_options_end_with_sentinel(loaded_session) -> None:
    loaded_session.saved_addresses = [make_saved_address(loaded_session.identity.fingerprint)]
    loaded_session.set_tab(Tab.CART)
    loaded_session.checkout = AtShipping(ShippingMode.SELECT_ADDRESS)

    view = snapshot(loaded_session)

    assert view.options == ("1 Main St, Springfield, US, 00000", "+ add new address")
    assert view.selected_option == 0
    assert view.shipping_mode is ShippingMode.SELECT_ADDRESS


@pytest.mark.asyncio
async def test_footer_prefers_notification(loaded_session) -> None:
    assert snapshot(loaded_session).footer_text == "free shipping on UZ orders over $40"

    loaded_session.notification = "street can't be empty"
    assert snapshot(loaded_session).footer_text == "street can't be empty"


@pytest.mark.asyncio
async def test_render_text_lists_products(loaded_session) -> None:
    loaded_session.set_tab(Tab.SHOP)

    text = render_text(snapshot(loaded_session))

    assert text.splitlines()[0].startswith("[shop]")
    assert "> cron $30" in text
    assert "  nil $18" in text


@pytest.mark.asyncio
async def test_account_hints_match_account_keys(loaded_session) -> None:
    loaded_session.set_tab(Tab.ACCOUNT)

    hints = snapshot(loaded_session).hints

    assert hints[0] == ("r", loaded_session.region.label)
    assert ("↑/↓", "sections") in hints
    assert ("q", "quit") in hints
    assert all(key != "enter" for key, _ in hints)
