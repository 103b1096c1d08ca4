"""Read-only views of the session for whatever renders it."""
from __future__ import annotations

from dataclasses import dataclass

from storefront.core.utils import format_cents
from storefront.domain.checkout_fsm import (
    PAYMENT_OPTIONS,
    AtCart,
    AtConfirmation,
    AtPayment,
    AtShipping,
    CheckoutStep,
    PaymentMethod,
    ShippingMode,
)
from storefront.domain.fields import InputField
from storefront.domain.navigation import AccountSection
from storefront.session import StorefrontSession, Tab

_BACK = ("esc", "back")
_QUIT = ("q", "quit")


@dataclass(frozen=True, slots=True)
class CartLine:
    name: str
    quantity: int
    total_display: str
    selected: bool


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    tab: Tab
    step: CheckoutStep
    shipping_mode: ShippingMode | None
    payment_method: PaymentMethod | None
    active_field: InputField | None
    notification: str | None
    region_label: str
    footer_text: str
    cart_lines: tuple[CartLine, ...]
    total_items: int
    subtotal_display: str
    shipping_display: str
    total_display: str
    options: tuple[str, ...]
    selected_option: int | None
    hints: tuple[tuple[str, str], ...]


def _options(session: StorefrontSession) -> tuple[tuple[str, ...], int | None]:
    """Selectable list for the current context and its highlighted index."""
    if session.current_tab is Tab.SHOP:
        names = tuple(f"{p.name} {p.price_display}" for p in session.products)
        return names, session.selected_product_index if names else None
    if session.current_tab is Tab.ACCOUNT:
        return tuple(s.label for s in AccountSection), list(AccountSection).index(
            session.account_section
        )
    if session.current_tab is not Tab.CART:
        return (), None
    if session.is_selecting_address:
        labels = tuple(a.display_line() for a in session.saved_addresses) + ("+ add new address",)
        return labels, session.address_select_index
    if session.checkout == AtPayment():
        return tuple(m.label for m in PAYMENT_OPTIONS), session.payment_option_index
    return (), None


def _hints(session: StorefrontSession) -> tuple[tuple[str, str], ...]:
    region = (("r", session.region.label),)
    if session.current_tab is Tab.HOME:
        return region + (_QUIT,)
    if session.current_tab is Tab.SHOP:
        return region + (("↑/↓", "products"), ("+/-", "qty"), ("c", "cart"), _QUIT)
    if session.current_tab is Tab.ACCOUNT:
        return region + (("↑/↓", "sections"), ("c", "cart"), _QUIT)

    match session.checkout:
        case AtCart():
            return (_BACK, ("↑/↓", "items"), ("+/-", "qty"), ("c", "checkout"))
        case AtShipping(mode=ShippingMode.SELECT_ADDRESS):
            return (_BACK, ("↑/↓", "addresses"), ("x/del", "remove"), ("enter", "select"))
        case AtShipping() | AtPayment():
            return (_BACK, ("↑/↓", "fields"), ("tab", "next"), ("enter", "continue"))
        case AtConfirmation():
            return (_BACK, ("enter", "confirm order"))
    return ()


def snapshot(session: StorefrontSession) -> SessionSnapshot:
    selected = session.selected_cart_item
    lines = tuple(
        CartLine(
            name=item.product.name,
            quantity=item.quantity,
            total_display=item.total_display,
            selected=item is selected,
        )
        for item in session.cart.items
    )
    options, selected_option = _options(session)
    return SessionSnapshot(
        tab=session.current_tab,
        step=session.checkout_step,
        shipping_mode=session.shipping_mode,
        payment_method=session.payment_method,
        active_field=session.active_input,
        notification=session.notification,
        region_label=session.region.label,
        footer_text=session.notification or session.region.free_shipping_hint,
        cart_lines=lines,
        total_items=session.cart.total_items(),
        subtotal_display=format_cents(session.cart.subtotal_cents()),
        shipping_display=format_cents(session.shipping_cents),
        total_display=format_cents(session.total_cents),
        options=options,
        selected_option=selected_option,
        hints=_hints(session),
    )


def render_text(view: SessionSnapshot) -> str:
    """Plain multi-line rendering used by the line-oriented driver."""
    header = f"[{view.tab.value}] cart {view.subtotal_display} [{view.total_items}]  {view.region_label}"
    rows = [header]
    if view.tab is Tab.CART:
        step = view.step.label
        if view.shipping_mode is not None:
            step += f" / {view.shipping_mode.value}"
        if view.payment_method is not None:
            step += f" / {view.payment_method.value}"
        rows.append(f"step: {step}")
        for line in view.cart_lines:
            marker = ">" if line.selected else " "
            rows.append(f"{marker} {line.name} x{line.quantity}  {line.total_display}")
        rows.append(
            f"subtotal: {view.subtotal_display},  shipping: {view.shipping_display},"
            f"  total: {view.total_display}"
        )
    for index, option in enumerate(view.options):
        marker = ">" if index == view.selected_option else " "
        rows.append(f"{marker} {option}")
    if view.active_field is not None:
        rows.append(f"editing: {view.active_field.rules.label}")
    rows.append(view.footer_text)
    rows.append("   ".join(f"{key} {label}" for key, label in view.hints))
    return "\n".join(rows)
