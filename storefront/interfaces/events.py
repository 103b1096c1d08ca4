"""
Discrete input events and their routing onto session actions.

Precedence: splash screen, then the active form field, then global
shortcuts, then the keys of the current tab (and checkout step).
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from storefront.core.exceptions import StorefrontException
from storefront.domain.checkout_fsm import AtCart, AtPayment, AtShipping, ShippingMode
from storefront.session import StorefrontSession, Tab

logger = logging.getLogger(__name__)


class Key(str, Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    TAB = "tab"
    ENTER = "enter"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    CTRL_C = "ctrl_c"


@dataclass(frozen=True, slots=True)
class InputEvent:
    key: Key
    char: str | None = None

    @classmethod
    def of_char(cls, char: str) -> InputEvent:
        return cls(Key.CHAR, char)

    def is_char(self, *chars: str) -> bool:
        return self.key is Key.CHAR and self.char in chars

    @property
    def is_quit(self) -> bool:
        return self.key is Key.CTRL_C or self.is_char("q")

    @property
    def is_up(self) -> bool:
        return self.key is Key.UP or self.is_char("k")

    @property
    def is_down(self) -> bool:
        return self.key is Key.DOWN or self.is_char("j")

    @property
    def is_plus(self) -> bool:
        return self.is_char("+", "=")

    @property
    def is_minus(self) -> bool:
        return self.is_char("-", "_")


async def dispatch(session: StorefrontSession, event: InputEvent) -> None:
    """Apply one input event to the session."""
    if session.show_splash:
        if event.is_quit:
            session.quit()
        else:
            session.skip_splash()
        return

    if session.active_input is not None:
        await _handle_input_mode(session, event)
        return

    if event.is_quit:
        session.quit()
    elif event.is_char("r"):
        await session.cycle_region()
    elif event.is_char("s"):
        session.set_tab(Tab.SHOP)
    elif event.is_char("a"):
        session.set_tab(Tab.ACCOUNT)
        await session.load_account_data()
    elif event.is_char("c") and session.current_tab is not Tab.CART:
        session.set_tab(Tab.CART)
    elif session.current_tab is Tab.HOME:
        _handle_home_keys(session, event)
    elif session.current_tab is Tab.SHOP:
        _handle_shop_keys(session, event)
    elif session.current_tab is Tab.ACCOUNT:
        _handle_account_keys(session, event)
    elif session.current_tab is Tab.CART:
        await _handle_cart_keys(session, event)


async def _handle_input_mode(session: StorefrontSession, event: InputEvent) -> None:
    if event.key is Key.CHAR and event.char:
        session.handle_input_char(event.char)
    elif event.key is Key.BACKSPACE:
        session.handle_input_backspace()
    elif event.key is Key.TAB:
        session.next_input_field()
    elif event.key is Key.ENTER:
        await session.next_checkout_step()
    elif event.key is Key.ESC:
        session.prev_checkout_step()
    elif event.key is Key.CTRL_C:
        session.quit()


def _handle_home_keys(session: StorefrontSession, event: InputEvent) -> None:
    if event.key is Key.ENTER and session.products:
        session.set_tab(Tab.SHOP)


def _handle_shop_keys(session: StorefrontSession, event: InputEvent) -> None:
    if event.is_up:
        session.prev_product()
    elif event.is_down:
        session.next_product()
    elif event.is_plus:
        session.increase_quantity()
    elif event.is_minus:
        session.decrease_quantity()
    elif event.key is Key.ENTER:
        session.add_to_cart()


def _handle_account_keys(session: StorefrontSession, event: InputEvent) -> None:
    if event.is_up:
        session.prev_account_section()
    elif event.is_down:
        session.next_account_section()


async def _handle_cart_keys(session: StorefrontSession, event: InputEvent) -> None:
    match session.checkout:
        case AtCart():
            if event.is_up:
                session.prev_cart_item()
            elif event.is_down:
                session.next_cart_item()
            elif event.is_plus:
                session.increment_selected_item()
            elif event.is_minus:
                session.decrement_selected_item()
            elif event.key is Key.ENTER or event.is_char("c"):
                await session.next_checkout_step()
            elif event.key is Key.ESC:
                session.prev_checkout_step()
        case AtShipping(mode=ShippingMode.SELECT_ADDRESS):
            if event.is_up:
                session.prev_address_option()
            elif event.is_down:
                session.next_address_option()
            elif event.key is Key.ENTER:
                session.select_address_option()
            elif event.key in (Key.BACKSPACE, Key.DELETE) or event.is_char("x"):
                await session.remove_selected_address()
            elif event.key is Key.ESC:
                session.prev_checkout_step()
        case AtPayment(method=None):
            if event.is_up:
                session.prev_payment_option()
            elif event.is_down:
                session.next_payment_option()
            elif event.key is Key.ENTER:
                session.select_payment_method()
            elif event.key is Key.ESC:
                session.prev_checkout_step()
        case _:
            if event.key is Key.ENTER:
                await session.next_checkout_step()
            elif event.key is Key.TAB:
                session.next_input_field()
            elif event.key is Key.ESC:
                session.prev_checkout_step()


class EventLoop:
    """Feeds queued events to the session strictly one at a time.

    An event is fully processed, backend calls included, before the next
    one is taken off the queue.
    """

    def __init__(
        self,
        session: StorefrontSession,
        on_update: Callable[[StorefrontSession], Awaitable[None] | None] | None = None,
    ) -> None:
        self.session = session
        self._queue: asyncio.Queue[InputEvent | None] = asyncio.Queue()
        self._on_update = on_update

    def submit(self, event: InputEvent) -> None:
        self._queue.put_nowait(event)

    async def join(self) -> None:
        """Wait until every submitted event has been processed."""
        await self._queue.join()

    def stop(self) -> None:
        self._queue.put_nowait(None)

    async def run(self) -> None:
        """Process events until ``stop()``; events after quit are drained unhandled."""
        while True:
            event = await self._queue.get()
            try:
                if event is None:
                    return
                if not self.session.running:
                    continue
                self.session.check_splash_timeout()
                try:
                    await dispatch(self.session, event)
                except StorefrontException as e:
                    logger.error("Event %s failed: %s", event, e.message)
                    self.session.notification = e.message
                if self._on_update is not None:
                    result = self._on_update(self.session)
                    if asyncio.iscoroutine(result):
                        await result
            finally:
                self._queue.task_done()
