"""
Line-oriented driver: ``python -m storefront``.

Each input line is turned into key events. Named keys are ``enter``,
``esc``, ``tab``, ``up``, ``down``, ``bs``, ``del`` and ``quit``; any
other text is typed character by character. The session view is printed
after every line.
"""
from __future__ import annotations

import asyncio
import logging
import sys

from storefront.core.config import load_settings
from storefront.core.exceptions import ConfigurationException
from storefront.core.identity import UserIdentity
from storefront.integrations.supabase import SupabaseClient
from storefront.interfaces.events import EventLoop, InputEvent, Key
from storefront.interfaces.presenters import render_text, snapshot
from storefront.logging_config import setup_logging
from storefront.session import StorefrontSession

logger = logging.getLogger(__name__)

NAMED_KEYS = {
    "enter": Key.ENTER,
    "esc": Key.ESC,
    "tab": Key.TAB,
    "up": Key.UP,
    "down": Key.DOWN,
    "bs": Key.BACKSPACE,
    "del": Key.DELETE,
    "quit": Key.CTRL_C,
}


def parse_line(line: str) -> list[InputEvent]:
    token = line.strip()
    if token.lower() in NAMED_KEYS:
        return [InputEvent(NAMED_KEYS[token.lower()])]
    return [InputEvent.of_char(char) for char in line.rstrip("\r\n")]


async def _wait_processed(events: EventLoop, consumer: asyncio.Task) -> None:
    """Wait for the queue to drain; re-raise if the consumer died first."""
    drained = asyncio.ensure_future(events.join())
    done, _ = await asyncio.wait({drained, consumer}, return_when=asyncio.FIRST_COMPLETED)
    if consumer in done:
        drained.cancel()
        consumer.result()
        raise RuntimeError("event loop stopped unexpectedly")


async def run() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    client = SupabaseClient(settings.backend)
    session = StorefrontSession(client, UserIdentity.get_or_create(), settings)
    events = EventLoop(session)
    consumer = asyncio.create_task(events.run())

    try:
        await session.load_initial_data()
        print(render_text(snapshot(session)))
        while session.running:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            for event in parse_line(line):
                events.submit(event)
            await _wait_processed(events, consumer)
            print(render_text(snapshot(session)), flush=True)
    finally:
        events.stop()
        if not consumer.done():
            await consumer
        await client.close()


def main() -> int:
    try:
        asyncio.run(run())
    except ConfigurationException as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
