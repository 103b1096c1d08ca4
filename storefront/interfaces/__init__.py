"""Input and display adapters around the session."""

from .events import EventLoop, InputEvent, Key, dispatch
from .presenters import SessionSnapshot, snapshot

__all__ = ["EventLoop", "InputEvent", "Key", "dispatch", "SessionSnapshot", "snapshot"]
