"""Storefront session (workflow engine)."""

from .session import StorefrontSession
from .state import LoadingState, Tab

__all__ = ["StorefrontSession", "Tab", "LoadingState"]
