"""Backend integrations."""

from .backend import StorefrontBackend
from .supabase import SupabaseClient

__all__ = ["StorefrontBackend", "SupabaseClient"]
