"""Terminal storefront: catalog browsing, cart and checkout workflow."""

__version__ = "0.1.0"
