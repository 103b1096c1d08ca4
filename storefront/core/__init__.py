"""Core infrastructure: configuration, caching, identity and errors."""
