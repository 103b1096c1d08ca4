"""Custom exceptions for the storefront."""
from __future__ import annotations


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class BackendException(StorefrontException):
    """Transport failure or non-success status from the data backend."""

    def __init__(self, operation: str, message: str, status: int | None = None) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.status = status


class ValidationException(StorefrontException):
    """A required checkout field is empty."""

    def __init__(self, field_label: str) -> None:
        super().__init__(f"{field_label} can't be empty")
        self.field_label = field_label


class ConfigurationException(StorefrontException):
    """Configuration errors."""

    pass


class CacheException(StorefrontException):
    """Cache-related errors."""

    pass
