"""Environment-driven configuration objects for the storefront."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigurationException

DEFAULT_PRODUCTS_TTL = 300  # 5 minutes
DEFAULT_REGIONS_TTL = 1800  # 30 minutes
DEFAULT_FLAT_SHIPPING_CENTS = 800


def _str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"true", "1", "yes", "y"}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}") from e


def _positive_int_env(name: str, default: int) -> int:
    value = _int_env(name, default)
    if value <= 0:
        raise ConfigurationException(f"{name} must be positive, got {value}")
    return value


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationException(f"{name} must be a number, got {raw!r}") from e


@dataclass(slots=True)
class BackendConfig:
    url: str
    api_key: str
    timeout: float

    @property
    def configured(self) -> bool:
        return bool(self.url and self.api_key)


@dataclass(slots=True)
class Settings:
    backend: BackendConfig
    products_cache_ttl: int = DEFAULT_PRODUCTS_TTL
    regions_cache_ttl: int = DEFAULT_REGIONS_TTL
    flat_shipping_cents: int = DEFAULT_FLAT_SHIPPING_CENTS
    submit_orders: bool = False
    log_level: str = "INFO"
    log_file: str = "storefront.log"


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    backend = BackendConfig(
        url=os.getenv("SUPABASE_URL", "").rstrip("/"),
        api_key=os.getenv("SUPABASE_ANON_KEY", ""),
        timeout=_float_env("BACKEND_TIMEOUT", 10.0),
    )

    return Settings(
        backend=backend,
        products_cache_ttl=_positive_int_env("PRODUCTS_CACHE_TTL", DEFAULT_PRODUCTS_TTL),
        regions_cache_ttl=_positive_int_env("REGIONS_CACHE_TTL", DEFAULT_REGIONS_TTL),
        flat_shipping_cents=_int_env("FLAT_SHIPPING_CENTS", DEFAULT_FLAT_SHIPPING_CENTS),
        submit_orders=_str_to_bool(os.getenv("SUBMIT_ORDERS"), default=False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE", "storefront.log"),
    )
