"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from frogkit.config import AppSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings with logging configured."""

    settings = AppSettings.from_env()
    settings.configure_logging()
    return settings


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()
