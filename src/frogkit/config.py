"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("FROGKIT_ENV", cls.environment),
            log_level=os.getenv("FROGKIT_LOG_LEVEL", cls.log_level).strip().upper(),
            json_indent=_env_int("FROGKIT_JSON_INDENT", cls.json_indent),
        )

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the root logger."""

        logging.basicConfig(
            level=self.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


__all__ = ["AppSettings"]
