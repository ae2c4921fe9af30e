"""Environment-driven configuration for the report service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc


@dataclass
class Settings:
    """Knobs read from the environment (after `.env` has been loaded)."""

    openai_api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    assistant_id: Optional[str] = field(default_factory=lambda: os.getenv("ASSISTANT_ID"))
    auth_app_url: Optional[str] = field(default_factory=lambda: os.getenv("AUTH_APP_URL"))
    poll_interval_seconds: float = field(default_factory=lambda: _read_float("RUN_POLL_INTERVAL_SECONDS", 5.0))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance to avoid repeated environment reads."""
    return Settings()
