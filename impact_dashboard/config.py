"""
Application-wide configuration constants and environment-driven settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_DATA_SOURCE = "data/dashboard-metrics.json"
DEFAULT_MAP_TILES = "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}.png"


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard body
SECTIONS: List[SectionConfig] = [
    SectionConfig("health", "Health & Wellness"),
    SectionConfig("talent", "Talent Pipeline"),
    SectionConfig("competitiveness", "Economic Competitiveness"),
    SectionConfig("peers", "Peer Comparison"),
]


@dataclass(frozen=True)
class Settings:
    data_source: str = DEFAULT_DATA_SOURCE
    request_timeout: float = 10.0
    map_tiles: str = DEFAULT_MAP_TILES
    counter_seconds: float = 2.0
    log_level: str = "INFO"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative, using %s", name, raw, default)
        return default
    return value


def _env_text(name: str, default: str) -> str:
    raw: Optional[str] = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def load_settings() -> Settings:
    """Read settings from the environment (populated by `bootstrap_env`)."""
    return Settings(
        data_source=_env_text("DASHBOARD_DATA_SOURCE", DEFAULT_DATA_SOURCE),
        request_timeout=_env_float("DASHBOARD_REQUEST_TIMEOUT", 10.0),
        map_tiles=_env_text("DASHBOARD_MAP_TILES", DEFAULT_MAP_TILES),
        counter_seconds=_env_float("DASHBOARD_COUNTER_SECONDS", 2.0),
        log_level=_env_text("LOG_LEVEL", "INFO").upper(),
    )
