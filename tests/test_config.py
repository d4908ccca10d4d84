from __future__ import annotations

import os

from impact_dashboard.bootstrap_env import bridge_secrets
from impact_dashboard.config import DEFAULT_DATA_SOURCE, DEFAULT_MAP_TILES, SECTIONS, load_settings

_ENV_NAMES = (
    "DASHBOARD_DATA_SOURCE",
    "DASHBOARD_REQUEST_TIMEOUT",
    "DASHBOARD_MAP_TILES",
    "DASHBOARD_COUNTER_SECONDS",
    "LOG_LEVEL",
)


def _clear_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment(monkeypatch) -> None:
    _clear_env(monkeypatch)

    settings = load_settings()

    assert settings.data_source == DEFAULT_DATA_SOURCE
    assert settings.map_tiles == DEFAULT_MAP_TILES
    assert settings.request_timeout == 10.0
    assert settings.counter_seconds == 2.0
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("DASHBOARD_DATA_SOURCE", " https://example.test/metrics.json ")
    monkeypatch.setenv("DASHBOARD_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("DASHBOARD_COUNTER_SECONDS", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.data_source == "https://example.test/metrics.json"
    assert settings.request_timeout == 2.5
    assert settings.counter_seconds == 0.0
    assert settings.log_level == "DEBUG"


def test_invalid_numbers_fall_back(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("DASHBOARD_REQUEST_TIMEOUT", "soon")
    monkeypatch.setenv("DASHBOARD_COUNTER_SECONDS", "-1")

    settings = load_settings()

    assert settings.request_timeout == 10.0
    assert settings.counter_seconds == 2.0


def test_sections_are_ordered() -> None:
    assert [section.key for section in SECTIONS] == ["health", "talent", "competitiveness", "peers"]


def test_bridge_secrets_flattens_without_overriding(monkeypatch) -> None:
    monkeypatch.setattr(os, "environ", {"LOG_LEVEL": "WARNING"})

    bridge_secrets({"log_level": "DEBUG", "dashboard": {"data-source": "remote.json", "request_timeout": 4}})

    assert os.environ["LOG_LEVEL"] == "WARNING"
    assert os.environ["DASHBOARD_DATA_SOURCE"] == "remote.json"
    assert os.environ["DASHBOARD_REQUEST_TIMEOUT"] == "4"
