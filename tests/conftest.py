"""Pytest fixtures shared across the dashboard tests."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest

from impact_dashboard.data.defaults import DEFAULT_DOCUMENT
from impact_dashboard.data.resolver import resolve


class FakeSlot:
    """Records every write the projectors make."""

    def __init__(self) -> None:
        self.text = ""
        self.css_class: Optional[str] = None
        self.writes: List[str] = []

    def write(self, text: str, css_class: Optional[str] = None) -> None:
        self.text = text
        self.css_class = css_class
        self.writes.append(text)


class FakeClock:
    """Monotonic clock advancing by a fixed step on every call."""

    def __init__(self, step: float, start: float = 100.0) -> None:
        self.step = step
        self.now = start - step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


@pytest.fixture
def default_view_model():
    return resolve(None)


@pytest.fixture
def full_document() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_DOCUMENT)


@pytest.fixture
def fake_slot_factory():
    return FakeSlot


def make_peer(name: str, lat: float = 34.0, lng: float = -85.0, **overrides: Any) -> Dict[str, Any]:
    peer: Dict[str, Any] = {
        "name": name,
        "coordinates": {"lat": lat, "lng": lng},
        "pillars": {"health": 70, "talent": 80, "competitiveness": 75},
        "color": "#3b82f6",
    }
    peer.update(overrides)
    return peer
