"""
Layout helpers for the Streamlit application (page setup, hero band, summary cards).
"""

from __future__ import annotations

from typing import Dict

import streamlit as st

from impact_dashboard.data.models import PILLARS
from impact_dashboard.ui.components.kpi import PlaceholderSlot

PAGE_TITLE = "Oxford Community Impact Dashboard"

HERO_LABELS = {
    "hero.population": "Residents",
    "hero.pillars": "Impact Pillars",
    "hero.metrics": "Tracked Metrics",
}

PILLAR_TITLES = {
    "health": "Health & Wellness",
    "talent": "Talent Pipeline",
    "competitiveness": "Economic Competitiveness",
}

_CSS = """
<style>
.metric-value { font-size: 1.6rem; font-weight: 700; color: #1a1a1a; }
.metric-label { font-size: 0.85rem; color: #64748b; }
.metric-change { font-size: 0.8rem; font-weight: 500; }
.metric-change.positive { color: #10b981; }
.metric-change.negative { color: #ef4444; }
.metric-change.neutral { color: #64748b; }
</style>
"""


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":bar_chart:",
    )
    st.markdown(_CSS, unsafe_allow_html=True)


def hero_band() -> Dict[str, PlaceholderSlot]:
    """Three hero counters; returns their display slots."""
    slots: Dict[str, PlaceholderSlot] = {}
    for col, (slot_id, label) in zip(st.columns(len(HERO_LABELS)), HERO_LABELS.items()):
        with col:
            slots[slot_id] = PlaceholderSlot(st.empty(), label=label)
    return slots


def summary_cards() -> Dict[str, PlaceholderSlot]:
    """One score card per pillar; returns their display slots."""
    slots: Dict[str, PlaceholderSlot] = {}
    for col, pillar in zip(st.columns(len(PILLARS)), PILLARS):
        with col:
            with st.container(border=True):
                slots[f"summary.{pillar}"] = PlaceholderSlot(st.empty(), label=PILLAR_TITLES[pillar])
    return slots
