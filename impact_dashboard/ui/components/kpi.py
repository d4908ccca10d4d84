"""
Text projection of hero counters, summary scores and sidebar metrics.

Values are written into named display slots. A slot that the page did not
create is skipped, and a slot that fails to update does not stop the others.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Tuple

from impact_dashboard.data.models import PILLARS, ViewModel
from impact_dashboard.ui.components.formatting import format_number, format_score

logger = logging.getLogger(__name__)

HERO_SLOTS: Tuple[str, ...] = ("hero.population", "hero.pillars", "hero.metrics")


class DisplaySlot(Protocol):
    def write(self, text: str, css_class: Optional[str] = None) -> None:
        ...


@dataclass
class PlaceholderSlot:
    """A Streamlit `st.empty()` placeholder that remembers its last text."""

    placeholder: Any
    label: Optional[str] = None
    css_base: str = ""
    text: str = ""

    def write(self, text: str, css_class: Optional[str] = None) -> None:
        self.text = text
        if self.label is not None:
            self.placeholder.metric(label=self.label, value=text)
            return
        classes = " ".join(part for part in (self.css_base, css_class) if part)
        self.placeholder.markdown(
            f"<span class='{classes}'>{html.escape(text)}</span>",
            unsafe_allow_html=True,
        )


def sidebar_slot_id(pillar: str, index: int, part: str) -> str:
    return f"sidebar.{pillar}.{index}.{part}"


def text_assignments(view_model: ViewModel) -> List[Tuple[str, str, Optional[str]]]:
    """(slot id, text, css class) for every text slot the view model fills."""
    hero = view_model.hero
    assignments: List[Tuple[str, str, Optional[str]]] = [
        ("hero.population", format_number(hero.population), None),
        ("hero.pillars", format_number(hero.pillars), None),
        ("hero.metrics", format_number(hero.metrics), None),
    ]
    for pillar in PILLARS:
        assignments.append((f"summary.{pillar}", format_score(view_model.summary.score_for(pillar)), None))
    for pillar in PILLARS:
        for index, metric in enumerate(view_model.sidebar[pillar]):
            assignments.append((sidebar_slot_id(pillar, index, "value"), metric.value, None))
            assignments.append((sidebar_slot_id(pillar, index, "label"), metric.label, None))
            assignments.append(
                (sidebar_slot_id(pillar, index, "change"), metric.change, f"metric-change {metric.direction}")
            )
    return assignments


def project_text(view_model: ViewModel, slots: Mapping[str, DisplaySlot]) -> List[str]:
    """Write every resolved value into its slot; returns the slot ids written."""
    written: List[str] = []
    for slot_id, text, css_class in text_assignments(view_model):
        slot = slots.get(slot_id)
        if slot is None:
            logger.debug("Display slot %s not present; skipping", slot_id)
            continue
        try:
            slot.write(text, css_class)
        except Exception:
            logger.exception("Could not update display slot %s", slot_id)
            continue
        written.append(slot_id)
    return written

