from __future__ import annotations

from typing import Sequence, Tuple

import streamlit as st

from impact_dashboard.ui.components.charts import render_plotly
from impact_dashboard.ui.components.kpi import PlaceholderSlot, sidebar_slot_id
from impact_dashboard.ui.pages.context import PageContext

# (chart id, heading, caption)
ChartPanel = Tuple[str, str, str]


def sidebar_metric_slots(context: PageContext, pillar: str) -> None:
    """Create the value/label/change slots for each of the pillar's metrics."""
    metrics = context.state.view_model.sidebar[pillar]
    if not metrics:
        return
    for index, col in enumerate(st.columns(len(metrics))):
        with col:
            with st.container(border=True):
                for part in ("value", "label", "change"):
                    slot_id = sidebar_slot_id(pillar, index, part)
                    context.slots[slot_id] = PlaceholderSlot(st.empty(), css_base=f"metric-{part}")


def chart_panels(context: PageContext, panels: Sequence[ChartPanel]) -> None:
    for col, (chart_id, heading, caption) in zip(st.columns(len(panels)), panels):
        with col:
            st.markdown(f"#### {heading}")
            context.state.draw_chart(chart_id, render_plotly)
            st.caption(caption)
