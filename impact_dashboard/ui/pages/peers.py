from __future__ import annotations

import pandas as pd
import streamlit as st

from impact_dashboard.data.models import ViewModel
from impact_dashboard.ui.components.charts import render_plotly
from impact_dashboard.ui.components.formatting import assign_labels
from impact_dashboard.ui.components.peer_map import MAP_RENDER_CONFIG
from impact_dashboard.ui.components.tables import render_table
from impact_dashboard.ui.pages.context import PageContext
from impact_dashboard.ui.state import safe_draw

PEER_COLUMNS = ["Area", "Label", "Health & Wellness", "Talent Pipeline", "Competitiveness", "Primary"]


def peer_frame(view_model: ViewModel) -> pd.DataFrame:
    areas = view_model.geo_areas
    rows = [
        {
            "Area": area.name,
            "Label": label,
            "Health & Wellness": area.health,
            "Talent Pipeline": area.talent,
            "Competitiveness": area.competitiveness,
            "Primary": area.is_primary,
        }
        for area, label in zip(areas, assign_labels(areas))
    ]
    return pd.DataFrame(rows, columns=PEER_COLUMNS)


def render(context: PageContext) -> None:
    st.subheader("Peer Comparison")
    state = context.state

    left, right = st.columns(2)
    with left:
        st.markdown("#### Peer Positioning")
        state.draw_chart("peerComparisonChart", render_plotly)
        st.caption("Health & Wellness against Talent Pipeline; the larger point is the focus area.")
    with right:
        st.markdown("#### Peer Micropolitan Map")
        if state.map_figure is None:
            st.info("Map unavailable.")
        else:
            safe_draw("peerMap", lambda fig: render_plotly(fig, MAP_RENDER_CONFIG), state.map_figure)

    st.markdown("#### Pillar Scores")
    render_table(
        peer_frame(state.view_model),
        column_config={
            "Health & Wellness": {"type": "score"},
            "Talent Pipeline": {"type": "score"},
            "Competitiveness": {"type": "score"},
        },
        export_file_name="peer_scores.csv",
    )
