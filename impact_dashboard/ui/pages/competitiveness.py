from __future__ import annotations

import streamlit as st

from impact_dashboard.ui.pages.context import PageContext
from impact_dashboard.ui.pages.helpers import chart_panels, sidebar_metric_slots


def render(context: PageContext) -> None:
    st.subheader("Economic Competitiveness")
    sidebar_metric_slots(context, "competitiveness")
    chart_panels(
        context,
        [
            (
                "migrationChart",
                "Migration & Income",
                "Net migration (left axis) and median income growth (right axis).",
            ),
            (
                "infrastructureChart",
                "Digital Infrastructure",
                "Broadband quality scores out of 100.",
            ),
        ],
    )
