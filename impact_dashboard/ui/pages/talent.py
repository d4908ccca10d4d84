from __future__ import annotations

import streamlit as st

from impact_dashboard.ui.pages.context import PageContext
from impact_dashboard.ui.pages.helpers import chart_panels, sidebar_metric_slots


def render(context: PageContext) -> None:
    st.subheader("Talent Pipeline")
    sidebar_metric_slots(context, "talent")
    chart_panels(
        context,
        [
            (
                "educationChart",
                "Educational Attainment",
                "Highest level completed by adults 25+, against the national profile.",
            ),
            (
                "graduationChart",
                "Graduation Rates",
                "Completion rate at each stage of the pipeline.",
            ),
        ],
    )
