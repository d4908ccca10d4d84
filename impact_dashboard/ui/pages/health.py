from __future__ import annotations

import streamlit as st

from impact_dashboard.ui.pages.context import PageContext
from impact_dashboard.ui.pages.helpers import chart_panels, sidebar_metric_slots


def render(context: PageContext) -> None:
    st.subheader("Health & Wellness")
    sidebar_metric_slots(context, "health")
    chart_panels(
        context,
        [
            (
                "chronicDiseaseChart",
                "Chronic Disease Prevalence",
                "Share of adults diagnosed, compared with the state average.",
            ),
            (
                "dentalAccessChart",
                "Dental Care Access",
                "Residents with a dental visit in the past year.",
            ),
        ],
    )
