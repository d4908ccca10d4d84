from impact_dashboard.bootstrap_env import ensure_env

ensure_env()  # must run before settings are read

import logging

import streamlit as st

from impact_dashboard.config import SECTIONS, load_settings
from impact_dashboard.data.loader import load_dashboard_document
from impact_dashboard.data.resolver import resolve
from impact_dashboard.logging_setup import configure_logging
from impact_dashboard.ui.components.kpi import project_text
from impact_dashboard.ui.layout import PAGE_TITLE, hero_band, setup_page, summary_cards
from impact_dashboard.ui.pages import competitiveness, health, peers, talent
from impact_dashboard.ui.pages.context import PageContext
from impact_dashboard.ui.state import get_dashboard_state

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "health": health.render,
    "talent": talent.render,
    "competitiveness": competitiveness.render,
    "peers": peers.render,
}


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    setup_page()
    st.title(PAGE_TITLE)

    state = get_dashboard_state(
        st.session_state,
        lambda: resolve(load_dashboard_document(settings)),
        tiles=settings.map_tiles,
    )
    context = PageContext(state=state, settings=settings)

    context.slots.update(hero_band())
    st.divider()
    context.slots.update(summary_cards())

    section_tabs = st.tabs([section.label for section in SECTIONS])
    for section_tab, section in zip(section_tabs, SECTIONS):
        renderer = PAGE_RENDERERS.get(section.key)
        if renderer is None:
            continue
        with section_tab:
            renderer(context)

    written = project_text(state.view_model, context.slots)
    logger.debug("Updated %d display slot(s)", len(written))
    state.animate_counters(context.slots, duration=settings.counter_seconds)


if __name__ == "__main__":
    main()
