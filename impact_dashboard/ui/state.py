"""
Per-session dashboard state shared by the pages and the deferred draws.

The state is created once from the resolved view model and is read-only
afterwards, apart from the one-shot animation bookkeeping.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Set

import plotly.graph_objects as go

from impact_dashboard.data.models import ViewModel
from impact_dashboard.ui.animation import COUNTER_SECONDS, animate_counters, parse_counter_text
from impact_dashboard.ui.components.charts import (
    DEFAULT_ANIMATION,
    ChartAnimation,
    build_chart_configs,
    with_entrance_animation,
)
from impact_dashboard.ui.components.kpi import HERO_SLOTS
from impact_dashboard.ui.components.peer_map import peer_map_figure
from impact_dashboard.ui.viewport import ViewportObserver

logger = logging.getLogger(__name__)

HERO_REGION = "hero"
SESSION_KEY = "impact_dashboard_state"


def safe_draw(widget_id: str, draw: Callable[[go.Figure], None], fig: go.Figure) -> bool:
    """Hand a figure to the renderer; a failure only affects this widget."""
    try:
        draw(fig)
    except Exception:
        logger.exception("Rendering widget %s failed; skipping it", widget_id)
        return False
    return True


@dataclass
class DashboardState:
    view_model: ViewModel
    chart_configs: Dict[str, go.Figure]
    observer: ViewportObserver = field(default_factory=ViewportObserver)
    animation: ChartAnimation = DEFAULT_ANIMATION
    animated: Set[str] = field(default_factory=set)
    drawn_this_run: Set[str] = field(default_factory=set)
    map_figure: Optional[go.Figure] = None

    @classmethod
    def from_view_model(cls, view_model: ViewModel, tiles: Optional[str] = None) -> "DashboardState":
        try:
            map_figure = peer_map_figure(view_model, tiles)
        except (KeyError, TypeError, ValueError):
            logger.exception("Could not build the peer map")
            map_figure = None
        return cls(
            view_model=view_model,
            chart_configs=build_chart_configs(view_model),
            map_figure=map_figure,
        )

    def begin_run(self) -> None:
        """Start a new render pass; settled charts may be drawn again."""
        self.drawn_this_run.clear()

    def draw_chart(self, chart_id: str, draw: Callable[[go.Figure], None]) -> bool:
        """Draw a chart when its section enters view.

        The first entry in a session draws with the entrance animation; later
        render passes draw the settled figure. Within one pass a chart is
        drawn at most once.
        """
        fig = self.chart_configs.get(chart_id)
        if fig is None:
            logger.warning("No chart configuration for %s; skipping", chart_id)
            return False
        if chart_id in self.drawn_this_run:
            return False
        self.drawn_this_run.add(chart_id)

        if not self.observer.is_observed(chart_id):
            self.observer.observe(chart_id, lambda: self._animate_chart(chart_id, draw))
        if self.observer.enter(chart_id):
            return True
        return safe_draw(chart_id, draw, fig)

    def _animate_chart(self, chart_id: str, draw: Callable[[go.Figure], None]) -> None:
        self.animated.add(chart_id)
        safe_draw(chart_id, draw, with_entrance_animation(self.chart_configs[chart_id], self.animation))

    def animate_counters(
        self,
        slots: Mapping[str, object],
        duration: float = COUNTER_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> bool:
        """Count the hero statistics up from zero, once per session.

        Targets are read back from the text already written into each slot.
        Returns True when the animation ran.
        """
        if not self.observer.is_observed(HERO_REGION):
            self.observer.observe(
                HERO_REGION, lambda: self._run_counters(slots, duration, clock, sleep)
            )
        return self.observer.enter(HERO_REGION)

    def _run_counters(
        self,
        slots: Mapping[str, object],
        duration: float,
        clock: Callable[[], float],
        sleep: Callable[[float], None],
    ) -> None:
        counters = []
        for slot_id in HERO_SLOTS:
            slot = slots.get(slot_id)
            if slot is None:
                continue
            target: Optional[int] = parse_counter_text(getattr(slot, "text", ""))
            if target is None:
                logger.debug("Slot %s has no integer text; not animating it", slot_id)
                continue
            counters.append((slot, target))
        if counters:
            animate_counters(counters, duration, clock=clock, sleep=sleep)
        self.animated.add(HERO_REGION)


def get_dashboard_state(
    session_state,
    view_model_factory: Callable[[], ViewModel],
    tiles: Optional[str] = None,
) -> DashboardState:
    """Fetch the session's state, building it on the first run only."""
    state = session_state.get(SESSION_KEY)
    if state is None:
        state = DashboardState.from_view_model(view_model_factory(), tiles)
        session_state[SESSION_KEY] = state
    state.begin_run()
    return state
