from __future__ import annotations

import pytest

from conftest import FakeClock, FakeSlot
from impact_dashboard.ui.components.kpi import project_text, text_assignments
from impact_dashboard.ui.state import (
    HERO_REGION,
    SESSION_KEY,
    DashboardState,
    get_dashboard_state,
    safe_draw,
)
from impact_dashboard.ui.viewport import ViewportObserver


def _no_sleep(_):
    return None


def test_observer_fires_once_per_region() -> None:
    observer = ViewportObserver()
    calls = []
    observer.observe("a", lambda: calls.append("a"))
    observer.observe("b", lambda: calls.append("b"))

    assert observer.enter("a") is True
    assert observer.enter("a") is False
    assert observer.enter("b") is True
    assert calls == ["a", "b"]
    assert observer.has_fired("a")


def test_observer_keeps_first_callback_and_ignores_unknown_regions() -> None:
    observer = ViewportObserver()
    calls = []
    observer.observe("a", lambda: calls.append("first"))
    observer.observe("a", lambda: calls.append("second"))

    assert observer.enter("missing") is False
    observer.enter("a")
    assert calls == ["first"]


def test_failing_callback_is_not_retried() -> None:
    observer = ViewportObserver()

    def boom():
        raise RuntimeError("draw failed")

    observer.observe("a", boom)
    with pytest.raises(RuntimeError):
        observer.enter("a")
    assert observer.enter("a") is False


def test_chart_animates_on_first_entry_only(default_view_model) -> None:
    state = DashboardState.from_view_model(default_view_model)
    drawn = []

    assert state.draw_chart("educationChart", drawn.append) is True
    assert state.draw_chart("educationChart", drawn.append) is False
    assert len(drawn) == 1
    assert drawn[0].layout.transition.duration == 1500
    assert "educationChart" in state.animated

    state.begin_run()
    assert state.draw_chart("educationChart", drawn.append) is True
    assert len(drawn) == 2
    assert drawn[1].layout.transition.duration is None


def test_missing_chart_is_skipped(default_view_model) -> None:
    state = DashboardState.from_view_model(default_view_model)
    drawn = []

    assert state.draw_chart("noSuchChart", drawn.append) is False
    assert drawn == []


def test_failing_draw_does_not_affect_other_charts(default_view_model) -> None:
    state = DashboardState.from_view_model(default_view_model)
    drawn = []

    def broken(fig):
        raise ValueError("renderer rejected figure")

    state.draw_chart("migrationChart", broken)
    assert state.draw_chart("graduationChart", drawn.append) is True
    assert len(drawn) == 1


def test_safe_draw_reports_failure() -> None:
    def broken(fig):
        raise RuntimeError("nope")

    assert safe_draw("x", broken, None) is False
    assert safe_draw("x", lambda fig: None, None) is True


def test_counters_run_once_and_settle_on_targets(default_view_model) -> None:
    state = DashboardState.from_view_model(default_view_model)
    slots = {slot_id: FakeSlot() for slot_id, _, _ in text_assignments(default_view_model)}
    project_text(default_view_model, slots)

    ran = state.animate_counters(slots, duration=1.0, clock=FakeClock(step=0.5), sleep=_no_sleep)

    assert ran is True
    assert slots["hero.population"].text == "25,416"
    assert slots["hero.population"].writes[1] == "0"
    assert HERO_REGION in state.animated

    writes = len(slots["hero.population"].writes)
    assert state.animate_counters(slots, duration=1.0, clock=FakeClock(step=0.5), sleep=_no_sleep) is False
    assert len(slots["hero.population"].writes) == writes


def test_counters_skip_non_integer_slots(default_view_model) -> None:
    state = DashboardState.from_view_model(default_view_model)
    population = FakeSlot()
    population.write("n/a")

    state.animate_counters({"hero.population": population}, duration=1.0, clock=FakeClock(step=0.5), sleep=_no_sleep)

    assert population.writes == ["n/a"]


def test_session_state_is_built_once(default_view_model) -> None:
    session = {}
    builds = []

    def factory():
        builds.append(1)
        return default_view_model

    first = get_dashboard_state(session, factory)
    first.draw_chart("dentalAccessChart", lambda fig: None)
    second = get_dashboard_state(session, factory)

    assert first is second
    assert session[SESSION_KEY] is first
    assert builds == [1]
    assert second.drawn_this_run == set()
