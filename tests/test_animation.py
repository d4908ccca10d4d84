from __future__ import annotations

import pytest

from conftest import FakeClock, FakeSlot
from impact_dashboard.ui.animation import (
    animate_counter,
    animate_counters,
    counter_frames,
    counter_value,
    ease_out_cubic,
    parse_counter_text,
)


@pytest.mark.parametrize(
    "text, expected",
    [("12,500", 12500), ("25416", 25416), (" 3 ", 3), ("-40", -40), ("80%", None), ("", None), ("1.5", None)],
)
def test_parse_counter_text(text, expected) -> None:
    assert parse_counter_text(text) == expected


def test_easing_end_points() -> None:
    assert ease_out_cubic(0) == 0
    assert ease_out_cubic(1) == 1
    assert ease_out_cubic(0.5) > 0.5


def test_counter_value_is_clamped() -> None:
    assert counter_value(1000, -1.0, 2.0) == 0
    assert counter_value(1000, 5.0, 2.0) == 1000
    assert counter_value(1000, 1.0, 0) == 1000


def test_frames_end_on_exact_target_with_irregular_timestamps() -> None:
    frames = list(counter_frames(12500, [0.0, 0.013, 0.4, 0.41, 1.37, 1.99, 2.6, 3.0], duration=2.0))

    assert frames[0] == "0"
    assert frames[-1] == "12,500"
    values = [int(frame.replace(",", "")) for frame in frames]
    assert values == sorted(values)
    # The 2.6s timestamp is past the duration, so only the final frame follows 1.99s
    assert len(frames) == 7


def test_frames_jump_to_target_when_timestamps_run_out() -> None:
    assert list(counter_frames(500, [10.0, 10.1], duration=2.0))[-1] == "500"


def test_animate_counters_shares_one_clock() -> None:
    population, metrics = FakeSlot(), FakeSlot()

    animate_counters(
        [(population, 25416), (metrics, 18)],
        duration=2.0,
        clock=FakeClock(step=0.25),
        sleep=lambda _: None,
    )

    assert population.text == "25,416"
    assert metrics.text == "18"
    assert population.writes[0] == "0"
    assert len(population.writes) == len(metrics.writes) == 9


def test_animate_counter_with_zero_duration_writes_target_once() -> None:
    slot = FakeSlot()

    animate_counter(slot, 42, duration=0, clock=FakeClock(step=1.0), sleep=lambda _: None)

    assert slot.writes == ["42"]
