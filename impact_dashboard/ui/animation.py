"""
Counter animation for the hero statistics.

The frame maths is kept apart from the clock so that a run can be replayed
against any sequence of timestamps.
"""

from __future__ import annotations

import math
import re
import time
from typing import Callable, Iterable, Iterator, Optional, Sequence, Tuple

COUNTER_SECONDS = 2.0
FRAME_INTERVAL = 1 / 30


def ease_out_cubic(progress: float) -> float:
    return 1 - math.pow(1 - progress, 3)


def parse_counter_text(text: str) -> Optional[int]:
    """'12,500' -> 12500; anything that is not an integer yields None."""
    cleaned = re.sub(r"[,\s]", "", text or "")
    if not re.fullmatch(r"-?\d+", cleaned):
        return None
    return int(cleaned)


def counter_value(target: int, elapsed: float, duration: float = COUNTER_SECONDS) -> int:
    if duration <= 0:
        return target
    progress = min(max(elapsed / duration, 0.0), 1.0)
    return math.floor(target * ease_out_cubic(progress))


def counter_frames(
    target: int,
    timestamps: Iterable[float],
    duration: float = COUNTER_SECONDS,
) -> Iterator[str]:
    """Display text for each frame, relative to the first timestamp.

    Frames stop once the duration has elapsed. The last frame always shows
    the exact target, even if the timestamps run out early.
    """
    start: Optional[float] = None
    for now in timestamps:
        if start is None:
            start = now
        elapsed = now - start
        if elapsed >= duration:
            break
        yield f"{counter_value(target, elapsed, duration):,}"
    yield f"{target:,}"


def animate_counters(
    counters: Sequence[Tuple[object, int]],
    duration: float = COUNTER_SECONDS,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    interval: float = FRAME_INTERVAL,
) -> None:
    """Step every (slot, target) pair on a shared clock; not cancellable.

    Each slot only needs a `write(text)` method.
    """
    start = clock()
    now = start
    while now - start < duration:
        for slot, target in counters:
            slot.write(f"{counter_value(target, now - start, duration):,}")
        sleep(interval)
        now = clock()
    for slot, target in counters:
        slot.write(f"{target:,}")


def animate_counter(slot, target: int, duration: float = COUNTER_SECONDS, **kwargs) -> None:
    animate_counters([(slot, target)], duration, **kwargs)
