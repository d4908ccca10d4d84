"""
One-shot viewport observation.

A region's callback fires on its first entry only; entering again is a no-op.
The Streamlit pages treat "the section body is being rendered" as an entry.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Set

logger = logging.getLogger(__name__)


class ViewportObserver:
    def __init__(self) -> None:
        self._callbacks: Dict[str, Callable[[], None]] = {}
        self._fired: Set[str] = set()

    def observe(self, region: str, callback: Callable[[], None]) -> None:
        if region in self._callbacks:
            logger.debug("Region %s is already observed; keeping the first callback", region)
            return
        self._callbacks[region] = callback

    def is_observed(self, region: str) -> bool:
        return region in self._callbacks

    def has_fired(self, region: str) -> bool:
        return region in self._fired

    def enter(self, region: str) -> bool:
        """Fire the region's callback if this is its first entry.

        Returns True only when the callback ran.
        """
        callback = self._callbacks.get(region)
        if callback is None or region in self._fired:
            return False
        # Marked before the call so a failing callback is not retried
        self._fired.add(region)
        callback()
        return True
