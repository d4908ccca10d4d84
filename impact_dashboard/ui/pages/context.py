from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from impact_dashboard.config import Settings
from impact_dashboard.ui.components.kpi import DisplaySlot
from impact_dashboard.ui.state import DashboardState


@dataclass
class PageContext:
    state: DashboardState
    settings: Settings
    slots: Dict[str, DisplaySlot] = field(default_factory=dict)
