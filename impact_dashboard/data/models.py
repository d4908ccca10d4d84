"""
Fully resolved view model consumed by every widget projector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

PILLARS: Tuple[str, ...] = ("health", "talent", "competitiveness")
DIRECTIONS: Tuple[str, ...] = ("positive", "negative", "neutral")


@dataclass(frozen=True)
class HeroStats:
    population: int
    pillars: int
    metrics: int


@dataclass(frozen=True)
class SummaryScores:
    health: float
    talent: float
    competitiveness: float

    def score_for(self, pillar: str) -> float:
        return getattr(self, pillar)


@dataclass(frozen=True)
class SidebarMetric:
    value: str
    label: str
    change: str = ""
    direction: str = "neutral"  # positive | negative | neutral


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: Tuple[float, ...]


@dataclass(frozen=True)
class ChartSpec:
    labels: Tuple[str, ...]
    series: Tuple[ChartSeries, ...]

    def values_for(self, name: str) -> Tuple[float, ...]:
        for item in self.series:
            if item.name == name:
                return item.values
        raise KeyError(name)

    def is_consistent(self) -> bool:
        return all(len(item.values) == len(self.labels) for item in self.series)


@dataclass(frozen=True)
class GeoArea:
    name: str
    lat: float
    lng: float
    health: float
    talent: float
    competitiveness: float
    color: str
    is_primary: bool = False


@dataclass(frozen=True)
class ResolutionDiagnostics:
    source_loaded: bool
    defaulted_paths: Tuple[str, ...] = ()
    dropped_peers: int = 0


@dataclass(frozen=True)
class ViewModel:
    hero: HeroStats
    summary: SummaryScores
    sidebar: Mapping[str, Tuple[SidebarMetric, ...]]
    charts: Mapping[str, ChartSpec]
    primary_area: GeoArea
    peer_areas: Tuple[GeoArea, ...]
    diagnostics: ResolutionDiagnostics = field(
        default_factory=lambda: ResolutionDiagnostics(source_loaded=False)
    )

    @property
    def geo_areas(self) -> Tuple[GeoArea, ...]:
        """Primary area first, then peers in document order."""
        return (self.primary_area,) + tuple(self.peer_areas)
