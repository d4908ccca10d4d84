"""
Field-level resolution of the dashboard document against the default table.

`resolve` is the single choke point that guarantees every widget sees a
complete view model: each leaf path takes the loaded value when it is
present and well typed, otherwise the default for that exact path, and list
entries that cannot be completed are dropped.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from impact_dashboard.data.defaults import (
    CHART_FIELDS,
    DEFAULT_CHART_DATA,
    DEFAULT_HERO_STATS,
    DEFAULT_PEER_AREAS,
    DEFAULT_PRIMARY_AREA,
    DEFAULT_SIDEBAR_METRICS,
    DEFAULT_SUMMARY_CARDS,
    PEER_PALETTE,
    PRIMARY_COLOR,
)
from impact_dashboard.data.models import (
    DIRECTIONS,
    PILLARS,
    ChartSeries,
    ChartSpec,
    GeoArea,
    HeroStats,
    ResolutionDiagnostics,
    SidebarMetric,
    SummaryScores,
    ViewModel,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(node: Any, path: Sequence[str]) -> Any:
    for key in path:
        if not isinstance(node, Mapping):
            return _MISSING
        node = node.get(key, _MISSING)
        if node is _MISSING or node is None:
            return _MISSING
    return node


def _as_float(raw: Any) -> Optional[float]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.replace(",", "").strip()
    elif not isinstance(raw, (int, float)):
        return None
    try:
        value = float(raw)
    except (OverflowError, ValueError):
        return None
    # nan and inf are never usable scores, counts or coordinates
    if not math.isfinite(value):
        return None
    return value


def _as_int(raw: Any) -> Optional[int]:
    value = _as_float(raw)
    if value is None:
        return None
    return int(round(value))


def _as_text(raw: Any) -> Optional[str]:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            return str(raw)
        except ValueError:
            # ints beyond the interpreter digit limit
            return None
    return None


def _as_list(raw: Any) -> Optional[Tuple[Any, ...]]:
    # Contents pass through untouched; length mismatches reach the renderer.
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    return None


def _as_labels(raw: Any) -> Optional[Tuple[str, ...]]:
    items = _as_list(raw)
    if items is None:
        return None
    return tuple(str(item) for item in items)


class _Resolution:
    """Tracks which paths fell back while the view model is assembled."""

    def __init__(self, doc: Optional[Mapping]) -> None:
        self.doc = doc
        self.defaulted: List[str] = []
        self.dropped_peers = 0

    def field(self, path: Sequence[str], default: Any, coerce: Callable[[Any], Any]) -> Any:
        raw = _lookup(self.doc, path)
        if raw is not _MISSING:
            value = coerce(raw)
            if value is not None:
                return value
            logger.debug("Ignoring malformed value at %s: %r", ".".join(path), raw)
        self.defaulted.append(".".join(path))
        return default

    def hero(self) -> HeroStats:
        values = {
            key: self.field(("heroStats", key), default, _as_int)
            for key, default in DEFAULT_HERO_STATS.items()
        }
        return HeroStats(**values)

    def summary(self) -> SummaryScores:
        values = {
            pillar: self.field(
                ("summaryCards", pillar, "score"),
                float(DEFAULT_SUMMARY_CARDS[pillar]["score"]),
                _as_float,
            )
            for pillar in PILLARS
        }
        return SummaryScores(**values)

    def sidebar(self) -> Dict[str, Tuple[SidebarMetric, ...]]:
        resolved: Dict[str, Tuple[SidebarMetric, ...]] = {}
        for pillar in PILLARS:
            defaults = DEFAULT_SIDEBAR_METRICS[pillar]
            raw_items = self.field(("sidebarMetrics", pillar), None, _as_list)
            if raw_items is None:
                resolved[pillar] = tuple(_sidebar_metric(item, item) for item in defaults)
                continue
            metrics = []
            for index, raw in enumerate(raw_items):
                default = defaults[index] if index < len(defaults) else None
                metric = _sidebar_metric(raw if isinstance(raw, Mapping) else {}, default)
                if metric is None:
                    logger.warning("Dropping sidebar metric %s[%d]: value or label missing", pillar, index)
                    continue
                metrics.append(metric)
            resolved[pillar] = tuple(metrics)
        return resolved

    def charts(self) -> Dict[str, ChartSpec]:
        specs: Dict[str, ChartSpec] = {}
        for key, (label_field, series_fields) in CHART_FIELDS.items():
            defaults = DEFAULT_CHART_DATA[key]
            labels = self.field(
                ("chartData", key, label_field), tuple(defaults[label_field]), _as_labels
            )
            series = tuple(
                ChartSeries(
                    name=name,
                    values=self.field(("chartData", key, name), tuple(defaults[name]), _as_list),
                )
                for name in series_fields
            )
            specs[key] = ChartSpec(labels=labels, series=series)
        return specs

    def primary_area(self) -> GeoArea:
        default = DEFAULT_PRIMARY_AREA
        return GeoArea(
            name=self.field(("primaryArea", "name"), default["name"], _as_text),
            lat=self.field(("primaryArea", "coordinates", "lat"), default["coordinates"]["lat"], _as_float),
            lng=self.field(("primaryArea", "coordinates", "lng"), default["coordinates"]["lng"], _as_float),
            health=self.field(("primaryArea", "pillars", "health"), default["pillars"]["health"], _as_float),
            talent=self.field(("primaryArea", "pillars", "talent"), default["pillars"]["talent"], _as_float),
            competitiveness=self.field(
                ("primaryArea", "pillars", "competitiveness"),
                default["pillars"]["competitiveness"],
                _as_float,
            ),
            color=self.field(("primaryArea", "color"), PRIMARY_COLOR, _as_text),
            is_primary=True,
        )

    def peer_areas(self) -> Tuple[GeoArea, ...]:
        raw_areas = self.field(("peerAreas",), None, _as_list)
        if raw_areas is None:
            return tuple(_geo_area(raw, index) for index, raw in enumerate(DEFAULT_PEER_AREAS))
        areas = []
        for index, raw in enumerate(raw_areas):
            area = _geo_area(raw, index)
            if area is None:
                self.dropped_peers += 1
                logger.warning("Dropping peer area #%d: name, coordinates or pillar scores missing", index)
                continue
            areas.append(area)
        return tuple(areas)


def _sidebar_metric(raw: Mapping, default: Optional[Mapping]) -> Optional[SidebarMetric]:
    default = default or {}
    value = _as_text(raw.get("value")) or default.get("value")
    label = _as_text(raw.get("label")) or default.get("label")
    if value is None or label is None:
        return None
    change = _as_text(raw.get("change"))
    if change is None:
        change = default.get("change", "")
    direction = raw.get("type")
    if direction not in DIRECTIONS:
        direction = default.get("type", "neutral")
    return SidebarMetric(value=value, label=label, change=change, direction=direction)


def _geo_area(raw: Any, index: int) -> Optional[GeoArea]:
    name = _as_text(_lookup(raw, ("name",)))
    lat = _as_float(_lookup(raw, ("coordinates", "lat")))
    lng = _as_float(_lookup(raw, ("coordinates", "lng")))
    scores = [_as_float(_lookup(raw, ("pillars", pillar))) for pillar in PILLARS]
    if not name or lat is None or lng is None or any(score is None for score in scores):
        return None
    color = _as_text(_lookup(raw, ("color",))) or PEER_PALETTE[index % len(PEER_PALETTE)]
    health, talent, competitiveness = scores
    return GeoArea(
        name=name,
        lat=lat,
        lng=lng,
        health=health,
        talent=talent,
        competitiveness=competitiveness,
        color=color,
        is_primary=False,
    )


def resolve(doc: Optional[Mapping]) -> ViewModel:
    """Build a complete view model from an optional, untrusted document."""
    if doc is not None and not isinstance(doc, Mapping):
        logger.warning("Dashboard document is %s, not an object; using defaults", type(doc).__name__)
        doc = None
    if doc is None:
        logger.warning("No dashboard document available; rendering built-in defaults")

    resolution = _Resolution(doc)
    view_model = ViewModel(
        hero=resolution.hero(),
        summary=resolution.summary(),
        sidebar=MappingProxyType(resolution.sidebar()),
        charts=MappingProxyType(resolution.charts()),
        primary_area=resolution.primary_area(),
        peer_areas=resolution.peer_areas(),
        diagnostics=ResolutionDiagnostics(
            source_loaded=doc is not None,
            defaulted_paths=tuple(resolution.defaulted),
            dropped_peers=resolution.dropped_peers,
        ),
    )
    if doc is not None:
        logger.info(
            "Resolved dashboard document: %d field(s) defaulted, %d peer area(s) dropped",
            len(resolution.defaulted),
            resolution.dropped_peers,
        )
        if resolution.defaulted:
            logger.debug("Defaulted paths: %s", ", ".join(resolution.defaulted))
    return view_model
