"""
Offline consistency checks for a resolved view model.

The dashboard itself passes malformed-but-present data straight to the
renderer; these checks only report it.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Dict, List

import pandas as pd

from impact_dashboard.data.models import PILLARS, ViewModel

SCORE_RANGE = (0, 100)


def series_length_mismatches(view_model: ViewModel) -> List[str]:
    issues = []
    for chart_key, spec in view_model.charts.items():
        for series in spec.series:
            if len(series.values) != len(spec.labels):
                issues.append(
                    f"chartData.{chart_key}.{series.name}: {len(series.values)} values for {len(spec.labels)} labels"
                )
    return issues


def non_numeric_values(view_model: ViewModel) -> List[str]:
    issues = []
    for chart_key, spec in view_model.charts.items():
        for series in spec.series:
            bad = [value for value in series.values if isinstance(value, bool) or not isinstance(value, Real)]
            if bad:
                issues.append(f"chartData.{chart_key}.{series.name}: non-numeric values {bad!r}")
    return issues


def out_of_range_scores(view_model: ViewModel) -> List[str]:
    low, high = SCORE_RANGE
    issues = []
    for area in view_model.geo_areas:
        for pillar in PILLARS:
            score = getattr(area, pillar)
            if not low <= score <= high:
                issues.append(f"{area.name}: {pillar} score {score} outside {low}-{high}")
    for pillar in PILLARS:
        score = view_model.summary.score_for(pillar)
        if not low <= score <= high:
            issues.append(f"summaryCards.{pillar}.score {score} outside {low}-{high}")
    return issues


def defaulted_fields_frame(view_model: ViewModel) -> pd.DataFrame:
    paths = list(view_model.diagnostics.defaulted_paths)
    frame = pd.DataFrame({"path": pd.Series(paths, dtype="object")})
    frame["section"] = frame["path"].str.split(".").str[0]
    return frame


def build_quality_overview(view_model: ViewModel) -> Dict[str, Any]:
    diagnostics = view_model.diagnostics
    defaulted = defaulted_fields_frame(view_model)
    return {
        "source_loaded": diagnostics.source_loaded,
        "defaulted_count": len(defaulted),
        "defaulted_by_section": defaulted.groupby("section").size().to_dict() if not defaulted.empty else {},
        "dropped_peers": diagnostics.dropped_peers,
        "peer_count": len(view_model.peer_areas),
        "length_mismatches": series_length_mismatches(view_model),
        "non_numeric_values": non_numeric_values(view_model),
        "out_of_range_scores": out_of_range_scores(view_model),
    }
