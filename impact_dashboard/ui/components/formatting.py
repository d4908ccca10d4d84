"""
Utility helpers for formatting numeric values and deriving area labels.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from impact_dashboard.data.defaults import PRIMARY_CODE
from impact_dashboard.data.models import GeoArea


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_score(value: Optional[float]) -> str:
    """Scores print without a trailing `.0` when they are whole numbers."""
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    if numeric.is_integer():
        return format_number(numeric, 0)
    return format_number(numeric, 1)


def short_name(name: str) -> str:
    """First comma-separated segment, e.g. 'Oxford, MS' -> 'Oxford'."""
    return name.split(",")[0].strip() or name.strip()


def peer_label(name: str) -> str:
    base = short_name(name)
    if base.endswith(" Micro"):
        return base
    return f"{base} Micro"


def assign_labels(areas: Sequence[GeoArea]) -> List[str]:
    """One distinct display label per area.

    Primary areas keep their short name. A peer whose short label collides
    with another area's label falls back to its full name, and a numbered
    suffix is added if that is taken too.
    """
    labels = [short_name(area.name) if area.is_primary else peer_label(area.name) for area in areas]
    counts = {label: labels.count(label) for label in labels}
    used = {label for area, label in zip(areas, labels) if area.is_primary}
    resolved = []
    for area, label in zip(areas, labels):
        if area.is_primary:
            resolved.append(label)
            continue
        if counts[label] > 1 or label in used:
            label = area.name
        candidate, suffix = label, 2
        while candidate in used:
            candidate = f"{label} ({suffix})"
            suffix += 1
        used.add(candidate)
        resolved.append(candidate)
    return resolved


def marker_code(area: GeoArea, label: str) -> str:
    if area.is_primary:
        return PRIMARY_CODE
    return label[:2].upper()
