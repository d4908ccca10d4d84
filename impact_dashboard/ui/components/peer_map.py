"""
Peer micropolitan map: one marker per area on a raster tile basemap.
"""

from __future__ import annotations

import html
from typing import Dict, List, Optional

import plotly.graph_objects as go

from impact_dashboard.config import DEFAULT_MAP_TILES
from impact_dashboard.data.defaults import PRIMARY_COLOR
from impact_dashboard.data.models import GeoArea, ViewModel
from impact_dashboard.ui.components.formatting import assign_labels, format_score, marker_code

MAP_CENTER = {"lat": 33.5, "lon": -86.5}
MAP_ZOOM = 6
PRIMARY_MARKER_SIZE = 32
PEER_MARKER_SIZE = 24
TILE_SUBDOMAINS = "abcd"
TILE_ATTRIBUTION = "© OpenStreetMap contributors © CARTO"
LEGEND_TITLE = "Micropolitan Areas"
PEER_LEGEND_COLOR = "#64748b"

# Scroll-wheel zoom stays off so the page scrolls past the map
MAP_RENDER_CONFIG = {"scrollZoom": False}


def tile_sources(template: str = DEFAULT_MAP_TILES) -> List[str]:
    """Expand a `{s}` subdomain template into one URL per subdomain."""
    if "{s}" not in template:
        return [template]
    return [template.replace("{s}", subdomain) for subdomain in TILE_SUBDOMAINS]


def popup_html(area: GeoArea) -> str:
    name = html.escape(area.name)
    lines = [
        f"<b>{name}</b>",
        f"Health & Wellness: <b>{format_score(area.health)}</b>",
        f"Talent Pipeline: <b>{format_score(area.talent)}</b>",
        f"Competitiveness: <b>{format_score(area.competitiveness)}</b>",
    ]
    if area.is_primary:
        lines.append(f"<span style='color:{PRIMARY_COLOR}'>Primary Focus Area</span>")
    return "<br>".join(lines)


def _marker_trace(area: GeoArea, label: str) -> go.Scattermap:
    size = PRIMARY_MARKER_SIZE if area.is_primary else PEER_MARKER_SIZE
    return go.Scattermap(
        lat=[area.lat],
        lon=[area.lng],
        mode="markers+text",
        name=label,
        marker=dict(size=size, color=area.color, opacity=0.9),
        text=[marker_code(area, label)],
        texttemplate="<b>%{text}</b>" if area.is_primary else "%{text}",
        textposition="middle center",
        textfont=dict(size=14 if area.is_primary else 12, color="#ffffff"),
        hovertext=[popup_html(area)],
        hoverinfo="text",
        showlegend=False,
    )


def _legend_annotation(primary_label: str) -> Dict[str, object]:
    text = "<br>".join(
        [
            f"<b>{LEGEND_TITLE}</b>",
            f"<span style='color:{PRIMARY_COLOR}'>●</span> {html.escape(primary_label)} (Primary)",
            f"<span style='color:{PEER_LEGEND_COLOR}'>●</span> Peer Micros",
        ]
    )
    return dict(
        text=text,
        align="left",
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.99,
        y=0.02,
        xanchor="right",
        yanchor="bottom",
        bgcolor="#ffffff",
        bordercolor="#e2e8f0",
        borderwidth=1,
        borderpad=8,
        font=dict(size=12, color="#1a1a1a"),
    )


def peer_map_figure(view_model: ViewModel, tiles: Optional[str] = None) -> go.Figure:
    """Markers for the primary area and every peer, plus the static legend."""
    areas = view_model.geo_areas
    labels = assign_labels(areas)
    fig = go.Figure([_marker_trace(area, label) for area, label in zip(areas, labels)])
    fig.update_layout(
        map=dict(
            style="white-bg",
            center=MAP_CENTER,
            zoom=MAP_ZOOM,
            layers=[
                dict(
                    below="traces",
                    sourcetype="raster",
                    sourceattribution=TILE_ATTRIBUTION,
                    source=tile_sources(tiles or DEFAULT_MAP_TILES),
                )
            ],
        ),
        margin=dict(l=0, r=0, t=0, b=0),
        height=460,
        hoverlabel=dict(bgcolor="#ffffff", font=dict(size=13, color="#1a1a1a")),
        annotations=[_legend_annotation(labels[0])],
    )
    return fig
