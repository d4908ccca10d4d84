"""
Plotly chart projectors with consistent styling for the dashboard.

Every projector is a pure function of the view model: the same view model
always yields the same figure. Palette, radii and font sizes are
presentation constants owned by this module, not part of the data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import plotly.graph_objects as go
import plotly.io as pio
import streamlit as st

from impact_dashboard.data.models import ViewModel
from impact_dashboard.ui.components.formatting import assign_labels, short_name

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "impact_dashboard"
FONT_FAMILY = "Inter, system-ui, sans-serif"
TEXT_COLOR = "#64748b"
GRID_COLOR = "#f1f5f9"
BORDER_COLOR = "#e2e8f0"

BLUE = "#3b82f6"
GREEN = "#10b981"
PURPLE = "#8b5cf6"
AMBER = "#f59e0b"
RED = "#ef4444"
SLATE = "#64748b"

GRADUATION_COLORS = [GREEN, BLUE, PURPLE, AMBER]
INFRASTRUCTURE_COLORS = [GREEN, BLUE, AMBER, RED]

DENTAL_RANGE = (60, 85)
PEER_X_RANGE = (60, 90)
PEER_Y_RANGE = (75, 95)

SERIES_LABELS = {
    "stateAverage": "Mississippi Average",
    "national": "National Average",
    "rates": "Dental Care Access Rate",
    "netMigration": "Net Migration Rate",
    "incomeGrowth": "Median Income Growth",
    "scores": "Infrastructure Quality Score",
}


def _register_template() -> None:
    template = go.layout.Template(pio.templates["plotly_white"])
    template.layout.font = dict(family=FONT_FAMILY, size=12, color=TEXT_COLOR)
    template.layout.xaxis.gridcolor = GRID_COLOR
    template.layout.yaxis.gridcolor = GRID_COLOR
    template.layout.xaxis.linecolor = BORDER_COLOR
    template.layout.yaxis.linecolor = BORDER_COLOR
    pio.templates[TEMPLATE_NAME] = template


_register_template()


@dataclass(frozen=True)
class ChartAnimation:
    duration_ms: int = 1500
    easing: str = "cubic-out"
    stagger_ms: int = 100

    def delay_for(self, kind: str, index: int) -> int:
        """Data points enter one after another; axes and legends do not wait."""
        if kind != "data":
            return 0
        return index * self.stagger_ms


DEFAULT_ANIMATION = ChartAnimation()


def with_entrance_animation(fig: go.Figure, animation: ChartAnimation = DEFAULT_ANIMATION) -> go.Figure:
    """Return a copy of `fig` carrying the entrance animation descriptor."""
    animated = go.Figure(fig)
    animated.update_layout(
        transition=dict(duration=animation.duration_ms, easing=animation.easing),
        meta=dict(entrance=dict(duration_ms=animation.duration_ms, stagger_ms=animation.stagger_ms)),
    )
    return animated


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    show_legend: bool = True,
    yaxis_ticksuffix: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=TEMPLATE_NAME,
        title=title,
        showlegend=show_legend,
        margin=dict(l=40, r=20, t=60 if title else 20, b=40),
        legend=dict(
            orientation="h",
            yanchor="top",
            y=-0.15,
            xanchor="center",
            x=0.5,
            font=dict(size=11),
        ),
    )
    fig.update_xaxes(showgrid=False, tickfont=dict(size=11, color=TEXT_COLOR))
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, tickfont=dict(size=11, color=TEXT_COLOR))
    if yaxis_ticksuffix:
        fig.update_yaxes(ticksuffix=yaxis_ticksuffix)
    return fig


def render_plotly(fig: go.Figure, config: Optional[dict] = None) -> None:
    options = {"displayModeBar": False}
    if config:
        options.update(config)
    st.plotly_chart(fig, use_container_width=True, config=options)


def _subject_label(view_model: ViewModel) -> str:
    return short_name(view_model.primary_area.name)


def chronic_disease_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["chronicDisease"]
    fig = go.Figure()
    # Subject first, reference second
    fig.add_trace(
        go.Bar(
            x=list(spec.labels),
            y=list(spec.values_for("oxford")),
            name=_subject_label(view_model),
            marker=dict(color=BLUE),
        )
    )
    fig.add_trace(
        go.Bar(
            x=list(spec.labels),
            y=list(spec.values_for("stateAverage")),
            name=SERIES_LABELS["stateAverage"],
            marker=dict(color=BORDER_COLOR),
        )
    )
    fig = _configure_layout(fig, yaxis_ticksuffix="%")
    fig.update_layout(barmode="group", barcornerradius=4)
    fig.update_yaxes(rangemode="tozero")
    return fig


def dental_access_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["dentalAccess"]
    fig = go.Figure(
        go.Scatter(
            x=list(spec.labels),
            y=list(spec.values_for("rates")),
            name=SERIES_LABELS["rates"],
            mode="lines+markers",
            line=dict(color=GREEN, shape="spline", smoothing=0.8),
            fill="tozeroy",
            fillcolor="rgba(16, 185, 129, 0.1)",
            marker=dict(size=10, color=GREEN, line=dict(color="#ffffff", width=2)),
        )
    )
    fig = _configure_layout(fig, show_legend=False, yaxis_ticksuffix="%")
    # Display range is fixed; it does not follow the data
    fig.update_yaxes(range=list(DENTAL_RANGE), autorange=False)
    return fig


def education_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["education"]
    fig = go.Figure()
    for name, color, fill in (
        ("oxford", BLUE, "rgba(59, 130, 246, 0.1)"),
        ("national", SLATE, "rgba(100, 116, 139, 0.1)"),
    ):
        fig.add_trace(
            go.Scatterpolar(
                r=list(spec.values_for(name)),
                theta=list(spec.labels),
                name=_subject_label(view_model) if name == "oxford" else SERIES_LABELS[name],
                fill="toself",
                fillcolor=fill,
                line=dict(color=color),
                marker=dict(size=8, color=color),
            )
        )
    fig = _configure_layout(fig)
    fig.update_layout(
        polar=dict(
            bgcolor="#ffffff",
            radialaxis=dict(
                range=[0, 100],
                dtick=20,
                gridcolor=GRID_COLOR,
                tickfont=dict(size=9, color=TEXT_COLOR),
            ),
            angularaxis=dict(gridcolor=GRID_COLOR, tickfont=dict(size=10, color=TEXT_COLOR)),
        )
    )
    return fig


def graduation_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["graduation"]
    fig = go.Figure(
        go.Pie(
            labels=list(spec.labels),
            values=list(spec.values_for("rates")),
            hole=0.55,
            sort=False,
            direction="clockwise",
            marker=dict(colors=GRADUATION_COLORS, line=dict(color="#ffffff", width=3)),
            textinfo="none",
            hovertemplate="%{label}: %{value}%<extra></extra>",
        )
    )
    fig = _configure_layout(fig)
    fig.update_layout(margin=dict(l=20, r=20, t=20, b=60))
    return fig


def migration_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["migration"]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(spec.labels),
            y=list(spec.values_for("netMigration")),
            name=SERIES_LABELS["netMigration"],
            mode="lines+markers",
            line=dict(color=PURPLE, shape="spline", smoothing=0.8),
            fill="tozeroy",
            fillcolor="rgba(139, 92, 246, 0.1)",
            marker=dict(size=10, color=PURPLE, line=dict(color="#ffffff", width=2)),
            yaxis="y",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=list(spec.labels),
            y=list(spec.values_for("incomeGrowth")),
            name=SERIES_LABELS["incomeGrowth"],
            mode="lines+markers",
            line=dict(color=AMBER, shape="spline", smoothing=0.8),
            marker=dict(size=10, color=AMBER, line=dict(color="#ffffff", width=2)),
            yaxis="y2",
        )
    )
    fig = _configure_layout(fig, yaxis_ticksuffix="%")
    # Each series keeps its own scale; they are not comparable on one axis
    fig.update_layout(
        yaxis=dict(side="left"),
        yaxis2=dict(
            overlaying="y",
            side="right",
            showgrid=False,
            ticksuffix="%",
            tickfont=dict(size=11, color=TEXT_COLOR),
        ),
    )
    return fig


def infrastructure_figure(view_model: ViewModel) -> go.Figure:
    spec = view_model.charts["infrastructure"]
    colors = [INFRASTRUCTURE_COLORS[index % len(INFRASTRUCTURE_COLORS)] for index in range(len(spec.labels))]
    fig = go.Figure(
        go.Bar(
            x=list(spec.labels),
            y=list(spec.values_for("scores")),
            name=SERIES_LABELS["scores"],
            marker=dict(color=colors),
        )
    )
    fig = _configure_layout(fig, show_legend=False)
    fig.update_layout(barcornerradius=6)
    fig.update_yaxes(range=[0, 100])
    return fig


def peer_positioning_figure(view_model: ViewModel) -> go.Figure:
    areas = view_model.geo_areas
    labels = assign_labels(areas)
    fig = go.Figure()
    for area, label in zip(areas, labels):
        size = 24 if area.is_primary else 16
        fig.add_trace(
            go.Scatter(
                x=[area.health],
                y=[area.talent],
                name=label,
                mode="markers",
                marker=dict(size=size, color=area.color, line=dict(color=area.color, width=1)),
                hovertemplate=f"{area.name}<br>Health: %{{x}}<br>Talent: %{{y}}<extra></extra>",
            )
        )
    fig = _configure_layout(fig)
    fig.update_xaxes(
        title=dict(text="Health & Wellness Score", font=dict(size=12, color=TEXT_COLOR)),
        range=list(PEER_X_RANGE),
        showgrid=True,
        gridcolor=GRID_COLOR,
    )
    fig.update_yaxes(
        title=dict(text="Talent Pipeline Score", font=dict(size=12, color=TEXT_COLOR)),
        range=list(PEER_Y_RANGE),
    )
    return fig


CHART_PROJECTORS: Dict[str, Callable[[ViewModel], go.Figure]] = {
    "chronicDiseaseChart": chronic_disease_figure,
    "dentalAccessChart": dental_access_figure,
    "educationChart": education_figure,
    "graduationChart": graduation_figure,
    "migrationChart": migration_figure,
    "infrastructureChart": infrastructure_figure,
    "peerComparisonChart": peer_positioning_figure,
}


def build_chart_configs(view_model: ViewModel) -> Dict[str, go.Figure]:
    """Project every chart once, keyed by widget id.

    A projector that fails on malformed data is logged and left out; the
    remaining charts are still built.
    """
    configs: Dict[str, go.Figure] = {}
    for chart_id, projector in CHART_PROJECTORS.items():
        try:
            configs[chart_id] = projector(view_model)
        except (KeyError, TypeError, ValueError):
            logger.exception("Could not build chart %s", chart_id)
    return configs
