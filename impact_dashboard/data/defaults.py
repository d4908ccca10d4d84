"""
Static default table for every field the dashboard displays.

The table mirrors the shape of `data/dashboard-metrics.json` so that the
resolver can fall back path by path. Any field added to the document needs a
matching entry here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

PRIMARY_COLOR = "#ef4444"
PRIMARY_CODE = "OX"
PEER_PALETTE: List[str] = ["#3b82f6", "#10b981", "#8b5cf6", "#f59e0b", "#06b6d4", "#ec4899"]

DEFAULT_HERO_STATS: Dict[str, int] = {
    "population": 25416,
    "pillars": 3,
    "metrics": 18,
}

DEFAULT_SUMMARY_CARDS: Dict[str, Dict[str, float]] = {
    "health": {"score": 72},
    "talent": {"score": 89},
    "competitiveness": {"score": 67},
}

DEFAULT_SIDEBAR_METRICS: Dict[str, List[Dict[str, str]]] = {
    "health": [
        {"value": "78%", "label": "Dental Care Access", "change": "+3% since 2022", "type": "positive"},
        {"value": "8.2%", "label": "Diabetes Prevalence", "change": "-2.9 pts vs state", "type": "positive"},
        {"value": "1:1,240", "label": "Primary Care Ratio", "change": "No change", "type": "neutral"},
    ],
    "talent": [
        {"value": "93%", "label": "High School Graduation", "change": "+1.5% since 2021", "type": "positive"},
        {"value": "35%", "label": "Bachelor's Attainment", "change": "+7 pts vs national", "type": "positive"},
        {"value": "4.1%", "label": "Youth Out-Migration", "change": "+0.4% since 2022", "type": "negative"},
    ],
    "competitiveness": [
        {"value": "2.3%", "label": "Net Migration Rate", "change": "-0.5% since 2022", "type": "negative"},
        {"value": "4.8%", "label": "Median Income Growth", "change": "+2.7% since 2020", "type": "positive"},
        {"value": "85%", "label": "Broadband Coverage", "change": "+6% since 2021", "type": "positive"},
    ],
}

# chart key -> (label field, series fields in display order)
CHART_FIELDS: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "chronicDisease": ("labels", ("oxford", "stateAverage")),
    "dentalAccess": ("years", ("rates",)),
    "education": ("labels", ("oxford", "national")),
    "graduation": ("labels", ("rates",)),
    "migration": ("years", ("netMigration", "incomeGrowth")),
    "infrastructure": ("categories", ("scores",)),
}

DEFAULT_CHART_DATA: Dict[str, Dict[str, List[Any]]] = {
    "chronicDisease": {
        "labels": ["Diabetes", "Heart Disease", "COPD", "Cancer", "Stroke"],
        "oxford": [8.2, 5.8, 4.1, 22.4, 3.2],
        "stateAverage": [11.1, 7.2, 5.9, 24.8, 4.1],
    },
    "dentalAccess": {
        "years": ["2019", "2020", "2021", "2022", "2023"],
        "rates": [68, 71, 73, 75, 78],
    },
    "education": {
        "labels": ["High School", "Some College", "Associates", "Bachelors", "Masters", "Doctoral"],
        "oxford": [89, 45, 22, 35, 20, 8],
        "national": [85, 38, 18, 28, 15, 5],
    },
    "graduation": {
        "labels": ["High School", "Community College", "University", "Graduate School"],
        "rates": [93, 78, 89, 85],
    },
    "migration": {
        "years": ["2018", "2019", "2020", "2021", "2022", "2023"],
        "netMigration": [1.2, 1.8, 0.9, 2.1, 2.8, 2.3],
        "incomeGrowth": [2.1, 3.2, 1.8, 4.5, 5.2, 4.8],
    },
    "infrastructure": {
        "categories": ["Broadband Speed", "Coverage %", "Reliability", "Affordability"],
        "scores": [78, 85, 72, 68],
    },
}

DEFAULT_PRIMARY_AREA: Dict[str, Any] = {
    "name": "Oxford, MS",
    "coordinates": {"lat": 34.3664, "lng": -89.5192},
    "pillars": {"health": 72, "talent": 89, "competitiveness": 67},
    "color": PRIMARY_COLOR,
}

DEFAULT_PEER_AREAS: List[Dict[str, Any]] = [
    {
        "name": "Clemson, SC Micro",
        "coordinates": {"lat": 34.6834, "lng": -82.8374},
        "pillars": {"health": 68, "talent": 85, "competitiveness": 71},
        "color": "#3b82f6",
    },
    {
        "name": "Boone, NC Micro",
        "coordinates": {"lat": 36.2168, "lng": -81.6746},
        "pillars": {"health": 75, "talent": 87, "competitiveness": 73},
        "color": "#10b981",
    },
    {
        "name": "Starkville, MS Micro",
        "coordinates": {"lat": 33.4504, "lng": -88.8184},
        "pillars": {"health": 65, "talent": 82, "competitiveness": 69},
        "color": "#8b5cf6",
    },
    {
        "name": "Athens-Clarke County, GA Micro",
        "coordinates": {"lat": 33.9519, "lng": -83.3576},
        "pillars": {"health": 82, "talent": 91, "competitiveness": 78},
        "color": "#f59e0b",
    },
]

DEFAULT_DOCUMENT: Dict[str, Any] = {
    "heroStats": DEFAULT_HERO_STATS,
    "summaryCards": DEFAULT_SUMMARY_CARDS,
    "sidebarMetrics": DEFAULT_SIDEBAR_METRICS,
    "chartData": DEFAULT_CHART_DATA,
    "primaryArea": DEFAULT_PRIMARY_AREA,
    "peerAreas": DEFAULT_PEER_AREAS,
}
