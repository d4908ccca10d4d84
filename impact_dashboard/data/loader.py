"""
Fetch the dashboard metrics document from a local file or an HTTP(S) URL.

Every failure mode (missing file, network error, HTTP error, invalid JSON,
non-object payload) is logged and reported as `None`; the resolver then
falls back to the default table.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import requests
import streamlit as st

from impact_dashboard.config import Settings, load_settings

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "impact-dashboard/1.0", "Accept": "application/json"}


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_text(source: str, timeout: float) -> str:
    if _is_url(source):
        response = requests.get(source, timeout=timeout, headers=HEADERS)
        response.raise_for_status()
        return response.text
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def load_document(source: str, timeout: float = 10.0) -> Optional[Dict[str, Any]]:
    """Return the parsed document, or None when it cannot be used."""
    try:
        text = _read_text(source, timeout)
    except (OSError, UnicodeDecodeError, requests.RequestException) as exc:
        logger.warning("Could not read dashboard data from %s: %s", source, exc)
        return None

    try:
        payload = json.loads(text)
    except ValueError as exc:
        logger.warning("Dashboard data at %s is not valid JSON: %s", source, exc)
        return None

    if not isinstance(payload, dict):
        logger.warning(
            "Dashboard data at %s must be a JSON object, got %s", source, type(payload).__name__
        )
        return None

    logger.info("Dashboard data loaded from %s", source)
    return payload


def load_dashboard_document(settings: Optional[Settings] = None) -> Optional[Dict[str, Any]]:
    """Wrapper that resolves config and calls the cached implementation."""
    settings = settings or load_settings()
    source = settings.data_source
    if not _is_url(source):
        source = os.path.abspath(source)
    return _load_document_cached(source, settings.request_timeout)


@st.cache_data(show_spinner=False, ttl=600)
def _load_document_cached(source: str, timeout: float) -> Optional[Dict[str, Any]]:
    """Fetch once per cache window, keyed by source and timeout."""
    return load_document(source, timeout)
