"""
Populate the process environment before settings are read.

Streamlit secrets are copied into `os.environ` first (nested tables become
`TABLE_KEY` names), then a local `.env` file fills whatever is still unset.
Neither step overrides a variable that already exists.
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterator, Mapping, Tuple

import streamlit as st
from dotenv import load_dotenv


def _env_name(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            yield from _flatten(f"{prefix}_{child_key}", child_value)
        return
    yield _env_name(prefix), str(value)


def bridge_secrets(secrets: Mapping[str, Any]) -> None:
    """Copy secrets into the environment without overriding existing values."""
    for key, value in secrets.items():
        for name, text in _flatten(key, value):
            os.environ.setdefault(name, text)


def _read_streamlit_secrets() -> Mapping[str, Any]:
    try:
        # Raises outside the Streamlit runtime or without a secrets.toml
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return {}
        if hasattr(secrets, "to_dict"):
            return secrets.to_dict()
        return dict(secrets)
    except (FileNotFoundError, RuntimeError, KeyError):
        return {}


def ensure_env() -> None:
    """Idempotent; safe both inside and outside the Streamlit runtime."""
    bridge_secrets(_read_streamlit_secrets())
    load_dotenv()
