"""
Runtime settings for the sales dashboard.

Values are read from Streamlit Secrets first, then from environment
variables (a local .env is loaded for development), then defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st
from dotenv import load_dotenv
from streamlit.errors import StreamlitAPIException

DEFAULT_DATA_SOURCE = "data/satis_verileri.json"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    data_source: str = DEFAULT_DATA_SOURCE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _read_secret(name: str) -> Optional[Any]:
    try:
        return st.secrets.get(name)
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml present, which is the normal local setup.
        return None


def _lookup(name: str, secrets: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    value = secrets.get(name) if secrets is not None else _read_secret(name)
    if value is None or str(value).strip() == "":
        value = os.getenv(name)
    if value is None or str(value).strip() == "":
        return None
    return str(value).strip()


def parse_timeout(raw: Optional[str], default: float = DEFAULT_REQUEST_TIMEOUT) -> float:
    if raw is None:
        return default
    try:
        timeout = float(raw)
    except ValueError:
        return default
    if timeout <= 0:
        return default
    return timeout


def get_settings(secrets: Optional[Mapping[str, Any]] = None) -> Settings:
    """Resolve settings; pass ``secrets`` to bypass ``st.secrets`` (used in tests)."""
    load_dotenv()

    return Settings(
        data_source=_lookup("SALES_DATA_SOURCE", secrets) or DEFAULT_DATA_SOURCE,
        request_timeout=parse_timeout(_lookup("SALES_REQUEST_TIMEOUT", secrets)),
        log_level=(_lookup("SALES_LOG_LEVEL", secrets) or DEFAULT_LOG_LEVEL).upper(),
    )
