from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd
import requests

from dashboard_components.aggregates import available_years
from dashboard_components.records import empty_records, records_to_dataframe
from logging_setup import get_logger

logger = get_logger(__name__)


class SalesDataError(Exception):
    """Raised when the sales dataset cannot be loaded."""


class TransportError(SalesDataError):
    """The source could not be read (missing file, network error, bad status)."""


class PayloadShapeError(SalesDataError):
    """The source was read but is not a non-empty list of sales records."""


@dataclass
class LoadResult:
    records: pd.DataFrame
    years: List[int] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_remote_source(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _read_remote(source: str, timeout: float) -> Any:
    try:
        response = requests.get(source, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"Request to {source} failed: {exc}") from exc

    if not response.ok:
        raise TransportError(f"HTTP error! status: {response.status_code}")

    try:
        return response.json()
    except ValueError as exc:
        raise PayloadShapeError(f"Response from {source} is not valid JSON") from exc


def _read_local(source: str) -> Any:
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TransportError(f"Unable to read {path}: {exc}") from exc

    try:
        return json.loads(text)
    except ValueError as exc:
        raise PayloadShapeError(f"{path} is not valid JSON") from exc


def fetch_sales_payload(source: str, timeout: float = 10.0) -> List[dict]:
    """Read the raw JSON document and check it is a non-empty list."""
    payload = _read_remote(source, timeout) if is_remote_source(source) else _read_local(source)

    if not isinstance(payload, list) or len(payload) == 0:
        raise PayloadShapeError("Loaded data is not a valid array or is empty")
    if not all(isinstance(entry, dict) for entry in payload):
        raise PayloadShapeError("Every sales record must be a JSON object")
    return payload


def parse_sales_payload(payload: List[dict]) -> pd.DataFrame:
    try:
        return records_to_dataframe(payload)
    except KeyError as exc:
        raise PayloadShapeError(f"Sales record is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise PayloadShapeError(f"Sales record has an invalid value: {exc}") from exc


def load_sales_records(source: str, timeout: float = 10.0) -> LoadResult:
    """Load the dataset once; failures are logged and yield an empty result."""
    logger.info("Fetching sales data from %s", source)
    try:
        payload = fetch_sales_payload(source, timeout=timeout)
        records = parse_sales_payload(payload)
    except SalesDataError as exc:
        logger.error("Error while loading sales data from %s: %s", source, exc, exc_info=True)
        return LoadResult(records=empty_records(), error=str(exc))

    years = available_years(records)
    logger.info("Loaded %d sales records covering years %s", len(records), years)
    return LoadResult(records=records, years=years)
