from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from logging_setup import get_logger

logger = get_logger(__name__)

# Wire field name -> DataFrame column.
FIELD_MAP: Dict[str, str] = {
    "yil": "year",
    "ay": "month",
    "ay_adi": "month_name",
    "hafta": "week",
    "toplam_tutar": "amount_raw",
}

INTEGER_COLUMNS = ("year", "month", "week")
RECORD_COLUMNS: List[str] = ["year", "month", "month_name", "week", "amount_raw", "amount"]

_AMOUNT_CHARS = re.compile(r"[^0-9,.\-]")


def parse_amount(value: Any) -> Optional[float]:
    """Parse a grouping-separated decimal amount, returning None when not numeric.

    A string may use "," or "." for grouping and at most one decimal
    separator. When both characters appear, the last one is the decimal
    separator. A lone dot is always decimal ("0.125"). A lone comma
    followed by one or two digits is decimal ("100,00"); anything else is
    grouping ("1,234", "1.234.567").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    if not isinstance(value, str):
        return None

    text = _AMOUNT_CHARS.sub("", value.strip())
    if not text:
        return None

    last_comma = text.rfind(",")
    last_dot = text.rfind(".")

    if last_comma >= 0 and last_dot >= 0:
        decimal_sep = "," if last_comma > last_dot else "."
    elif last_comma >= 0 or last_dot >= 0:
        sep = "," if last_comma >= 0 else "."
        fraction = text.rsplit(sep, 1)[1]
        if text.count(sep) != 1:
            decimal_sep = None
        elif sep == ".":
            decimal_sep = "."
        else:
            decimal_sep = sep if 1 <= len(fraction) <= 2 else None
    else:
        decimal_sep = None

    if decimal_sep is None:
        normalized = text.replace(",", "").replace(".", "")
    else:
        whole, fraction = text.rsplit(decimal_sep, 1)
        normalized = f"{whole.replace(',', '').replace('.', '')}.{fraction}"

    try:
        return float(normalized)
    except ValueError:
        return None


def amount_or_zero(value: Any) -> float:
    parsed = parse_amount(value)
    if parsed is None:
        logger.warning("Unparseable sales amount %r treated as 0", value)
        return 0.0
    return parsed


def empty_records() -> pd.DataFrame:
    frame = pd.DataFrame({column: pd.Series(dtype="object") for column in RECORD_COLUMNS})
    for column in INTEGER_COLUMNS:
        frame[column] = frame[column].astype("int64")
    frame["amount"] = frame["amount"].astype("float64")
    return frame


def records_to_dataframe(payload: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """Map wire-format entries onto the records DataFrame.

    Raises KeyError for a missing field and ValueError/TypeError for a
    year, month or week that is not an integer.
    """
    rows: List[Dict[str, Any]] = []
    for entry in payload:
        row = {column: entry[field] for field, column in FIELD_MAP.items()}
        for column in INTEGER_COLUMNS:
            value = row[column]
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError(f"{column} must be an integer, got {value!r}")
            row[column] = int(value)
        row["month_name"] = "" if row["month_name"] is None else str(row["month_name"])
        row["amount"] = amount_or_zero(row["amount_raw"])
        rows.append(row)

    if not rows:
        return empty_records()

    frame = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    for column in INTEGER_COLUMNS:
        frame[column] = frame[column].astype("int64")
    frame["amount"] = frame["amount"].astype("float64")
    return frame


def dataframe_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Return records in the wire format (used for the JSON download)."""
    if df is None or df.empty:
        return []
    reverse_map = {column: field for field, column in FIELD_MAP.items()}
    result: List[Dict[str, Any]] = []
    for row in df[list(reverse_map)].itertuples(index=False):
        entry = dict(zip(reverse_map.values(), row))
        for field in ("yil", "ay", "hafta"):
            entry[field] = int(entry[field])
        result.append(entry)
    return result
