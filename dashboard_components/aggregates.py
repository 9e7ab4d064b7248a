from __future__ import annotations

import math
from typing import List, Optional

import pandas as pd

YEARLY_COLUMNS = ["year", "total"]
MONTHLY_COLUMNS = ["year", "month", "month_name", "total"]
GROWTH_COLUMNS = ["year", "growth_percent"]


def _empty(columns: List[str]) -> pd.DataFrame:
    return pd.DataFrame(columns=columns)


def available_years(records: pd.DataFrame) -> List[int]:
    """Sorted distinct years present in the records."""
    if records is None or records.empty:
        return []
    return sorted(int(year) for year in records["year"].dropna().unique())


def format_amount(value: float) -> str:
    """Two-decimal plain string form of an amount, e.g. ``150.00``."""
    return f"{float(value):.2f}"


def yearly_totals(records: pd.DataFrame) -> pd.DataFrame:
    """One row per distinct year, ascending, with the summed amount."""
    if records is None or records.empty:
        return _empty(YEARLY_COLUMNS)

    totals = records.groupby("year", sort=True)["amount"].sum().reset_index(name="total")
    totals["year"] = totals["year"].astype(int)
    totals["total"] = totals["total"].round(2)
    return totals[YEARLY_COLUMNS].reset_index(drop=True)


def monthly_totals(records: pd.DataFrame) -> pd.DataFrame:
    """Totals per (year, month) that have at least one record.

    Rows are ordered by year then month 1..12; the month name comes from
    the first matching record in input order.
    """
    if records is None or records.empty:
        return _empty(MONTHLY_COLUMNS)

    in_range = records[records["month"].between(1, 12)]
    if in_range.empty:
        return _empty(MONTHLY_COLUMNS)

    grouped = in_range.groupby(["year", "month"], sort=True)
    monthly = grouped.agg(month_name=("month_name", "first"), total=("amount", "sum")).reset_index()
    monthly["year"] = monthly["year"].astype(int)
    monthly["month"] = monthly["month"].astype(int)
    monthly["total"] = monthly["total"].round(2)
    return monthly[MONTHLY_COLUMNS].reset_index(drop=True)


def growth_rate(previous: float, current: float) -> Optional[float]:
    if previous is None or pd.isna(previous) or previous == 0:
        return None
    return round((current - previous) / previous * 100, 2)


def yearly_growth(yearly: pd.DataFrame) -> pd.DataFrame:
    """Year-over-year growth for every year after the earliest.

    ``growth_percent`` is NaN when the prior year's total is zero.
    """
    if yearly is None or len(yearly) < 2:
        return _empty(GROWTH_COLUMNS)

    ordered = yearly.sort_values("year").reset_index(drop=True)
    rows = []
    for index in range(1, len(ordered)):
        previous = float(ordered.loc[index - 1, "total"])
        current = float(ordered.loc[index, "total"])
        rate = growth_rate(previous, current)
        rows.append(
            {
                "year": int(ordered.loc[index, "year"]),
                "growth_percent": float("nan") if rate is None else rate,
            }
        )
    return pd.DataFrame(rows, columns=GROWTH_COLUMNS)


def weekly_for_year(records: pd.DataFrame, year: Optional[int]) -> pd.DataFrame:
    """Records of ``year`` sorted by (month, week)."""
    if records is None or records.empty or year is None:
        return records.iloc[0:0].copy() if records is not None else pd.DataFrame()

    weekly = records[records["year"] == year]
    return weekly.sort_values(["month", "week"], kind="mergesort").reset_index(drop=True)


def monthly_for_year(monthly: pd.DataFrame, year: Optional[int]) -> pd.DataFrame:
    if monthly is None or monthly.empty or year is None:
        return _empty(MONTHLY_COLUMNS)
    return monthly[monthly["year"] == year].sort_values("month").reset_index(drop=True)


def growth_for_year(growth: pd.DataFrame, year: int) -> Optional[float]:
    """Growth percent recorded for ``year``; None when absent or undefined."""
    if growth is None or growth.empty:
        return None
    match = growth.loc[growth["year"] == year, "growth_percent"]
    if match.empty or pd.isna(match.iloc[0]):
        return None
    return float(match.iloc[0])


def axis_upper_bound(values: pd.Series, headroom: float = 1.1) -> float:
    """Upper y-axis bound leaving 10% headroom above the largest value."""
    if values is None or len(values) == 0:
        return 0.0
    maximum = pd.to_numeric(values, errors="coerce").max()
    if pd.isna(maximum) or maximum <= 0:
        return 0.0
    return float(math.ceil(round(maximum * headroom, 6)))
