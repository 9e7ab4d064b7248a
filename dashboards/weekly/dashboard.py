"""Weekly dashboard view."""

from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from dashboard_components.aggregates import axis_upper_bound, weekly_for_year
from dashboards.shared import (
    MONTHLY_BAR_COLOR,
    build_bar_chart,
    format_currency,
    render_bar_chart,
    render_dataframe,
    render_divider,
    render_section_title,
    week_hue_color,
    with_total_row,
)

NO_DATA_MESSAGE = "Seçilen yıl için veri bulunamadı."
WEEKLY_SALES_LABEL = "Haftalık Satış"


def week_label(week: int) -> str:
    return f"Hafta {int(week)}"


def split_by_month(weekly: pd.DataFrame) -> List[Tuple[int, str, pd.DataFrame]]:
    """Group weekly rows by month in first-seen order as (month, month name, rows)."""
    sections: List[Tuple[int, str, pd.DataFrame]] = []
    if weekly is None or weekly.empty:
        return sections
    for month in weekly["month"].drop_duplicates().tolist():
        rows = weekly[weekly["month"] == month].reset_index(drop=True)
        sections.append((int(month), str(rows["month_name"].iloc[0]), rows))
    return sections


def build_week_table(rows: pd.DataFrame) -> pd.DataFrame:
    table = pd.DataFrame(
        {
            "Hafta": [week_label(week) for week in rows["week"]],
            "Satış Tutarı": [format_currency(value) for value in rows["amount"]],
        },
        columns=["Hafta", "Satış Tutarı"],
    )
    return with_total_row(table, "Hafta", "Satış Tutarı", float(rows["amount"].sum()))


def _render_year_chart(weekly: pd.DataFrame, selected_year: Optional[int]) -> None:
    # Weeks restart per month, so bars are keyed by position and labelled by week.
    positions = [f"{int(row.month)}-{int(row.week)}" for row in weekly.itertuples(index=False)]
    fig = build_bar_chart(
        positions,
        weekly["amount"],
        name=WEEKLY_SALES_LABEL,
        x_title="Hafta",
        color=[week_hue_color(month) for month in weekly["month"]],
        y_max=axis_upper_bound(weekly["amount"]),
        tick_text=[week_label(week) for week in weekly["week"]],
        hover_labels=[
            f"{selected_year} - {week_label(row.week)} ({row.month_name})"
            for row in weekly.itertuples(index=False)
        ],
    )
    render_bar_chart(fig)


def _render_month_section(month: int, month_name: str, rows: pd.DataFrame, selected_year: Optional[int]) -> None:
    render_divider()
    st.subheader(f"{month_name} ({month}. Ay)")
    fig = build_bar_chart(
        rows["week"].astype(str),
        rows["amount"],
        name=WEEKLY_SALES_LABEL,
        x_title="Hafta No",
        y_title="Satış Tutarı",
        color=MONTHLY_BAR_COLOR,
        hover_labels=[f"{selected_year} - {week_label(week)}" for week in rows["week"]],
        height=300,
    )
    render_bar_chart(fig)
    render_dataframe(build_week_table(rows), max_height=None)


def render_weekly_dashboard(records: pd.DataFrame, selected_year: Optional[int]) -> None:
    weekly = weekly_for_year(records, selected_year)
    year_label = "" if selected_year is None else selected_year

    render_section_title(f"{year_label} Yılı Haftalık Satışlar")
    _render_year_chart(weekly, selected_year)

    render_section_title(f"{year_label} Yılı - Aylara Göre Haftalık Satışlar")
    sections = split_by_month(weekly)
    if not sections:
        st.info(NO_DATA_MESSAGE)
        return

    for month, month_name, rows in sections:
        _render_month_section(month, month_name, rows, selected_year)
