"""Yearly dashboard view."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from dashboard_components.aggregates import (
    axis_upper_bound,
    growth_for_year,
    yearly_growth,
    yearly_totals,
)
from dashboards.shared import (
    GROWTH_BAR_COLOR,
    SALES_LABEL,
    YEARLY_BAR_COLOR,
    build_bar_chart,
    format_currency,
    format_growth,
    growth_color,
    render_bar_chart,
    render_dataframe,
    render_divider,
    render_metrics,
    render_nivo_bar,
    render_section_title,
)


def build_yearly_table(yearly: pd.DataFrame, growth: pd.DataFrame) -> pd.DataFrame:
    """Year, formatted total and growth; the earliest year shows "-"."""
    rows = []
    for index, row in enumerate(yearly.itertuples(index=False)):
        rate = growth_for_year(growth, int(row.year))
        rows.append(
            {
                "Yıl": str(int(row.year)),
                SALES_LABEL: format_currency(row.total),
                "Artış Oranı": "-" if index == 0 else format_growth(rate),
            }
        )
    return pd.DataFrame(rows, columns=["Yıl", SALES_LABEL, "Artış Oranı"])


def _style_growth(value: str) -> str:
    if value in ("-", "N/A"):
        return ""
    rate = float(value.rstrip("%"))
    return f"color: {growth_color(rate)}"


def render_yearly_dashboard(records: pd.DataFrame) -> None:
    yearly = yearly_totals(records)
    growth = yearly_growth(yearly)

    latest_growth = None
    if not yearly.empty:
        latest_growth = growth_for_year(growth, int(yearly["year"].iloc[-1]))
    render_metrics(
        [
            (SALES_LABEL, format_currency(yearly["total"].sum() if not yearly.empty else 0)),
            ("Yıl Sayısı", str(len(yearly))),
            ("Son Yıl Artış Oranı", format_growth(latest_growth)),
        ]
    )
    render_divider()

    render_section_title("Yıllık Toplam Satışlar")
    fig = build_bar_chart(
        yearly["year"].astype(str),
        yearly["total"],
        name=SALES_LABEL,
        x_title="Yıl",
        color=YEARLY_BAR_COLOR,
        y_max=axis_upper_bound(yearly["total"]),
    )
    render_bar_chart(fig)

    render_section_title("Yıllık Satış İstatistikleri")
    table = build_yearly_table(yearly, growth)
    render_dataframe(table.style.map(_style_growth, subset=["Artış Oranı"]))

    render_section_title("Yıllık Büyüme Oranları")
    growth_data = [
        {"Yıl": str(int(row.year)), "Artış Oranı (%)": float(row.growth_percent)}
        for row in growth.itertuples(index=False)
        if not pd.isna(row.growth_percent)
    ]
    if growth_data:
        render_nivo_bar(
            "nivo_yearly_growth",
            "Artış Oranı (%)",
            growth_data,
            index_by="Yıl",
            key="Artış Oranı (%)",
            color=GROWTH_BAR_COLOR,
        )
    else:
        st.caption("Büyüme oranı için en az iki yıllık veri gerekir.")
