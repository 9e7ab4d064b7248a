"""Monthly dashboard view."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from dashboard_components.aggregates import axis_upper_bound, monthly_for_year, monthly_totals
from dashboards.shared import (
    MONTHLY_BAR_COLOR,
    SALES_LABEL,
    build_bar_chart,
    format_currency,
    render_bar_chart,
    render_dataframe,
    render_section_title,
    with_total_row,
)


def build_monthly_table(monthly_for_selected: pd.DataFrame) -> pd.DataFrame:
    table = pd.DataFrame(
        {
            "Ay": monthly_for_selected["month_name"].tolist(),
            SALES_LABEL: [format_currency(value) for value in monthly_for_selected["total"]],
        },
        columns=["Ay", SALES_LABEL],
    )
    total = float(monthly_for_selected["total"].sum()) if not monthly_for_selected.empty else 0.0
    return with_total_row(table, "Ay", SALES_LABEL, total)


def render_monthly_dashboard(records: pd.DataFrame, selected_year: Optional[int]) -> None:
    monthly = monthly_for_year(monthly_totals(records), selected_year)
    year_label = "" if selected_year is None else selected_year

    render_section_title(f"{year_label} Yılı Aylık Satışlar")
    fig = build_bar_chart(
        monthly["month_name"],
        monthly["total"],
        name=SALES_LABEL,
        x_title="Ay",
        color=MONTHLY_BAR_COLOR,
        y_max=axis_upper_bound(monthly["total"]),
    )
    fig.update_xaxes(tickangle=-45)
    render_bar_chart(fig)

    render_section_title(f"{year_label} Yılı Aylık Satış İstatistikleri")
    render_dataframe(build_monthly_table(monthly), max_height=None)
