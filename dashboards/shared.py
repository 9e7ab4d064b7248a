"""Shared helpers for the sales dashboard views."""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st
from pandas.io.formats.style import Styler
from streamlit_elements import elements, mui, nivo

from dashboard_components.records import dataframe_to_records, parse_amount

CURRENCY_SYMBOL = "₺"
ZERO_CURRENCY = f"{CURRENCY_SYMBOL}0,00"

YEARLY_BAR_COLOR = "#8884d8"
MONTHLY_BAR_COLOR = "#82ca9d"
GROWTH_BAR_COLOR = "#ff7300"
POSITIVE_COLOR = "#16a34a"
NEGATIVE_COLOR = "#dc2626"

PADDING_STYLE = "8px 12px"
HR_STYLE = "<hr style='border: 1px solid #808080;'>"

DATAFRAME_HEADER_HEIGHT = 38
DATAFRAME_ROW_HEIGHT = 35
DATAFRAME_BASE_PADDING = 16
DATAFRAME_MIN_ROWS = 3
DATAFRAME_MAX_HEIGHT = 900

TOTAL_LABEL = "Toplam"
SALES_LABEL = "Toplam Satış"


def format_currency(value: Any) -> str:
    """Format an amount as Turkish lira, e.g. ``₺1.234,56``.

    None, NaN, non-numeric strings and other types format as ``₺0,00``.
    """
    if value is None or isinstance(value, bool):
        return ZERO_CURRENCY
    if isinstance(value, str):
        number = parse_amount(value)
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return ZERO_CURRENCY

    if number is None or math.isnan(number) or math.isinf(number):
        return ZERO_CURRENCY

    grouped = f"{abs(number):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if round(number, 2) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{grouped}"


def format_growth(value: Optional[float]) -> str:
    if value is None or pd.isna(value):
        return "N/A"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def growth_color(value: Optional[float]) -> str:
    if value is None or pd.isna(value):
        return "inherit"
    return POSITIVE_COLOR if value >= 0 else NEGATIVE_COLOR


def week_hue_color(month: int) -> str:
    return f"hsl({int(month) * 30}, 70%, 60%)"


def calculate_dataframe_height(df: pd.DataFrame | None, max_height: int | None = DATAFRAME_MAX_HEIGHT) -> int:
    """Estimate a reasonable height for Streamlit dataframes based on row count."""
    row_count = 0 if df is None or df.empty else len(df)
    effective_rows = max(row_count, DATAFRAME_MIN_ROWS)
    height = DATAFRAME_HEADER_HEIGHT + DATAFRAME_BASE_PADDING + (effective_rows * DATAFRAME_ROW_HEIGHT)

    if max_height is not None:
        height = min(height, max_height)

    return int(height)


def render_dataframe(
    df: pd.DataFrame | Styler,
    *,
    hide_index: bool = True,
    column_config: Dict[str, Any] | None = None,
    max_height: int | None = DATAFRAME_MAX_HEIGHT,
    **st_kwargs: Any,
):
    """Render a dataframe with an auto-calculated height to reduce excessive scrolling."""
    source = df.data if isinstance(df, Styler) else df
    height = calculate_dataframe_height(source, max_height=max_height)

    return st.dataframe(
        df,
        use_container_width=True,
        height=height,
        hide_index=hide_index,
        column_config=column_config,
        **st_kwargs,
    )


def render_divider() -> None:
    """Render a horizontal divider to keep the layout consistent."""
    st.markdown(HR_STYLE, unsafe_allow_html=True)


def render_section_title(text: str, level: int = 2) -> None:
    tag = f"h{level}"
    st.markdown(f"<{tag} style='text-align: center;'>{text}</{tag}>", unsafe_allow_html=True)


def with_total_row(table: pd.DataFrame, label_col: str, amount_col: str, total: float) -> pd.DataFrame:
    """Append a footer row holding ``total`` under ``amount_col``."""
    footer = pd.DataFrame([{label_col: TOTAL_LABEL, amount_col: format_currency(total)}])
    return pd.concat([table, footer], ignore_index=True)


def build_bar_chart(
    x: Iterable[Any],
    y: Iterable[float],
    *,
    name: str,
    x_title: str,
    y_title: str = SALES_LABEL,
    color: str | List[str] = YEARLY_BAR_COLOR,
    y_max: float | None = None,
    tick_text: List[str] | None = None,
    hover_labels: List[str] | None = None,
    height: int = 400,
) -> go.Figure:
    x_values = list(x)
    y_values = [float(value) for value in y]
    labels = hover_labels or [str(value) for value in x_values]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=x_values,
            y=y_values,
            name=name,
            marker=dict(color=color),
            customdata=[[label, format_currency(value)] for label, value in zip(labels, y_values)],
            hovertemplate="%{customdata[0]}<br>%{customdata[1]}<extra></extra>",
        )
    )
    fig.update_layout(
        plot_bgcolor="white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=60),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=-0.35, xanchor="center", x=0.5),
        xaxis=dict(title=x_title, showgrid=False, type="category"),
        yaxis=dict(
            title=y_title,
            showgrid=True,
            gridcolor="lightgray",
            griddash="dash",
            tickprefix=CURRENCY_SYMBOL,
            tickformat=",.2f",
        ),
        # Turkish lira: comma decimal mark, dot thousands separator.
        separators=",.",
    )
    if y_max:
        fig.update_yaxes(range=[0, y_max])
    if tick_text is not None:
        fig.update_xaxes(tickmode="array", tickvals=x_values, ticktext=tick_text)
    return fig


def render_bar_chart(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True)


def render_nivo_bar(
    chart_id: str,
    title: str,
    data: List[Dict[str, Any]],
    *,
    index_by: str,
    key: str,
    color: str = GROWTH_BAR_COLOR,
    height: int = 320,
) -> None:
    """Render a single-series nivo bar chart inside a MUI box."""
    with elements(chart_id):
        with mui.Box(sx={"height": height}):
            mui.Typography(
                title,
                variant="h6",
                sx={"mb": 2, "fontWeight": "bold", "color": "#333", "textAlign": "center"},
            )
            nivo.Bar(
                data=data,
                keys=[key],
                indexBy=index_by,
                margin={"top": 20, "right": 130, "bottom": 60, "left": 60},
                padding=0.3,
                colors=[color],
                enableLabel=True,
                valueFormat=" >-.2f",
                axisBottom={"tickSize": 5, "tickPadding": 5, "legend": index_by, "legendOffset": 36},
                axisLeft={"tickSize": 5, "tickPadding": 5},
                gridYValues=5,
                legends=[
                    {
                        "dataFrom": "keys",
                        "anchor": "bottom-right",
                        "direction": "column",
                        "translateX": 120,
                        "itemWidth": 100,
                        "itemHeight": 20,
                        "symbolSize": 18,
                    }
                ],
                theme={
                    "tooltip": {
                        "container": {
                            "background": "#333",
                            "color": "#fff",
                            "fontSize": "14px",
                            "borderRadius": "4px",
                            "padding": PADDING_STYLE,
                        }
                    }
                },
            )


def render_metrics(items: List[tuple[str, str]]) -> None:
    columns = st.columns(len(items))
    for column, (label, value) in zip(columns, items):
        column.metric(label, value)


def render_download_button(records: pd.DataFrame, file_name: str) -> None:
    """Offer the loaded records for download in their original JSON shape."""
    if records is None or records.empty:
        return

    payload = json.dumps(dataframe_to_records(records), ensure_ascii=False, indent=2)
    st.sidebar.download_button(
        label="💾 Satış Verilerini İndir",
        data=payload.encode("utf-8"),
        file_name=file_name,
        mime="application/json",
    )
