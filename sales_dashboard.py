from __future__ import annotations

from pathlib import Path
from typing import List

import streamlit as st

from config import get_settings
from dashboard_components.loader import LoadResult, load_sales_records
from dashboard_components.state import (
    VIEW_LABELS,
    VIEW_MONTHLY,
    VIEW_WEEKLY,
    VIEW_YEARLY,
    VIEWS,
    DashboardState,
    DataLoaded,
    SelectView,
    SelectYear,
    initial_state,
    reduce,
)
from dashboards.monthly.dashboard import render_monthly_dashboard
from dashboards.shared import render_divider, render_download_button
from dashboards.weekly.dashboard import render_weekly_dashboard
from dashboards.yearly.dashboard import render_yearly_dashboard
from logging_setup import get_logger, setup_logging

STATE_KEY = "dashboard_state"
LOADED_SOURCE_KEY = "dashboard_loaded_source"

logger = get_logger(__name__)


@st.cache_data(show_spinner="Satış verileri yükleniyor...")
def load_dashboard_data(source: str, timeout: float) -> LoadResult:
    return load_sales_records(source, timeout=timeout)


def current_state(source: str, years: List[int]) -> DashboardState:
    state = st.session_state.get(STATE_KEY) or initial_state()
    if st.session_state.get(LOADED_SOURCE_KEY) != source:
        state = reduce(state, DataLoaded.from_years(years))
        st.session_state[LOADED_SOURCE_KEY] = source
    return state


def select_view(state: DashboardState) -> DashboardState:
    st.sidebar.header("Navigasyon")
    view = st.sidebar.selectbox(
        "Görünüm Seçin",
        options=list(VIEWS),
        index=VIEWS.index(state.view),
        format_func=lambda item: VIEW_LABELS[item],
    )
    return reduce(state, SelectView(view))


def select_year(state: DashboardState, years: List[int]) -> DashboardState:
    if not years:
        return state
    index = years.index(state.selected_year) if state.selected_year in years else len(years) - 1
    _, center, _ = st.columns([2, 1, 2])
    with center:
        year = st.selectbox("Yıl", years, index=index)
    return reduce(state, SelectYear(year))


def main() -> None:
    st.set_page_config(page_title="Satış Analizi", layout="wide")
    settings = get_settings()
    setup_logging(settings.log_level)

    result = load_dashboard_data(settings.data_source, settings.request_timeout)
    state = current_state(settings.data_source, result.years)

    st.title("Satış Analizi Gösterge Paneli")
    render_divider()

    state = select_view(state)
    render_download_button(result.records, Path(settings.data_source).name or "satis_verileri.json")

    if state.view in (VIEW_MONTHLY, VIEW_WEEKLY):
        state = select_year(state, result.years)

    st.session_state[STATE_KEY] = state
    logger.debug("Rendering view %s for year %s", state.view, state.selected_year)

    if state.view == VIEW_YEARLY:
        render_yearly_dashboard(result.records)
    elif state.view == VIEW_MONTHLY:
        render_monthly_dashboard(result.records, state.selected_year)
    else:
        render_weekly_dashboard(result.records, state.selected_year)


if __name__ == "__main__":
    main()
