"""Tests for the dashboard view state reducer."""

import dataclasses

import pytest

from dashboard_components.state import (
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


def test_initial_state():
    state = initial_state()
    assert state.view == VIEW_YEARLY
    assert state.selected_year is None


def test_state_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        initial_state().view = VIEW_WEEKLY


def test_data_loaded_selects_most_recent_year():
    state = reduce(initial_state(), DataLoaded.from_years([2024, 2022, 2023, 2024]))
    assert state.selected_year == 2024
    assert state.view == VIEW_YEARLY


def test_data_loaded_without_years():
    state = reduce(DashboardState(view=VIEW_MONTHLY, selected_year=2023), DataLoaded.from_years([]))
    assert state.selected_year is None
    assert state.view == VIEW_MONTHLY


@pytest.mark.parametrize("start", VIEWS)
@pytest.mark.parametrize("target", VIEWS)
def test_any_view_transition_is_allowed(start, target):
    state = DashboardState(view=start, selected_year=2024)
    new_state = reduce(state, SelectView(target))

    assert new_state.view == target
    assert new_state.selected_year == 2024
    assert state.view == start


def test_unknown_view_is_rejected():
    with pytest.raises(ValueError):
        reduce(initial_state(), SelectView("daily"))


def test_select_year_is_independent_of_view():
    state = DashboardState(view=VIEW_WEEKLY, selected_year=2024)
    state = reduce(state, SelectYear(2022))
    assert state == DashboardState(view=VIEW_WEEKLY, selected_year=2022)

    # A year with no data is still a valid selection.
    assert reduce(state, SelectYear(1999)).selected_year == 1999


def test_unsupported_action():
    with pytest.raises(TypeError):
        reduce(initial_state(), "yearly")
