"""View selection state for the sales dashboard.

State is an immutable value; the only way to change it is ``reduce``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple, Union

VIEW_YEARLY = "yearly"
VIEW_MONTHLY = "monthly"
VIEW_WEEKLY = "weekly"

VIEWS: Tuple[str, ...] = (VIEW_YEARLY, VIEW_MONTHLY, VIEW_WEEKLY)

VIEW_LABELS = {
    VIEW_YEARLY: "Yıllık Görünüm",
    VIEW_MONTHLY: "Aylık Görünüm",
    VIEW_WEEKLY: "Haftalık Görünüm",
}


@dataclass(frozen=True)
class DashboardState:
    view: str = VIEW_YEARLY
    selected_year: Optional[int] = None


@dataclass(frozen=True)
class SelectView:
    view: str


@dataclass(frozen=True)
class SelectYear:
    year: Optional[int]


@dataclass(frozen=True)
class DataLoaded:
    years: Tuple[int, ...]

    @classmethod
    def from_years(cls, years: Iterable[int]) -> "DataLoaded":
        return cls(tuple(sorted(set(int(year) for year in years))))


Action = Union[SelectView, SelectYear, DataLoaded]


def initial_state() -> DashboardState:
    return DashboardState()


def reduce(state: DashboardState, action: Action) -> DashboardState:
    if isinstance(action, SelectView):
        if action.view not in VIEWS:
            raise ValueError(f"Unknown view: {action.view!r}")
        return replace(state, view=action.view)
    if isinstance(action, SelectYear):
        year = None if action.year is None else int(action.year)
        return replace(state, selected_year=year)
    if isinstance(action, DataLoaded):
        return replace(state, selected_year=action.years[-1] if action.years else None)
    raise TypeError(f"Unsupported action: {action!r}")
