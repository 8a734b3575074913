from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from esa_browser.core.categories import Category
from esa_browser.core.exceptions import ConfigError
from esa_browser.core.series import SpeciesSeries

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 10


@dataclass(frozen=True)
class Window:
    start_year: int
    size: int = DEFAULT_WINDOW_SIZE

    @property
    def end_year(self) -> int:
        return self.start_year + self.size - 1

    @property
    def start_date(self) -> pd.Timestamp:
        return pd.Timestamp(year=self.start_year, month=1, day=1)

    @property
    def end_date(self) -> pd.Timestamp:
        return pd.Timestamp(year=self.end_year, month=12, day=31)

    @property
    def label(self) -> str:
        return f"{self.start_year}–{self.end_year}"


@dataclass(frozen=True)
class StackedLayer:
    """
    One band of the stacked area chart.

    lower/upper are aligned with dates; upper == lower + counts[category].
    """
    category: Category
    dates: Tuple[pd.Timestamp, ...]
    lower: np.ndarray
    upper: np.ndarray

    @property
    def values(self) -> np.ndarray:
        return self.upper - self.lower


def window_start_range(series: SpeciesSeries, size: int = DEFAULT_WINDOW_SIZE) -> Tuple[int, int]:
    """
    Valid window starts [min_year, max_year - size + 1].

    If the data spans fewer years than the window, the only valid start is
    min_year.
    """
    bounds = series.year_bounds()
    if bounds is None:
        raise ValueError("Cannot compute a window range for an empty series")
    min_year, max_year = bounds
    return min_year, max(min_year, max_year - size + 1)


def clamp_start(year: int, min_start: int, max_start: int) -> int:
    return max(min_start, min(int(year), max_start))


def select_window(
        series: SpeciesSeries,
        start_year: int,
        size: int = DEFAULT_WINDOW_SIZE,
) -> SpeciesSeries:
    """
    Observations dated within [Jan 1 start_year, Dec 31 (start_year + size - 1)].

    An empty result means "nothing to show": callers keep their previous view
    instead of clearing the chart.
    """
    window = Window(start_year=start_year, size=size)
    subset = series.between(window.start_date, window.end_date)
    if subset.empty:
        logger.debug("Empty window", extra={"window": window.label})
    return subset


def stack(categories: Sequence[Category], series: SpeciesSeries) -> List[StackedLayer]:
    """
    Cumulative per-date sums in category order.

    Must be recomputed per window: the layer offsets depend on the rows
    present in the subset.
    """
    dates = tuple(series.dates)
    running = np.zeros(len(series), dtype=np.float64)
    layers: List[StackedLayer] = []

    for category in categories:
        values = series.counts(category).astype(np.float64)
        lower = running
        upper = lower + values
        layers.append(StackedLayer(category=category, dates=dates, lower=lower, upper=upper))
        running = upper

    return layers


def stack_max(layers: Sequence[StackedLayer]) -> float:
    if not layers or len(layers[-1].upper) == 0:
        return 0.0
    return float(np.max(layers[-1].upper))


def y_axis_max(full: SpeciesSeries, windowed: SpeciesSeries, mode: str) -> float:
    """
    Upper bound of the y axis.

    "fixed": the max across the whole unwindowed series, so the scale stays
    put while the window moves. "auto": the max of the current window.
    """
    if mode == "fixed":
        return stack_max(stack(full.categories, full))
    if mode == "auto":
        return stack_max(stack(windowed.categories, windowed))
    raise ConfigError(f"Unknown y_axis_mode: {mode!r}")
