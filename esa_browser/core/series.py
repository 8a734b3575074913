from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from esa_browser.core.categories import Category

DATE_COLUMN = "date"


@dataclass(frozen=True)
class Observation:
    """One dated row of per-category counts."""
    date: dt.date
    counts: Mapping[Category, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class SpeciesSeries:
    """
    Time-ordered species counts per category.

    Wraps a DataFrame with a datetime 'date' column plus one integer column
    per category. Rows are sorted by date on construction and the frame is
    never mutated afterwards; windowing returns new instances.
    """

    def __init__(self, frame: pd.DataFrame, categories: Sequence[Category]):
        self.categories: List[Category] = list(categories)
        missing = [c.column for c in self.categories if c.column not in frame.columns]
        if DATE_COLUMN not in frame.columns or missing:
            raise KeyError(f"SpeciesSeries frame is missing columns: {[DATE_COLUMN, *missing]}")

        cols = [DATE_COLUMN] + [c.column for c in self.categories]
        self._frame = (
            frame[cols]
            .sort_values(DATE_COLUMN, kind="mergesort")
            .reset_index(drop=True)
        )

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def dates(self) -> pd.Series:
        return self._frame[DATE_COLUMN]

    @property
    def empty(self) -> bool:
        return self._frame.empty

    def __len__(self) -> int:
        return len(self._frame)

    def counts(self, category: Category) -> np.ndarray:
        return self._frame[category.column].to_numpy()

    def totals(self) -> np.ndarray:
        """Sum of all category counts per date."""
        if not self.categories:
            return np.zeros(len(self._frame), dtype=np.int64)
        return self._frame[[c.column for c in self.categories]].sum(axis=1).to_numpy()

    def year_bounds(self) -> Optional[Tuple[int, int]]:
        if self.empty:
            return None
        return int(self.dates.iloc[0].year), int(self.dates.iloc[-1].year)

    def date_extent(self) -> Optional[Tuple[pd.Timestamp, pd.Timestamp]]:
        if self.empty:
            return None
        return self.dates.iloc[0], self.dates.iloc[-1]

    def observations(self) -> Iterator[Observation]:
        for row in self._frame.itertuples(index=False):
            values = row._asdict()
            counts = {c: int(values[c.column]) for c in self.categories}
            yield Observation(
                date=values[DATE_COLUMN].date(),
                counts=MappingProxyType(counts),
            )

    # ------------------------------------------------------------------
    # Subsetting
    # ------------------------------------------------------------------
    def between(self, start: pd.Timestamp, end: pd.Timestamp) -> SpeciesSeries:
        """Rows with start <= date <= end (inclusive on both ends)."""
        mask = (self.dates >= start) & (self.dates <= end)
        return SpeciesSeries(self._frame.loc[mask], self.categories)
