from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_BIN_WIDTH = 5
DEFAULT_COLOUR = "#69b3a2"
HIGHLIGHT_COLOUR = "#ff7f0e"


@dataclass(frozen=True)
class HistogramBin:
    start: int
    end: int
    total: int

    @property
    def label(self) -> str:
        return f"{self.start}–{self.end}"

    def contains(self, year: int) -> bool:
        return self.start <= year <= self.end


def bin_start_for(year: int, width: int = DEFAULT_BIN_WIDTH) -> int:
    return (int(year) // width) * width


def build_bins(listings: pd.DataFrame, width: int = DEFAULT_BIN_WIDTH) -> List[HistogramBin]:
    """
    Partition the listings' year range into contiguous bins of `width` years.

    The first bin starts at the multiple of `width` at or below the min year,
    the last one ends `width - 1` years after the multiple at or below the max
    year. Empty bins in between are kept with a total of 0.

    :param listings: frame with integer 'year' and 'listings' columns
    """
    if listings.empty:
        return []

    first = bin_start_for(listings["year"].min(), width)
    last = bin_start_for(listings["year"].max(), width)

    idx = (listings["year"].astype(int) - first) // width
    totals = listings["listings"].groupby(idx).sum()

    bins = []
    for i, start in enumerate(range(first, last + 1, width)):
        bins.append(
            HistogramBin(start=start, end=start + width - 1, total=int(totals.get(i, 0)))
        )
    return bins


class BinHighlighter:
    """
    Highlight state owned by the histogram.

    At most one bin is highlighted. Asking for a start that matches no bin
    clears the highlight instead of raising.
    """

    def __init__(self, bins: Sequence[HistogramBin]):
        self.bins = list(bins)
        self._starts = {b.start for b in self.bins}
        self.highlighted_start: Optional[int] = None

    def highlight(self, start: int) -> None:
        if start in self._starts:
            self.highlighted_start = start
        else:
            logger.debug("No histogram bin starts at %s; clearing highlight", start)
            self.highlighted_start = None

    def colours(self) -> List[str]:
        return [
            HIGHLIGHT_COLOUR if b.start == self.highlighted_start else DEFAULT_COLOUR
            for b in self.bins
        ]
