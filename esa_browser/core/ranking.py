from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from plotly.colors import find_intermediate_color, hex_to_rgb, label_rgb

from esa_browser.core.exceptions import ConfigError

DEFAULT_THRESHOLDS: Tuple[int, int, int] = (40, 80, 150)

SCALE_LOW = "#d2efd2"
SCALE_MID = "#4fa84f"
SCALE_HIGH = "#145214"


class Level(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


@dataclass(frozen=True)
class StateRecord:
    name: str
    count: int
    rank: int
    percentage: float
    level: Level


def normalise_name(name: str) -> str:
    """Join key between boundary features and CSV rows."""
    return str(name).strip().lower()


def percentage(count: float, total: float) -> float:
    if not total:
        return 0.0
    return round(100.0 * count / total, 1)


def categorize(count: float, thresholds: Sequence[int] = DEFAULT_THRESHOLDS) -> Level:
    low, moderate, high = _check_thresholds(thresholds)
    if count <= low:
        return Level.LOW
    if count <= moderate:
        return Level.MODERATE
    if count <= high:
        return Level.HIGH
    return Level.VERY_HIGH


def _check_thresholds(thresholds: Sequence[int]) -> Tuple[int, int, int]:
    if len(thresholds) != 3 or not (thresholds[0] < thresholds[1] < thresholds[2]):
        raise ConfigError(f"Level thresholds must be three ascending values, got {list(thresholds)}")
    return thresholds[0], thresholds[1], thresholds[2]


def rank_states(
        states: Iterable[Tuple[str, int]],
        thresholds: Sequence[int] = DEFAULT_THRESHOLDS,
) -> List[StateRecord]:
    """
    Rank states by count, highest first.

    Ties keep their input order and still get distinct ranks, so the ranks are
    always a permutation of 1..N.
    """
    rows = [(str(name), int(count)) for name, count in states]
    total = sum(count for _, count in rows)
    # sorted() is stable, which gives encounter order for ties
    ordered = sorted(rows, key=lambda row: row[1], reverse=True)

    return [
        StateRecord(
            name=name,
            count=count,
            rank=i + 1,
            percentage=percentage(count, total),
            level=categorize(count, thresholds),
        )
        for i, (name, count) in enumerate(ordered)
    ]


def top_n(records: Sequence[StateRecord], n: int) -> List[StateRecord]:
    return sorted(records, key=lambda r: r.rank)[:n]


def colour_scale() -> List[List]:
    """Plotly colourscale anchored at 0, 0.5 * max and max."""
    return [[0.0, SCALE_LOW], [0.5, SCALE_MID], [1.0, SCALE_HIGH]]


def colour_for(count: float, max_count: float) -> str:
    """
    Colour of a count on the 3-stop scale, as an 'rgb(r, g, b)' string.

    Counts are clipped to [0, max_count]; a max of 0 maps everything to the
    low stop.
    """
    if max_count <= 0:
        return label_rgb(hex_to_rgb(SCALE_LOW))

    t = min(max(count / max_count, 0.0), 1.0)
    if t <= 0.5:
        lo, hi, frac = SCALE_LOW, SCALE_MID, t / 0.5
    else:
        lo, hi, frac = SCALE_MID, SCALE_HIGH, (t - 0.5) / 0.5

    rgb = find_intermediate_color(hex_to_rgb(lo), hex_to_rgb(hi), frac)
    return label_rgb(tuple(int(round(c)) for c in rgb))
