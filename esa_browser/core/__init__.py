"""
Core domain layer: categories, windowed series, timeline state machine,
histogram bins and bridge, state ranking.

Nothing in here imports Dash; the UI layer adapts these to callbacks.
"""

from .categories import Category
from .series import Observation, SpeciesSeries
from .windowing import Window, StackedLayer, select_window, stack
from .timeline import PlaybackStatus, TimelineController, TimelineState
from .histogram import HistogramBin, BinHighlighter, build_bins
from .bridge import CrossViewBridge, HighlightPolicy
from .ranking import Level, StateRecord, rank_states

__all__ = [
    "Category",
    "Observation",
    "SpeciesSeries",
    "Window",
    "StackedLayer",
    "select_window",
    "stack",
    "PlaybackStatus",
    "TimelineController",
    "TimelineState",
    "HistogramBin",
    "BinHighlighter",
    "build_bins",
    "CrossViewBridge",
    "HighlightPolicy",
    "Level",
    "StateRecord",
    "rank_states",
]
