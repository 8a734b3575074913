from __future__ import annotations

import logging
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Dict, Optional

from esa_browser.core.series import SpeciesSeries
from esa_browser.core.windowing import (
    DEFAULT_WINDOW_SIZE,
    Window,
    clamp_start,
    window_start_range,
)

logger = logging.getLogger(__name__)

DEFAULT_PLAY_INTERVAL_MS = 800


class PlaybackStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"


@dataclass(frozen=True)
class TimelineState:
    """
    Snapshot of the timeline scrubber.

    Fields:

    - start_year: first year of the current window
    - status: idle or playing
    - min_start / max_start: valid range for start_year
    - window_size: years per window
    - last_tick: interval counter of the last tick applied while playing.
      Reset to 0 on every toggle, together with the interval's n_intervals.
    """
    start_year: int
    min_start: int
    max_start: int
    window_size: int = DEFAULT_WINDOW_SIZE
    status: PlaybackStatus = PlaybackStatus.IDLE
    last_tick: int = 0

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    @property
    def window(self) -> Window:
        return Window(start_year=self.start_year, size=self.window_size)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TimelineState:
        return cls(
            start_year=int(data["start_year"]),
            min_start=int(data["min_start"]),
            max_start=int(data["max_start"]),
            window_size=int(data.get("window_size", DEFAULT_WINDOW_SIZE)),
            status=PlaybackStatus(data.get("status", PlaybackStatus.IDLE.value)),
            last_tick=int(data.get("last_tick", 0)),
        )


class TimelineController:
    """
    Idle/Playing state machine for the timeline window.

    Transitions:
        Idle    --toggle--> Playing
        Playing --toggle--> Idle     (pending tick is dropped)
        Playing --tick-->   Playing  (start + 1, wraps to min_start after max_start)

    Operations are pure: each takes a TimelineState and returns a new one, so
    the state can round-trip through a dcc.Store between callbacks. Playback
    is discrete, one year every play_interval_ms.
    """

    def __init__(
            self,
            window_size: int = DEFAULT_WINDOW_SIZE,
            play_interval_ms: int = DEFAULT_PLAY_INTERVAL_MS,
    ):
        self.window_size = window_size
        self.play_interval_ms = play_interval_ms

    def initial(self, series: SpeciesSeries) -> TimelineState:
        min_start, max_start = window_start_range(series, self.window_size)
        return TimelineState(
            start_year=min_start,
            min_start=min_start,
            max_start=max_start,
            window_size=self.window_size,
        )

    def toggle(self, state: TimelineState) -> TimelineState:
        status = PlaybackStatus.IDLE if state.is_playing else PlaybackStatus.PLAYING
        logger.debug(
            "Timeline toggled",
            extra={"status": status.value, "start_year": state.start_year},
        )
        return replace(state, status=status, last_tick=0)

    def pause(self, state: TimelineState) -> TimelineState:
        return self.toggle(state) if state.is_playing else state

    def tick(
            self,
            state: TimelineState,
            slider_value: Optional[int] = None,
            tick_id: Optional[int] = None,
    ) -> TimelineState:
        """
        Advance one year while playing.

        - Idle: returns the state unchanged, so a timer event that lands after
          a pause cannot move the window.
        - tick_id at or below last_tick was already applied and is ignored.
        - slider_value, when given, is the continuation point: scrubbing while
          playing does not pause, the next tick continues from the slider.
        """
        if not state.is_playing:
            return state
        if tick_id is not None and tick_id <= state.last_tick:
            return state

        base = state.start_year
        if slider_value is not None:
            base = clamp_start(slider_value, state.min_start, state.max_start)

        next_start = base + 1
        if next_start > state.max_start:
            next_start = state.min_start

        return replace(
            state,
            start_year=next_start,
            last_tick=tick_id if tick_id is not None else state.last_tick + 1,
        )

    def seek(self, state: TimelineState, year: int) -> TimelineState:
        """Manual slider input. Clamped; playback status is untouched."""
        return replace(state, start_year=clamp_start(year, state.min_start, state.max_start))

    @staticmethod
    def interval_disabled(state: TimelineState) -> bool:
        """The playback timer must be off whenever the timeline is idle."""
        return not state.is_playing
