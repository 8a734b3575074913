from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List

from esa_browser.core.exceptions import ConfigError
from esa_browser.core.histogram import DEFAULT_BIN_WIDTH, bin_start_for

logger = logging.getLogger(__name__)

HighlightListener = Callable[[int], None]


class HighlightPolicy(str, Enum):
    """
    Which histogram bin an amendment points at.

    - CURRENT_BIN: the bin containing the amendment year (1982 -> 1980)
    - NEXT_BIN: the bin after it, where the effect of the law shows (1982 -> 1985)
    """
    CURRENT_BIN = "current"
    NEXT_BIN = "next"

    @classmethod
    def parse(cls, value: str) -> HighlightPolicy:
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigError(f"Unknown highlight policy: {value!r}")


def target_bin_start(
        year: int,
        policy: HighlightPolicy,
        width: int = DEFAULT_BIN_WIDTH,
) -> int:
    start = bin_start_for(year, width)
    if policy is HighlightPolicy.NEXT_BIN:
        return start + width
    return start


class CrossViewBridge:
    """
    One-way link from amendment markers to the histogram.

    The histogram subscribes a listener; selecting an amendment computes the
    target bin start and notifies every listener. There is no reply channel,
    and with no listener (histogram not rendered yet) the call does nothing.
    """

    def __init__(self, policy: HighlightPolicy = HighlightPolicy.NEXT_BIN, width: int = DEFAULT_BIN_WIDTH):
        self.policy = policy
        self.width = width
        self._listeners: List[HighlightListener] = []

    def subscribe(self, listener: HighlightListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: HighlightListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_amendment_selected(self, amendment_year: int) -> int:
        target = target_bin_start(amendment_year, self.policy, self.width)
        logger.info(
            "Amendment selected",
            extra={
                "amendment_year": amendment_year,
                "target_bin_start": target,
                "policy": self.policy.value,
                "n_listeners": len(self._listeners),
            },
        )
        for listener in list(self._listeners):
            listener(target)
        return target
