from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .chart_data import ChartData
from .view_state import ViewState

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive what to draw from the current ViewState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, data: ChartData):
        self.data = data

    @property
    def available(self) -> bool:
        """False when a resource this view needs failed to load."""
        return True

    @abstractmethod
    def compute_data(self, state: ViewState) -> Any:
        """
        Compute the data given the current ViewState
        :param state: the current {@link ViewState} - window, active categories, highlight, selection
        :return: data for {@link render_figure()}, or None/empty when there is nothing to draw
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: ViewState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link ViewState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, state: ViewState) -> Any:
        """compute_data with its duration logged."""
        started = time.perf_counter()
        result = self.compute_data(state)
        logger.debug(
            "compute_data",
            extra={"view_id": self.id, "elapsed_ms": round(1000 * (time.perf_counter() - started), 2)},
        )
        return result

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
