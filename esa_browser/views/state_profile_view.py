from __future__ import annotations

from typing import Any, Dict, Optional

import plotly.graph_objects as go

from esa_browser.core.base_view import BaseView
from esa_browser.core.ranking import top_n
from esa_browser.core.view_state import ViewState

TOP_N = 10
SELECTED_COLOUR = "#b30000"
OTHER_COLOUR = "#d1d5db"


class StateProfileView(BaseView):
    """
    Profile of the selected state: its record plus a Top-10 bar chart with
    the selected state picked out.
    """

    id = "state_profile"
    label = "State Profile"

    @property
    def available(self) -> bool:
        return self.data.states is not None

    def compute_data(self, state: ViewState) -> Optional[Dict[str, Any]]:
        if not self.available or not state.selected_state:
            return None

        record = next((r for r in self.data.states if r.name == state.selected_state), None)
        if record is None:
            return None

        return {
            "record": record,
            "top": top_n(self.data.states, TOP_N),
            "max_count": max(r.count for r in self.data.states),
        }

    def render_figure(self, data: Optional[Dict[str, Any]], state: ViewState) -> go.Figure:
        if not data:
            return self.empty_figure("Select a state on the map")

        top = data["top"]
        selected = data["record"].name
        fig = go.Figure(
            go.Bar(
                x=[r.count for r in top],
                y=[r.name for r in top],
                orientation="h",
                marker_color=[SELECTED_COLOUR if r.name == selected else OTHER_COLOUR for r in top],
                hovertemplate="%{y}: %{x} species<extra></extra>",
            )
        )
        fig.update_layout(
            height=260,
            margin=dict(l=130, r=20, t=30, b=20),
            title=f"Top {TOP_N} states by endangered species",
            showlegend=False,
            plot_bgcolor="white",
        )
        fig.update_yaxes(autorange="reversed")
        fig.update_xaxes(rangemode="tozero", gridcolor="#e5e7eb")
        return fig
