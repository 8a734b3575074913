from __future__ import annotations

from typing import Any, Dict, Optional

import plotly.graph_objects as go

from esa_browser.core.base_view import BaseView
from esa_browser.core.bridge import CrossViewBridge
from esa_browser.core.histogram import BinHighlighter
from esa_browser.core.view_state import ViewState


class ListingsHistogramView(BaseView):
    """
    New species listings per 5-year bin.

    The bin named by ViewState.highlighted_bin is drawn in the highlight
    colour; a start that matches no bin highlights nothing.
    """

    id = "listings_histogram"
    label = "Species Added to the Endangered Species List"

    @property
    def available(self) -> bool:
        return self.data.bins is not None

    def subscribe_to(self, bridge: CrossViewBridge) -> Optional[BinHighlighter]:
        """
        Attach this histogram's highlighter to an amendment bridge.

        Returns None (and subscribes nothing) when the listings failed to load,
        which makes amendment selection a no-op for the histogram.
        """
        if not self.available:
            return None
        highlighter = BinHighlighter(self.data.bins)
        bridge.subscribe(highlighter.highlight)
        return highlighter

    def compute_data(self, state: ViewState) -> Optional[Dict[str, Any]]:
        if not self.available:
            return None

        highlighter = BinHighlighter(self.data.bins)
        if state.highlighted_bin is not None:
            highlighter.highlight(state.highlighted_bin)

        return {
            "bins": highlighter.bins,
            "colours": highlighter.colours(),
            "highlighted": highlighter.highlighted_start,
        }

    def render_figure(self, data: Optional[Dict[str, Any]], state: ViewState) -> go.Figure:
        if not data or not data["bins"]:
            return self.empty_figure("No listings data")

        bins = data["bins"]
        fig = go.Figure(
            go.Bar(
                x=[b.label for b in bins],
                y=[b.total for b in bins],
                marker_color=data["colours"],
                hovertemplate="%{x}: %{y} new listings<extra></extra>",
            )
        )
        fig.update_layout(
            height=420,
            margin=dict(l=70, r=20, t=40, b=60),
            bargap=0.1,
            plot_bgcolor="white",
            showlegend=False,
        )
        fig.update_xaxes(title_text="Year", type="category")
        fig.update_yaxes(title_text="Number of Species", gridcolor="#e5e7eb", rangemode="tozero")
        return fig
