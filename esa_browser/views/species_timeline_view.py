from __future__ import annotations

from typing import Any, Dict, Optional

import plotly.graph_objects as go

from esa_browser.core.base_view import BaseView
from esa_browser.core.view_state import ViewState
from esa_browser.core.windowing import (
    clamp_start,
    select_window,
    stack,
    window_start_range,
    y_axis_max,
    Window,
)

INACTIVE_OPACITY = 0.05
# First element of the marker trace customdata, to tell marker clicks from area clicks
AMENDMENT_TAG = "amendment"


class SpeciesTimelineView(BaseView):
    """
    Stacked area chart of endangered species per class over a sliding window.

    - one filled band per category, stacked in Category order
    - categories switched off in the legend checklist are dimmed, not removed
    - ESA amendment markers (dashed line + clickable circle) inside the window
    """

    id = "species_timeline"
    label = "Endangered Species Per Class"

    @property
    def available(self) -> bool:
        return self.data.series is not None and not self.data.series.empty

    def compute_data(self, state: ViewState) -> Optional[Dict[str, Any]]:
        if not self.available:
            return None

        series = self.data.series
        size = self.data.config.window_size
        min_start, max_start = window_start_range(series, size)
        start = min_start if state.window_start is None else clamp_start(state.window_start, min_start, max_start)

        windowed = select_window(series, start, size)
        if windowed.empty:
            return None

        layers = stack(series.categories, windowed)
        x_start, x_end = windowed.date_extent()

        markers = [a for a in self.data.amendments if x_start <= a.date <= x_end]

        return {
            "window": Window(start_year=start, size=size),
            "layers": layers,
            "y_max": y_axis_max(series, windowed, self.data.config.y_axis_mode),
            "x_domain": (x_start, x_end),
            "markers": markers,
        }

    def render_figure(self, data: Optional[Dict[str, Any]], state: ViewState) -> go.Figure:
        if not data:
            return self.empty_figure("No species data for this window")

        fig = go.Figure()
        for i, layer in enumerate(data["layers"]):
            category = layer.category
            fig.add_trace(
                go.Scatter(
                    x=list(layer.dates),
                    y=layer.upper,
                    customdata=layer.values,
                    name=category.display_name,
                    mode="lines",
                    line=dict(width=0.5, color=category.colour),
                    fill="tozeroy" if i == 0 else "tonexty",
                    fillcolor=category.colour,
                    opacity=1.0 if state.is_active(category.name) else INACTIVE_OPACITY,
                    hovertemplate=f"{category.display_name}: %{{customdata}}<extra></extra>",
                )
            )

        y_top = data["y_max"] * 1.08 if data["y_max"] > 0 else 1
        marker_y = data["y_max"] * 1.04 if data["y_max"] > 0 else 0.5

        markers = data["markers"]
        for amendment in markers:
            fig.add_shape(
                type="line",
                x0=amendment.date,
                x1=amendment.date,
                y0=0,
                y1=marker_y,
                line=dict(color="black", width=1, dash="dash"),
                opacity=0.4,
            )

        if markers:
            fig.add_trace(
                go.Scatter(
                    x=[a.date for a in markers],
                    y=[marker_y] * len(markers),
                    customdata=[[AMENDMENT_TAG, a.year] for a in markers],
                    text=[a.title for a in markers],
                    name="ESA amendments",
                    mode="markers",
                    marker=dict(size=12, color="black", line=dict(color="white", width=1.5)),
                    hovertemplate="%{text}<br>Click for details<extra></extra>",
                    showlegend=False,
                )
            )

        x_start, x_end = data["x_domain"]
        fig.update_layout(
            height=420,
            margin=dict(l=70, r=40, t=40, b=60),
            legend_title="Class",
            # clickData then carries only the point under the cursor
            hovermode="closest",
            plot_bgcolor="white",
        )
        fig.update_xaxes(
            title_text="Year",
            range=[x_start, x_end],
            dtick="M12",
            tickformat="%Y",
            linecolor="#9ca3af",
        )
        fig.update_yaxes(
            title_text="Number of Species",
            range=[0, y_top],
            gridcolor="#e5e7eb",
            linecolor="#9ca3af",
        )
        return fig
