from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from esa_browser.core.base_view import BaseView
from esa_browser.core.ranking import colour_scale, normalise_name
from esa_browser.core.view_state import ViewState

logger = logging.getLogger(__name__)


class StateMapView(BaseView):
    """
    Choropleth of endangered species per state.

    Boundary features are joined to the ranked state records by normalised
    name. Features with no matching record are left off the map rather than
    drawn with a placeholder value.
    """

    id = "state_map"
    label = "US Endangered Species by State"

    @property
    def available(self) -> bool:
        return self.data.states is not None and self.data.geojson is not None

    @property
    def name_property(self) -> str:
        cfg = self.data.config.dataset("states_geojson")
        return cfg.columns["name"] if cfg is not None else "name"

    def compute_data(self, state: ViewState) -> Optional[Dict[str, Any]]:
        if not self.available:
            return None

        prop = self.name_property
        by_key = self.data.state_by_key()

        features = []
        rows = []
        for feature in self.data.geojson["features"]:
            # featureidkey points at this property, so nothing else can be drawn
            feature_name = (feature.get("properties") or {}).get(prop)
            if feature_name is None:
                continue
            record = by_key.get(normalise_name(feature_name))
            if record is None:
                continue
            features.append(feature)
            rows.append(
                {
                    "feature_name": feature_name,
                    "name": record.name,
                    "count": record.count,
                    "rank": record.rank,
                    "percentage": record.percentage,
                    "level": record.level.value,
                }
            )

        n_skipped = len(self.data.geojson["features"]) - len(features)
        if n_skipped:
            logger.debug("Boundary features without data excluded", extra={"n_skipped": n_skipped})

        if not rows:
            return None

        return {
            "geojson": {"type": "FeatureCollection", "features": features},
            "rows": pd.DataFrame(rows),
            "max_count": max(r.count for r in self.data.states),
        }

    def render_figure(self, data: Optional[Dict[str, Any]], state: ViewState) -> go.Figure:
        if not data:
            return self.empty_figure("No state data to map")

        rows: pd.DataFrame = data["rows"]
        max_count = data["max_count"] or 1
        line_width = [
            2 if name == state.selected_state else 1 for name in rows["name"]
        ]
        line_colour = [
            "#000" if name == state.selected_state else "#fff" for name in rows["name"]
        ]

        fig = go.Figure(
            go.Choropleth(
                geojson=data["geojson"],
                locations=rows["feature_name"],
                featureidkey=f"properties.{self.name_property}",
                z=rows["count"],
                zmin=0,
                zmax=max_count,
                colorscale=colour_scale(),
                marker_line_color=line_colour,
                marker_line_width=line_width,
                customdata=rows[["name", "rank", "count", "percentage", "level"]].to_numpy(),
                hovertemplate=(
                    "<b>%{customdata[0]}</b><br>"
                    "Rank: #%{customdata[1]} nationally<br>"
                    "Endangered species: %{customdata[2]}<br>"
                    "%{customdata[3]:.1f}% of U.S. total<br>"
                    "Level: <b>%{customdata[4]}</b>"
                    "<extra></extra>"
                ),
                colorbar=dict(
                    title="Species",
                    tickvals=[0, max_count],
                    ticktext=["Low", "High"],
                    len=0.5,
                ),
            )
        )
        fig.update_layout(
            height=600,
            margin=dict(l=0, r=0, t=10, b=0),
            geo=dict(
                scope="usa",
                projection_type="albers usa",
                showlakes=False,
            ),
        )
        return fig
