from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc

from esa_browser.ui.layout.build_histogram_panel import build_histogram_panel
from esa_browser.ui.layout.build_map_panel import build_map_panel
from esa_browser.ui.layout.build_navbar import build_navbar
from esa_browser.ui.layout.build_timeline_panel import build_timeline_panel

if TYPE_CHECKING:
    from esa_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    data = ctx.data
    initial = None
    if data.series is not None and not data.series.empty:
        initial = ctx.controller.initial(data.series)

    return dbc.Container(
        fluid=True,
        className="esa-root",
        children=[
            build_navbar(ctx.global_config),
            dbc.Row(dbc.Col(build_timeline_panel(data, initial), lg=10), justify="center"),
            dbc.Row(dbc.Col(build_histogram_panel(), lg=10), justify="center"),
            dbc.Row(dbc.Col(build_map_panel(data), lg=10), justify="center"),
        ],
    )
