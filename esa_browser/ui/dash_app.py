from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from esa_browser.config.io import load_global_config
from esa_browser.core.chart_data import ChartData
from esa_browser.core.timeline import TimelineController
from esa_browser.core.view_registry import ViewRegistry
from esa_browser.ui.layout.build_layout import build_layout
from esa_browser.ui.callbacks.callbacks_timeline import register_timeline_callbacks
from esa_browser.ui.callbacks.callbacks_bridge import register_bridge_callbacks
from esa_browser.ui.callbacks.callbacks_map import register_map_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from esa_browser.views import (
        SpeciesTimelineView,
        ListingsHistogramView,
        StateMapView,
        StateProfileView,
    )

    registry = ViewRegistry()
    registry.register(SpeciesTimelineView)
    registry.register(ListingsHistogramView)
    registry.register(StateMapView)
    registry.register(StateProfileView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load every resource; failures are isolated per chart
    data = ChartData.load(global_config)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        data=data,
        registry=_build_view_registry(),
        controller=TimelineController(
            window_size=global_config.window_size,
            play_interval_ms=global_config.play_interval_ms,
        ),
    )
    ctx.validate()

    missing = ctx.registry.unavailable(data)
    if missing:
        logger.warning("Charts without data", extra={"view_ids": missing})

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_timeline_callbacks(app, ctx)
    register_bridge_callbacks(app, ctx)
    register_map_callbacks(app, ctx)

    return app
