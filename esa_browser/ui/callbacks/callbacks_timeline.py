from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State, exceptions

from esa_browser.core.view_state import ViewState
from esa_browser.ui.callbacks.callbacks_utils import (
    error_figure,
    try_parse_timeline_state,
    unavailable_figure,
)
from esa_browser.ui.ids import IDs
from esa_browser.views.species_timeline_view import SpeciesTimelineView

if TYPE_CHECKING:
    from esa_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_timeline_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    controller = ctx.controller

    # ---------------------------------------------------------
    # Play button / interval tick / slider -> TimelineState
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TIMELINE_STATE, "data"),
        Output(IDs.Control.TIMELINE_SLIDER, "value"),
        Output(IDs.Control.PLAY_INTERVAL, "disabled"),
        Output(IDs.Control.PLAY_INTERVAL, "n_intervals"),
        Output(IDs.Control.PLAY_BUTTON, "children"),
        Input(IDs.Control.PLAY_BUTTON, "n_clicks"),
        Input(IDs.Control.PLAY_INTERVAL, "n_intervals"),
        Input(IDs.Control.TIMELINE_SLIDER, "value"),
        State(IDs.Store.TIMELINE_STATE, "data"),
        prevent_initial_call=True,
    )
    def drive_timeline(_n_clicks, n_intervals, slider_value, ts_data: dict[str, Any] | None):
        state = try_parse_timeline_state(ts_data)
        if state is None:
            raise exceptions.PreventUpdate

        trigger = dash.ctx.triggered_id
        n_intervals_out = dash.no_update

        if trigger == IDs.Control.PLAY_BUTTON:
            new_state = controller.toggle(state)
            # New play session: restart the tick counter along with last_tick
            n_intervals_out = 0
            logger.info(
                "playback_toggled",
                extra={"status": new_state.status.value, "start_year": new_state.start_year},
            )
        elif trigger == IDs.Control.PLAY_INTERVAL:
            new_state = controller.tick(state, slider_value=slider_value, tick_id=n_intervals)
            if new_state == state:
                # Idle or already-applied tick
                raise exceptions.PreventUpdate
        elif trigger == IDs.Control.TIMELINE_SLIDER:
            if slider_value is None:
                raise exceptions.PreventUpdate
            new_state = controller.seek(state, slider_value)
        else:
            raise exceptions.PreventUpdate

        return (
            new_state.to_dict(),
            new_state.start_year,
            controller.interval_disabled(new_state),
            n_intervals_out,
            "Pause" if new_state.is_playing else "Play",
        )

    # ---------------------------------------------------------
    # TimelineState + active categories -> area chart
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TIMELINE_GRAPH, "figure"),
        Output(IDs.Control.TIMELINE_RANGE_LABEL, "children"),
        Input(IDs.Store.TIMELINE_STATE, "data"),
        Input(IDs.Control.CATEGORY_CHECKLIST, "value"),
    )
    def update_timeline_graph(ts_data: dict[str, Any] | None, active: list[str] | None):
        view = ctx.registry.create(SpeciesTimelineView.id, ctx.data)
        if not view.available:
            return unavailable_figure(view.label, ctx.data.errors.get("species_series")), ""

        state = try_parse_timeline_state(ts_data)
        view_state = ViewState(
            window_start=state.start_year if state else None,
            active_categories=list(active) if active is not None else None,
        )

        try:
            data = view.timed_compute(view_state)
            if data is None:
                # Empty window: keep whatever is on screen
                raise exceptions.PreventUpdate
            return view.render_figure(data, view_state), data["window"].label
        except exceptions.PreventUpdate:
            raise
        except Exception:
            logger.exception("Error rendering timeline", extra={"timeline_state": ts_data})
            return error_figure("The timeline could not be drawn. Check the logs for details."), ""
