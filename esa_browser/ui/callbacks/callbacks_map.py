from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, exceptions

from esa_browser.core.view_state import ViewState
from esa_browser.ui.callbacks.callbacks_utils import (
    error_figure,
    state_name_from_click,
    unavailable_figure,
)
from esa_browser.ui.helpers import state_profile_card
from esa_browser.ui.ids import IDs
from esa_browser.views.state_map_view import StateMapView
from esa_browser.views.state_profile_view import StateProfileView

if TYPE_CHECKING:
    from esa_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _map_errors(ctx: AppConfig) -> Optional[str]:
    errors = [ctx.data.errors[k] for k in ("state_counts", "states_geojson") if k in ctx.data.errors]
    return "; ".join(errors) or None


def register_map_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Selected state -> choropleth
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Input(IDs.Store.SELECTED_STATE, "data"),
    )
    def update_map(selected: Optional[str]):
        view = ctx.registry.create(StateMapView.id, ctx.data)
        if not view.available:
            return unavailable_figure(view.label, _map_errors(ctx))
        try:
            state = ViewState(selected_state=selected)
            return view.render_figure(view.timed_compute(state), state)
        except Exception:
            logger.exception("Error rendering map", extra={"selected_state": selected})
            return error_figure("The map could not be drawn. Check the logs for details.")

    # ---------------------------------------------------------
    # Map click opens the state profile; close button hides it
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTED_STATE, "data"),
        Output(IDs.Control.PROFILE_MODAL, "is_open"),
        Output(IDs.Control.PROFILE_BODY, "children"),
        Output(IDs.Control.PROFILE_GRAPH, "figure"),
        Input(IDs.Control.MAP_GRAPH, "clickData"),
        Input(IDs.Control.PROFILE_CLOSE_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def open_state_profile(click_data: Any, _n_clicks):
        if dash.ctx.triggered_id == IDs.Control.PROFILE_CLOSE_BTN:
            return None, False, dash.no_update, dash.no_update

        name = state_name_from_click(click_data)
        if name is None:
            raise exceptions.PreventUpdate

        view = ctx.registry.create(StateProfileView.id, ctx.data)
        state = ViewState(selected_state=name)
        data = view.timed_compute(state)
        if data is None:
            raise exceptions.PreventUpdate

        logger.info("state_profile_opened", extra={"state": name})
        return name, True, state_profile_card(data["record"], data["max_count"]), view.render_figure(data, state)
