from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State, exceptions

from esa_browser.core.amendments import find_amendment
from esa_browser.core.view_state import ViewState
from esa_browser.ui.callbacks.callbacks_utils import (
    amendment_year_from_click,
    error_figure,
    unavailable_figure,
)
from esa_browser.ui.helpers import amendment_detail
from esa_browser.ui.ids import IDs
from esa_browser.views.listings_histogram_view import ListingsHistogramView
from esa_browser.views.species_timeline_view import AMENDMENT_TAG

if TYPE_CHECKING:
    from esa_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

PANEL_SHOWN = {"display": "block"}
PANEL_HIDDEN = {"display": "none"}


def highlight_for_amendment(ctx: AppConfig, amendment_year: int) -> Optional[int]:
    """
    Run one amendment selection through the bridge.

    The histogram subscribes its own highlighter; the return value is the bin
    start it ended up highlighting, or None when the target is outside the
    bins or the histogram has no data.
    """
    bridge = ctx.new_bridge()
    histogram = ctx.registry.create(ListingsHistogramView.id, ctx.data)
    highlighter = histogram.subscribe_to(bridge)
    bridge.on_amendment_selected(amendment_year)
    return highlighter.highlighted_start if highlighter is not None else None


def register_bridge_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Marker click shows the amendment; the button forwards it
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTED_AMENDMENT, "data"),
        Output(IDs.Control.AMENDMENT_DETAIL, "children"),
        Output(IDs.Control.AMENDMENT_PANEL, "style"),
        Output(IDs.Store.HIGHLIGHTED_BIN, "data"),
        Input(IDs.Control.TIMELINE_GRAPH, "clickData"),
        Input(IDs.Control.SEE_EFFECT_BTN, "n_clicks"),
        State(IDs.Store.SELECTED_AMENDMENT, "data"),
        prevent_initial_call=True,
    )
    def on_amendment_interaction(click_data: Any, _n_clicks, selected_year: Optional[int]):
        trigger = dash.ctx.triggered_id

        if trigger == IDs.Control.TIMELINE_GRAPH:
            year = amendment_year_from_click(click_data, AMENDMENT_TAG)
            amendment = find_amendment(ctx.data.amendments, year) if year is not None else None
            if amendment is None:
                # Click on an area band: hide the detail box
                return None, None, PANEL_HIDDEN, dash.no_update
            return amendment.year, amendment_detail(amendment), PANEL_SHOWN, dash.no_update

        if trigger == IDs.Control.SEE_EFFECT_BTN:
            if selected_year is None:
                raise exceptions.PreventUpdate
            highlighted = highlight_for_amendment(ctx, int(selected_year))
            return dash.no_update, dash.no_update, PANEL_HIDDEN, highlighted

        raise exceptions.PreventUpdate

    # ---------------------------------------------------------
    # Scroll the histogram into view when a bin is requested
    # ---------------------------------------------------------
    app.clientside_callback(
        """
        function(highlighted) {
            const el = document.getElementById("%s");
            if (el) { el.scrollIntoView({behavior: "smooth", block: "start"}); }
            return window.dash_clientside.no_update;
        }
        """ % IDs.Control.HISTOGRAM_CARD,
        Output(IDs.Store.SCROLL_SINK, "data"),
        Input(IDs.Store.HIGHLIGHTED_BIN, "data"),
        prevent_initial_call=True,
    )

    # ---------------------------------------------------------
    # Highlighted bin -> histogram
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.HISTOGRAM_GRAPH, "figure"),
        Input(IDs.Store.HIGHLIGHTED_BIN, "data"),
    )
    def update_histogram(highlighted: Optional[int]):
        view = ctx.registry.create(ListingsHistogramView.id, ctx.data)
        if not view.available:
            return unavailable_figure(view.label, ctx.data.errors.get("listings"))
        try:
            state = ViewState(highlighted_bin=highlighted)
            return view.render_figure(view.timed_compute(state), state)
        except Exception:
            logger.exception("Error rendering histogram", extra={"highlighted_bin": highlighted})
            return error_figure("The histogram could not be drawn. Check the logs for details.")
