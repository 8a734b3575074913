from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from esa_browser.core.chart_data import ChartData
from esa_browser.ui.helpers import top_states_summary
from esa_browser.ui.ids import IDs


def build_map_panel(data: ChartData) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.H4("US Endangered Species by State (2019)", className="mb-0")),
            dbc.CardBody(
                [
                    dcc.Store(id=IDs.Store.SELECTED_STATE),
                    html.Div(
                        top_states_summary(data.states),
                        id=IDs.Control.TOP_STATES_SUMMARY,
                        className="mb-2",
                    ),
                    dcc.Graph(id=IDs.Control.MAP_GRAPH, config={"responsive": True}),
                    html.Small("Click a state for its profile.", className="text-muted"),
                    dbc.Modal(
                        [
                            dbc.ModalBody(
                                [
                                    html.Div(id=IDs.Control.PROFILE_BODY),
                                    dcc.Graph(id=IDs.Control.PROFILE_GRAPH, config={"displayModeBar": False}),
                                ]
                            ),
                            dbc.ModalFooter(
                                dbc.Button("Back to map", id=IDs.Control.PROFILE_CLOSE_BTN, n_clicks=0)
                            ),
                        ],
                        id=IDs.Control.PROFILE_MODAL,
                        is_open=False,
                        size="lg",
                    ),
                ]
            ),
        ],
        className="mb-3",
    )
