from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from esa_browser.ui.ids import IDs


def build_histogram_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                [
                    html.H4("Number of Species Added to the Endangered Species List", className="mb-0"),
                    html.Small(
                        [
                            "Source: ",
                            html.A(
                                "U.S. Federal Endangered and Threatened Species by Calendar Year",
                                href="https://data.virginia.gov/dataset/u-s-federal-endangered-and-threatened-species-by-calendar-year",
                                target="_blank",
                            ),
                        ],
                        className="text-muted",
                    ),
                ]
            ),
            dbc.CardBody(
                [
                    dcc.Store(id=IDs.Store.HIGHLIGHTED_BIN),
                    dcc.Store(id=IDs.Store.SCROLL_SINK),
                    dcc.Graph(id=IDs.Control.HISTOGRAM_GRAPH, config={"responsive": True}),
                ]
            ),
        ],
        id=IDs.Control.HISTOGRAM_CARD,
        className="mb-3",
    )
