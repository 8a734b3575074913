from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from esa_browser.core.chart_data import ChartData
from esa_browser.core.timeline import TimelineState
from esa_browser.ui.helpers import category_options
from esa_browser.ui.ids import IDs

HIDDEN = {"display": "none"}


def build_timeline_panel(data: ChartData, initial: Optional[TimelineState]) -> dbc.Card:
    """
    Stacked area chart with its slider, play button, playback interval,
    category checklist and the amendment detail box.

    All components are created even when the series failed to load so the
    callbacks always have their targets; the controls are just disabled.
    """
    cfg = data.config
    disabled = initial is None
    categories = data.series.categories if data.series is not None else []

    slider_min = initial.min_start if initial else 0
    slider_max = initial.max_start if initial else 0
    slider_value = initial.start_year if initial else 0

    return dbc.Card(
        [
            dbc.CardHeader(
                [
                    html.H4("Number of Endangered Animal Species Per Class", className="mb-0"),
                    html.Small(
                        [
                            "Sources: ",
                            html.A(
                                "Wildlife Species Data",
                                href="https://www.kaggle.com/datasets/chirayurijal/worldwildlifespeciesdata",
                                target="_blank",
                            ),
                            " • ",
                            html.A(
                                "Endangered Species Act Amendments",
                                href="https://www.fws.gov/page/endangered-species-act-amendments",
                                target="_blank",
                            ),
                        ],
                        className="text-muted",
                    ),
                ]
            ),
            dbc.CardBody(
                [
                    dcc.Store(
                        id=IDs.Store.TIMELINE_STATE,
                        data=initial.to_dict() if initial else None,
                    ),
                    dcc.Store(id=IDs.Store.SELECTED_AMENDMENT),
                    dcc.Graph(id=IDs.Control.TIMELINE_GRAPH, config={"responsive": True}),
                    html.Div(
                        [
                            html.Label(f"Timeline: {cfg.window_size}-year window", className="me-2"),
                            html.Div(
                                dcc.Slider(
                                    id=IDs.Control.TIMELINE_SLIDER,
                                    min=slider_min,
                                    max=slider_max,
                                    step=1,
                                    value=slider_value,
                                    marks=None,
                                    disabled=disabled,
                                    updatemode="drag",
                                ),
                                className="flex-grow-1",
                            ),
                            html.Span(id=IDs.Control.TIMELINE_RANGE_LABEL, className="mx-2"),
                            dbc.Button(
                                "Play",
                                id=IDs.Control.PLAY_BUTTON,
                                color="dark",
                                size="sm",
                                disabled=disabled,
                                n_clicks=0,
                            ),
                            dcc.Interval(
                                id=IDs.Control.PLAY_INTERVAL,
                                interval=cfg.play_interval_ms,
                                n_intervals=0,
                                disabled=True,
                            ),
                        ],
                        className="d-flex align-items-center mt-2",
                    ),
                    html.Div(
                        [
                            html.Strong("Class", className="me-2"),
                            dcc.Checklist(
                                id=IDs.Control.CATEGORY_CHECKLIST,
                                options=category_options(categories),
                                value=[c.name for c in categories],
                                inline=True,
                                inputClassName="me-1",
                                labelClassName="me-3",
                            ),
                        ],
                        className="d-flex align-items-center flex-wrap mt-2",
                    ),
                    html.Div(
                        [
                            html.Div(id=IDs.Control.AMENDMENT_DETAIL),
                            dbc.Button(
                                "See Legislative Effect on Number of New Species Added",
                                id=IDs.Control.SEE_EFFECT_BTN,
                                color="dark",
                                size="sm",
                                n_clicks=0,
                            ),
                        ],
                        id=IDs.Control.AMENDMENT_PANEL,
                        className="border rounded p-2 mt-2",
                        style=HIDDEN,
                    ),
                ]
            ),
        ],
        className="mb-3",
    )
