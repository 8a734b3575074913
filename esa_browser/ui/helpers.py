from __future__ import annotations

from typing import List, Optional, Sequence

from dash import html

from esa_browser.core.amendments import Amendment
from esa_browser.core.categories import Category
from esa_browser.core.ranking import StateRecord, colour_for, top_n


def category_options(categories: Sequence[Category]) -> List[dict]:
    return [{"label": c.display_name, "value": c.name} for c in categories]


def top_states_summary(records: Optional[Sequence[StateRecord]], n: int = 5):
    """
    Ranked list of the n states with the most endangered species.
    """
    if not records:
        return html.Div("State data unavailable.", className="text-muted")

    items = [
        html.Li([html.Strong(f"{r.rank}. "), f"{r.name}: {r.count} species"])
        for r in top_n(records, n)
    ]
    return html.Div(
        [
            html.Strong(f"Top {n} States With the Most Endangered Species (2019)"),
            html.Ul(items, className="list-unstyled mb-0"),
        ]
    )


def state_profile_card(record: StateRecord, max_count: int):
    """Profile text plus a swatch in the state's map colour."""
    swatch = html.Span(
        className="d-inline-block rounded me-2",
        style={
            "width": "1rem",
            "height": "1rem",
            "verticalAlign": "middle",
            "backgroundColor": colour_for(record.count, max_count),
        },
    )
    return html.Div(
        [
            html.H4([swatch, f"{record.name}: State Profile"]),
            html.Div([html.Strong("Rank: "), f"#{record.rank} nationally"]),
            html.Div([html.Strong("Endangered species (2019): "), str(record.count)]),
            html.Div([html.Strong("Share of U.S. total: "), f"{record.percentage:.1f}%"]),
            html.Div([html.Strong("Level: "), record.level.value]),
        ],
        className="mb-2",
    )


def amendment_detail(amendment: Amendment):
    return html.Div(
        [
            html.Div(amendment.title, className="fw-bold mb-1"),
            html.Ul([html.Li(text) for text in amendment.bullets], className="mb-2"),
        ]
    )
