from __future__ import annotations
import logging
from typing import Any, Optional

import plotly.graph_objs as go

from esa_browser.core.timeline import TimelineState

logger = logging.getLogger(__name__)


def try_parse_timeline_state(data: object) -> Optional[TimelineState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return TimelineState.from_dict(data)
    except Exception:
        logger.exception("Invalid timeline-state: %r", data)
        return None


def amendment_year_from_click(click_data: Any, tag: str) -> Optional[int]:
    """
    Amendment year from a timeline clickData payload, or None when the click
    landed on something other than an amendment marker.

    Only the first point counts: it is the one under the cursor, other points
    can come from traces that merely share the x value.
    """
    if not isinstance(click_data, dict):
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)) and len(custom) == 2 and custom[0] == tag:
        return int(custom[1])
    return None


def state_name_from_click(click_data: Any) -> Optional[str]:
    if not isinstance(click_data, dict):
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)) and custom:
        return str(custom[0])
    return None


def message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def error_figure(details: str) -> go.Figure:
    return message_figure("Something went wrong while rendering this chart.", details)


def unavailable_figure(label: str, reason: Optional[str] = None) -> go.Figure:
    return message_figure(f"{label}: data could not be loaded.", reason)
