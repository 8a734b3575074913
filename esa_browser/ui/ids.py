from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        TIMELINE_STATE = "timeline-state"
        SELECTED_AMENDMENT = "selected-amendment"
        HIGHLIGHTED_BIN = "highlighted-bin"
        SELECTED_STATE = "selected-state"
        SCROLL_SINK = "scroll-sink"

    class Control:
        # Timeline
        TIMELINE_GRAPH = "timeline-graph"
        TIMELINE_SLIDER = "timeline-slider"
        TIMELINE_RANGE_LABEL = "timeline-range-label"
        PLAY_BUTTON = "play-button"
        PLAY_INTERVAL = "play-interval"
        CATEGORY_CHECKLIST = "category-checklist"

        # Amendment detail (marker click)
        AMENDMENT_PANEL = "amendment-panel"
        AMENDMENT_DETAIL = "amendment-detail"
        SEE_EFFECT_BTN = "see-effect-btn"

        # Histogram
        HISTOGRAM_CARD = "histogram-card"
        HISTOGRAM_GRAPH = "histogram-graph"

        # Map + state profile
        MAP_GRAPH = "map-graph"
        TOP_STATES_SUMMARY = "top-states-summary"
        PROFILE_MODAL = "state-profile-modal"
        PROFILE_BODY = "state-profile-body"
        PROFILE_GRAPH = "state-profile-graph"
        PROFILE_CLOSE_BTN = "state-profile-close"
