from .species_timeline_view import SpeciesTimelineView
from .listings_histogram_view import ListingsHistogramView
from .state_map_view import StateMapView
from .state_profile_view import StateProfileView

__all__ = ["SpeciesTimelineView", "ListingsHistogramView", "StateMapView", "StateProfileView"]
