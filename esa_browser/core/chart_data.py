from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from esa_browser.config.model import DatasetConfig, GlobalConfig
from esa_browser.core import data_loader
from esa_browser.core.amendments import ESA_AMENDMENTS, Amendment
from esa_browser.core.exceptions import ResourceLoadError
from esa_browser.core.histogram import HistogramBin, build_bins
from esa_browser.core.ranking import StateRecord, normalise_name, rank_states
from esa_browser.core.series import SpeciesSeries

logger = logging.getLogger(__name__)


@dataclass
class ChartData:
    """
    Everything the three charts render from, loaded once at startup.

    Each resource is loaded independently: if one fails, its attribute stays
    None and the reason is kept in `errors`, while the other charts still get
    their data.
    """
    config: GlobalConfig
    series: Optional[SpeciesSeries] = None
    bins: Optional[List[HistogramBin]] = None
    states: Optional[List[StateRecord]] = None
    geojson: Optional[Dict[str, Any]] = None
    amendments: Tuple[Amendment, ...] = ESA_AMENDMENTS
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, config: GlobalConfig) -> ChartData:
        data = cls(config=config)

        data.series = data._load_one("species_series", data_loader.load_species_series)
        listings = data._load_one("listings", data_loader.load_listings)
        if listings is not None:
            data.bins = build_bins(listings, width=config.bin_width)

        counts = data._load_one("state_counts", data_loader.load_state_counts)
        if counts is not None:
            data.states = rank_states(
                zip(counts["state"], counts["count"]),
                thresholds=config.level_thresholds,
            )
        data.geojson = data._load_one("states_geojson", data_loader.load_states_geojson)

        logger.info(
            "Chart data loaded",
            extra={"failed_resources": sorted(data.errors)},
        )
        return data

    def _load_one(self, kind: str, loader: Callable[[DatasetConfig, Any], Any]) -> Any:
        cfg = self.config.dataset(kind)
        if cfg is None:
            logger.warning("No resource configured for %s", kind)
            self.errors[kind] = "not configured"
            return None
        try:
            return loader(cfg, self.config.config_root)
        except ResourceLoadError as e:
            logger.exception("Failed to load %s", kind, extra={"resource": e.resource})
            self.errors[kind] = str(e)
            return None

    def state_by_key(self) -> Dict[str, StateRecord]:
        return {normalise_name(r.name): r for r in (self.states or [])}
