from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

Y_AXIS_MODES = ("fixed", "auto")
HIGHLIGHT_POLICIES = ("next", "current")

RESOURCE_KINDS = ("species_series", "listings", "state_counts", "states_geojson")

# Column defaults per resource kind, matching the published source files
DEFAULT_COLUMNS: Dict[str, Dict[str, str]] = {
    "species_series": {"date": "date"},
    "listings": {
        "year": "Calendar Year",
        "listings": "Number of New Species Listings",
    },
    "state_counts": {
        "state": "State",
        "count": "Endangered (Total) 2019",
    },
    "states_geojson": {"name": "name"},
}


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single static resource.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Resource {self.index}")

    @property
    def kind(self) -> str:
        return self.raw["kind"]

    @property
    def file(self) -> str:
        return str(self.raw["file"])

    @property
    def is_remote(self) -> bool:
        return self.file.startswith(("http://", "https://"))

    @property
    def columns(self) -> Dict[str, str]:
        cols = dict(DEFAULT_COLUMNS.get(self.kind, {}))
        cols.update(self.raw.get("columns", {}))
        return cols

    @property
    def date_format(self) -> str:
        return self.raw.get("date_format", "%d %b %y")

    @property
    def timeout(self) -> float:
        return float(self.raw.get("timeout", 30))

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    """
    Deployment-wide settings from global.json.

    y_axis_mode and highlight_policy pick one of the two chart behaviours
    per deployment; they are never mixed within one app instance.
    """
    ui_title: str = "Endangered Species Browser"
    subtitle: str = "Endangered Species Act: species, listings and states"
    window_size: int = 10
    play_interval_ms: int = 800
    y_axis_mode: str = "fixed"
    highlight_policy: str = "next"
    level_thresholds: Tuple[int, int, int] = (40, 80, 150)
    bin_width: int = 5
    config_root: Optional[Path] = None
    datasets: List[DatasetConfig] = field(default_factory=list)

    def dataset(self, kind: str) -> Optional[DatasetConfig]:
        """First configured resource of the given kind, if any."""
        return next((cfg for cfg in self.datasets if cfg.kind == kind), None)
