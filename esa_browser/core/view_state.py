from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any


@dataclass
class ViewState:
    """
    Represents the current user selection across the three charts.

    Fields:

    - window_start: first year of the timeline window (None = earliest)
    - active_categories: category names (Category.name) drawn at full opacity.
      None means all are active; an empty list means all are dimmed.
    - highlighted_bin: start year of the histogram bin to highlight, if any
    - selected_state: state name whose profile is open, if any
    """

    window_start: Optional[int] = None
    active_categories: Optional[List[str]] = None
    highlighted_bin: Optional[int] = None
    selected_state: Optional[str] = None

    def is_active(self, category_name: str) -> bool:
        return self.active_categories is None or category_name in self.active_categories

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        active = data.get("active_categories")
        highlighted = data.get("highlighted_bin")
        start = data.get("window_start")
        return cls(
            window_start=int(start) if start is not None else None,
            active_categories=list(active) if active is not None else None,
            highlighted_bin=int(highlighted) if highlighted is not None else None,
            selected_state=data.get("selected_state"),
        )
