from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from esa_browser.config.model import GlobalConfig
from esa_browser.core.bridge import CrossViewBridge, HighlightPolicy
from esa_browser.core.chart_data import ChartData
from esa_browser.core.timeline import TimelineController
from esa_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config, loaded chart data, the view
    registry and the timeline controller. Passed into layout + callback
    registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    data: ChartData
    registry: Optional[ViewRegistry] = None
    controller: Optional[TimelineController] = None

    @property
    def highlight_policy(self) -> HighlightPolicy:
        return HighlightPolicy.parse(self.global_config.highlight_policy)

    def new_bridge(self) -> CrossViewBridge:
        return CrossViewBridge(self.highlight_policy, width=self.global_config.bin_width)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.controller is None:
            raise RuntimeError("AppConfig.controller must be initialized.")
