"""
Config package for esa_browser.

Responsible for:
- config models (GlobalConfig, DatasetConfig)
- config I/O helpers (load_global_config / load_datasets)
"""

from .model import GlobalConfig, DatasetConfig
from .io import load_global_config, load_datasets

__all__ = ["GlobalConfig", "DatasetConfig", "load_global_config", "load_datasets"]
