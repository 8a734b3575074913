from __future__ import annotations

import json
import logging

from pathlib import Path
from typing import Any, Dict, List

from esa_browser.config.model import (
    GlobalConfig,
    DatasetConfig,
    HIGHLIGHT_POLICIES,
    RESOURCE_KINDS,
    Y_AXIS_MODES,
)
from esa_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            datasets/
                species_timeline.json
                listings.json
                ...

    Each file in 'datasets/' is parsed into a DatasetConfig. Settings missing
    from global.json fall back to the GlobalConfig defaults.

    :param root: Directory containing 'global.json' and optionally 'datasets/'.
    :return: A validated GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a setting or resource entry is invalid.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw_global = json.load(f)

    datasets = load_datasets(root / "datasets")

    cfg = _build_global_config(raw_global, datasets)
    cfg.config_root = root
    validate_global_config(cfg)

    logger.info(
        "Loaded global config",
        extra={"n_datasets": len(datasets), "y_axis_mode": cfg.y_axis_mode,
               "highlight_policy": cfg.highlight_policy},
    )
    return cfg


def load_datasets(datasets_dir: Path) -> List[DatasetConfig]:
    datasets: List[DatasetConfig] = []
    if not datasets_dir.is_dir():
        logger.warning("No datasets directory at %s", datasets_dir)
        return datasets

    for idx, config_file in enumerate(sorted(datasets_dir.glob("*.json"))):
        with config_file.open() as f:
            raw = json.load(f)
        if raw.get("kind") not in RESOURCE_KINDS:
            raise ConfigError(
                f"{config_file.name}: 'kind' must be one of {RESOURCE_KINDS}, got {raw.get('kind')!r}"
            )
        if "file" not in raw:
            raise ConfigError(f"{config_file.name}: missing 'file'")
        datasets.append(DatasetConfig.from_raw(raw, source_path=config_file, index=idx))
    return datasets


def _build_global_config(raw: Dict[str, Any], datasets: List[DatasetConfig]) -> GlobalConfig:
    defaults = GlobalConfig()
    try:
        thresholds = tuple(int(t) for t in raw.get("level_thresholds", defaults.level_thresholds))
        return GlobalConfig(
            ui_title=raw.get("ui_title", defaults.ui_title),
            subtitle=raw.get("subtitle", defaults.subtitle),
            window_size=int(raw.get("window_size", defaults.window_size)),
            play_interval_ms=int(raw.get("play_interval_ms", defaults.play_interval_ms)),
            y_axis_mode=str(raw.get("y_axis_mode", defaults.y_axis_mode)).lower(),
            highlight_policy=str(raw.get("highlight_policy", defaults.highlight_policy)).lower(),
            level_thresholds=thresholds,
            bin_width=int(raw.get("bin_width", defaults.bin_width)),
            datasets=datasets,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in global.json: {e}") from e


def validate_global_config(cfg: GlobalConfig) -> None:
    if cfg.window_size < 1:
        raise ConfigError("window_size must be >= 1")
    if cfg.play_interval_ms < 1:
        raise ConfigError("play_interval_ms must be >= 1")
    if cfg.bin_width < 1:
        raise ConfigError("bin_width must be >= 1")
    if cfg.y_axis_mode not in Y_AXIS_MODES:
        raise ConfigError(f"y_axis_mode must be one of {Y_AXIS_MODES}, got {cfg.y_axis_mode!r}")
    if cfg.highlight_policy not in HIGHLIGHT_POLICIES:
        raise ConfigError(
            f"highlight_policy must be one of {HIGHLIGHT_POLICIES}, got {cfg.highlight_policy!r}"
        )
    t = cfg.level_thresholds
    if len(t) != 3 or not (t[0] < t[1] < t[2]):
        raise ConfigError(f"level_thresholds must be three ascending values, got {list(t)}")
