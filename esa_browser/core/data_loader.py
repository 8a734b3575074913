from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
import requests

from esa_browser.config.model import DatasetConfig
from esa_browser.core.categories import Category
from esa_browser.core.exceptions import DatasetSchemaError, ResourceLoadError
from esa_browser.core.series import DATE_COLUMN, SpeciesSeries

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "ESA_BROWSER_DATA_ROOT"


def resolve_path(cfg: DatasetConfig, base_dir: Optional[Path] = None) -> Path:
    """
    Resolve a configured file path.

    Relative paths are resolved against ESA_BROWSER_DATA_ROOT when set,
    otherwise against base_dir (normally the config root).
    """
    path = Path(cfg.file)
    if path.is_absolute():
        return path

    data_root = os.environ.get(DATA_ROOT_ENV)
    if data_root:
        return Path(data_root) / path
    if base_dir is not None:
        return Path(base_dir) / path
    return path


def _read_csv(cfg: DatasetConfig, base_dir: Optional[Path]) -> pd.DataFrame:
    path = resolve_path(cfg, base_dir)
    logger.info("Loading resource", extra={"resource": cfg.name, "path": str(path)})
    try:
        return pd.read_csv(path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ResourceLoadError(cfg.name, f"could not read {path}: {e}") from e


def _require_columns(cfg: DatasetConfig, df: pd.DataFrame, *columns: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        msg = f"missing column(s) {missing}; found {list(df.columns)}"
        logger.error(msg, extra={"resource": cfg.name})
        raise DatasetSchemaError(cfg.name, msg)


def _numeric(values: pd.Series) -> pd.Series:
    """Numbers, with non-numeric and non-finite (inf, -inf) values as NaN."""
    return pd.to_numeric(values, errors="coerce").replace([np.inf, -np.inf], np.nan)


def _as_int64(cfg: DatasetConfig, df: pd.DataFrame, columns) -> pd.DataFrame:
    try:
        return df.astype({c: "int64" for c in columns})
    except (ValueError, TypeError, OverflowError) as e:
        raise ResourceLoadError(cfg.name, f"could not convert {list(columns)} to integers: {e}") from e


def load_species_series(cfg: DatasetConfig, base_dir: Optional[Path] = None) -> SpeciesSeries:
    """
    Load the per-category time series.

    Rows with an unparseable date are dropped entirely; non-numeric or empty
    counts become 0.
    """
    df = _read_csv(cfg, base_dir)
    date_col = cfg.columns["date"]
    _require_columns(cfg, df, date_col)

    categories = Category.present_in(df.columns)
    if not categories:
        raise DatasetSchemaError(cfg.name, "no known category columns (endangered_*)")

    dates = pd.to_datetime(
        df[date_col].astype(str).str.strip(),
        format=cfg.date_format,
        errors="coerce",
    )
    valid = dates.notna()
    n_dropped = int((~valid).sum())
    if n_dropped:
        logger.debug(
            "Dropped rows with unparseable dates",
            extra={"resource": cfg.name, "n_dropped": n_dropped},
        )

    frame = pd.DataFrame({DATE_COLUMN: dates[valid]})
    for category in categories:
        frame[category.column] = _numeric(df.loc[valid, category.column]).fillna(0)
    frame = _as_int64(cfg, frame, [c.column for c in categories])

    return SpeciesSeries(frame, categories)


def load_listings(cfg: DatasetConfig, base_dir: Optional[Path] = None) -> pd.DataFrame:
    """Yearly new-listing counts as a frame with integer 'year' and 'listings'."""
    df = _read_csv(cfg, base_dir)
    year_col = cfg.columns["year"]
    listings_col = cfg.columns["listings"]
    _require_columns(cfg, df, year_col, listings_col)

    out = pd.DataFrame(
        {
            "year": _numeric(df[year_col]),
            "listings": _numeric(df[listings_col]),
        }
    ).dropna()

    if out.empty:
        raise DatasetSchemaError(cfg.name, "no rows with numeric year and listings")

    return _as_int64(cfg, out, ["year", "listings"]).reset_index(drop=True)


def load_state_counts(cfg: DatasetConfig, base_dir: Optional[Path] = None) -> pd.DataFrame:
    """
    Per-state counts as a frame with 'state' and 'count', in file order.

    File order is kept because it breaks ties when ranking.
    """
    df = _read_csv(cfg, base_dir)
    state_col = cfg.columns["state"]
    count_col = cfg.columns["count"]
    _require_columns(cfg, df, state_col, count_col)

    out = pd.DataFrame(
        {
            "state": df[state_col].astype(str).str.strip(),
            "count": _numeric(df[count_col]),
        }
    ).dropna(subset=["count"])

    return _as_int64(cfg, out, ["count"]).reset_index(drop=True)


def load_states_geojson(cfg: DatasetConfig, base_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the US-states boundary FeatureCollection from a URL or a local file.
    """
    try:
        if cfg.is_remote:
            logger.info("Fetching resource", extra={"resource": cfg.name, "url": cfg.file})
            r = requests.get(cfg.file, timeout=cfg.timeout)
            r.raise_for_status()
            geojson = r.json()
        else:
            path = resolve_path(cfg, base_dir)
            logger.info("Loading resource", extra={"resource": cfg.name, "path": str(path)})
            with path.open() as f:
                geojson = json.load(f)
    except (requests.RequestException, OSError, ValueError) as e:
        raise ResourceLoadError(cfg.name, f"could not load boundaries: {e}") from e

    if not isinstance(geojson, dict) or not isinstance(geojson.get("features"), list):
        raise DatasetSchemaError(cfg.name, "expected a GeoJSON FeatureCollection")

    return geojson
