from pathlib import Path
from typing import List, Tuple

import pandas as pd

from esa_browser.config.io import load_global_config
from esa_browser.core import data_loader
from esa_browser.core.exceptions import ResourceLoadError

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"

LOADERS = {
    "species_series": data_loader.load_species_series,
    "listings": data_loader.load_listings,
    "state_counts": data_loader.load_state_counts,
    "states_geojson": data_loader.load_states_geojson,
}


def check_resources(config_root: Path = CONFIG_DIR) -> List[Tuple[str, str, str, str]]:
    """
    One (resource, field, mapped to, status) row per configured column, plus
    a final "load" row per resource.
    """
    cfg = load_global_config(config_root)
    rows = []

    for ds in cfg.datasets:
        header = None
        if not ds.is_remote and ds.kind != "states_geojson":
            path = data_loader.resolve_path(ds, cfg.config_root)
            try:
                header = list(pd.read_csv(path, nrows=0).columns)
            except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                rows.append((ds.name, "file", str(path), f"ERROR {e}"))
                continue

        if header is not None:
            for field, column in ds.columns.items():
                status = "OK" if column in header else "MISSING"
                rows.append((ds.name, field, column, status))

        try:
            LOADERS[ds.kind](ds, cfg.config_root)
            rows.append((ds.name, "load", ds.file, "OK"))
        except ResourceLoadError as e:
            rows.append((ds.name, "load", ds.file, f"ERROR {e}"))

    return rows


def main():
    print(f"{'RESOURCE':<40} | {'FIELD':<10} | {'MAPPED TO':<35} | STATUS")
    print("-" * 100)
    for name, field, column, status in check_resources():
        print(f"{name:<40} | {field:<10} | {column:<35} | {status}")


if __name__ == "__main__":
    main()
