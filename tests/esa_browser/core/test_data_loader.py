import json

import numpy as np
import pytest
import requests

from esa_browser.config.model import DatasetConfig
from esa_browser.core import data_loader
from esa_browser.core.categories import Category
from esa_browser.core.data_loader import (
    load_listings,
    load_species_series,
    load_state_counts,
    load_states_geojson,
    resolve_path,
)
from esa_browser.core.exceptions import DatasetSchemaError, ResourceLoadError


def _cfg(tmp_path, kind, file, **extra):
    raw = {"name": f"test-{kind}", "kind": kind, "file": str(file), **extra}
    return DatasetConfig.from_raw(raw, source_path=tmp_path / "cfg.json", index=0)


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_species_series_drops_unparseable_date_rows(tmp_path):
    path = _write(
        tmp_path,
        "species.csv",
        "date,endangered_mammals,endangered_birds\n"
        "1 Jan 96,10,5\n"
        "not a date,99,99\n"
        "1 Jan 97,12,x\n",
    )

    series = load_species_series(_cfg(tmp_path, "species_series", path))

    # 3 rows in, exactly one dropped
    assert len(series) == 2
    assert [d.year for d in series.dates] == [1996, 1997]
    # The dropped row's 99s never reach the aggregates
    assert list(series.totals()) == [15, 12]
    assert not np.isnan(series.totals().astype(float)).any()


def test_species_series_coerces_bad_counts_to_zero(tmp_path):
    path = _write(
        tmp_path,
        "species.csv",
        "date,endangered_mammals,endangered_birds\n1 Jan 96,10,\n1 Jan 97,abc,4\n",
    )

    series = load_species_series(_cfg(tmp_path, "species_series", path))

    assert list(series.counts(Category.MAMMALS)) == [10, 0]
    assert list(series.counts(Category.BIRDS)) == [0, 4]



def test_non_finite_counts_are_treated_as_missing(tmp_path):
    species = _write(
        tmp_path,
        "species.csv",
        "date,endangered_mammals\n1 Jan 96,inf\n1 Jan 97,-inf\n1 Jan 98,3\n",
    )
    listings = _write(
        tmp_path,
        "listings.csv",
        "Calendar Year,Number of New Species Listings\n1982,inf\n1983,4\n",
    )
    states = _write(tmp_path, "states.csv", "State,Endangered (Total) 2019\nOhio,inf\nHawaii,438\n")

    series = load_species_series(_cfg(tmp_path, "species_series", species))
    df = load_listings(_cfg(tmp_path, "listings", listings))
    counts = load_state_counts(_cfg(tmp_path, "state_counts", states))

    assert list(series.counts(Category.MAMMALS)) == [0, 0, 3]
    assert df.to_dict("records") == [{"year": 1983, "listings": 4}]
    assert list(counts["state"]) == ["Hawaii"]


def test_species_series_two_digit_years_and_sorting(tmp_path):
    path = _write(
        tmp_path,
        "species.csv",
        "date,endangered_fish,endangered_mammals\n1 Jan 05,1,2\n1 Jan 75,3,4\n15 Jun 99,5,6\n",
    )

    series = load_species_series(_cfg(tmp_path, "species_series", path))

    assert [d.year for d in series.dates] == [1975, 1999, 2005]
    # Category order follows the enum, not the CSV column order
    assert series.categories == [Category.MAMMALS, Category.FISH]


def test_species_series_missing_date_column(tmp_path):
    path = _write(tmp_path, "species.csv", "when,endangered_mammals\n1 Jan 96,1\n")

    with pytest.raises(DatasetSchemaError):
        load_species_series(_cfg(tmp_path, "species_series", path))


def test_species_series_without_categories(tmp_path):
    path = _write(tmp_path, "species.csv", "date,other\n1 Jan 96,1\n")

    with pytest.raises(DatasetSchemaError):
        load_species_series(_cfg(tmp_path, "species_series", path))


def test_missing_file_raises_resource_load_error(tmp_path):
    cfg = _cfg(tmp_path, "species_series", tmp_path / "nope.csv")

    with pytest.raises(ResourceLoadError) as exc:
        load_species_series(cfg)

    assert exc.value.resource == "test-species_series"


def test_listings_drops_non_numeric_rows(tmp_path):
    path = _write(
        tmp_path,
        "listings.csv",
        "Calendar Year,Number of New Species Listings\n1980,10\nTotal,300\n1981,n/a\n1982,7\n",
    )

    df = load_listings(_cfg(tmp_path, "listings", path))

    assert list(df["year"]) == [1980, 1982]
    assert list(df["listings"]) == [10, 7]


def test_listings_with_custom_columns(tmp_path):
    path = _write(tmp_path, "listings.csv", "yr,n\n1990,3\n")
    cfg = _cfg(tmp_path, "listings", path, columns={"year": "yr", "listings": "n"})

    df = load_listings(cfg)

    assert df.to_dict("records") == [{"year": 1990, "listings": 3}]


def test_state_counts_keep_file_order(tmp_path):
    path = _write(
        tmp_path,
        "states.csv",
        "State,Endangered (Total) 2019\n Texas ,95\nGuam,\nHawaii,438\nOhio,24\n",
    )

    df = load_state_counts(_cfg(tmp_path, "state_counts", path))

    assert list(df["state"]) == ["Texas", "Hawaii", "Ohio"]
    assert list(df["count"]) == [95, 438, 24]


def test_states_geojson_local(tmp_path):
    fc = {"type": "FeatureCollection", "features": [{"type": "Feature", "properties": {"name": "Ohio"}}]}
    path = _write(tmp_path, "states.json", json.dumps(fc))

    assert load_states_geojson(_cfg(tmp_path, "states_geojson", path)) == fc


def test_states_geojson_not_a_feature_collection(tmp_path):
    path = _write(tmp_path, "states.json", json.dumps({"type": "Topology"}))

    with pytest.raises(DatasetSchemaError):
        load_states_geojson(_cfg(tmp_path, "states_geojson", path))


def test_states_geojson_remote_failure(tmp_path, monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(data_loader.requests, "get", boom)
    cfg = _cfg(tmp_path, "states_geojson", "https://example.org/states.json")

    with pytest.raises(ResourceLoadError):
        load_states_geojson(cfg)


def test_resolve_path_prefers_data_root_env(tmp_path, monkeypatch):
    cfg = _cfg(tmp_path, "listings", "listings.csv")

    monkeypatch.delenv(data_loader.DATA_ROOT_ENV, raising=False)
    assert resolve_path(cfg, tmp_path / "config") == tmp_path / "config" / "listings.csv"

    monkeypatch.setenv(data_loader.DATA_ROOT_ENV, str(tmp_path / "data"))
    assert resolve_path(cfg, tmp_path / "config") == tmp_path / "data" / "listings.csv"
