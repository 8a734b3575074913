import json

from esa_browser.config.io import load_global_config
from esa_browser.core.chart_data import ChartData
from esa_browser.core.ranking import Level


def _write_config(root, listings_file="listings.csv"):
    (root / "datasets").mkdir(parents=True)
    (root / "global.json").write_text(json.dumps({"window_size": 5}))
    resources = {
        "a_species.json": {"kind": "species_series", "file": "species.csv"},
        "b_listings.json": {"kind": "listings", "file": listings_file},
        "c_states.json": {"kind": "state_counts", "file": "states.csv"},
        "d_geo.json": {"kind": "states_geojson", "file": "states.json"},
    }
    for name, raw in resources.items():
        raw["name"] = raw["kind"]
        (root / "datasets" / name).write_text(json.dumps(raw))

    (root / "species.csv").write_text(
        "date,endangered_mammals\n1 Jan 96,1\n1 Jan 97,2\nbad,3\n"
    )
    (root / "listings.csv").write_text(
        "Calendar Year,Number of New Species Listings\n1982,3\n1986,4\n"
    )
    (root / "states.csv").write_text(
        "State,Endangered (Total) 2019\nOhio,24\nHawaii,438\n"
    )
    (root / "states.json").write_text(
        json.dumps({"type": "FeatureCollection", "features": []})
    )


def test_chart_data_loads_every_resource(tmp_path):
    _write_config(tmp_path)

    data = ChartData.load(load_global_config(tmp_path))

    assert data.errors == {}
    assert len(data.series) == 2
    assert [(b.start, b.total) for b in data.bins] == [(1980, 3), (1985, 4)]
    assert [(r.name, r.rank) for r in data.states] == [("Hawaii", 1), ("Ohio", 2)]
    assert data.states[0].level is Level.VERY_HIGH
    assert data.geojson["features"] == []
    assert set(data.state_by_key()) == {"hawaii", "ohio"}


def test_failed_resource_is_isolated(tmp_path):
    _write_config(tmp_path, listings_file="missing.csv")

    data = ChartData.load(load_global_config(tmp_path))

    assert data.bins is None
    assert set(data.errors) == {"listings"}
    # Other charts still have their data
    assert data.series is not None
    assert data.states is not None
    assert data.geojson is not None


def test_unconfigured_resource_is_reported(tmp_path):
    _write_config(tmp_path)
    (tmp_path / "datasets" / "d_geo.json").unlink()

    data = ChartData.load(load_global_config(tmp_path))

    assert data.geojson is None
    assert data.errors == {"states_geojson": "not configured"}


def test_non_finite_counts_do_not_take_down_other_charts(tmp_path):
    _write_config(tmp_path)
    (tmp_path / "listings.csv").write_text(
        "Calendar Year,Number of New Species Listings\n1982,inf\n"
    )
    (tmp_path / "species.csv").write_text("date,endangered_mammals\n1 Jan 96,inf\n1 Jan 97,2\n")

    data = ChartData.load(load_global_config(tmp_path))

    # The only listings row is dropped, which leaves nothing to bin
    assert data.bins is None
    assert set(data.errors) == {"listings"}
    assert list(data.series.totals()) == [0, 2]
    assert data.states is not None
    assert data.geojson is not None
