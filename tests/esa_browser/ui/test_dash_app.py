import json

from dash import Dash

from esa_browser.ui.dash_app import create_dash_app
from esa_browser.ui.ids import IDs


def _write_config(root, with_geojson=True):
    (root / "datasets").mkdir(parents=True)
    (root / "global.json").write_text(json.dumps({"ui_title": "ESA test", "window_size": 2}))
    resources = [
        {"kind": "species_series", "file": "species.csv"},
        {"kind": "listings", "file": "listings.csv"},
        {"kind": "state_counts", "file": "states.csv"},
    ]
    if with_geojson:
        resources.append({"kind": "states_geojson", "file": "states.json"})
    for raw in resources:
        raw["name"] = raw["kind"]
        (root / "datasets" / f"{raw['kind']}.json").write_text(json.dumps(raw))

    (root / "species.csv").write_text(
        "date,endangered_mammals,endangered_birds\n1 Jan 96,1,2\n1 Jan 97,2,2\n1 Jan 98,3,1\n"
    )
    (root / "listings.csv").write_text(
        "Calendar Year,Number of New Species Listings\n1982,3\n1986,4\n"
    )
    (root / "states.csv").write_text("State,Endangered (Total) 2019\nOhio,24\nHawaii,438\n")
    (root / "states.json").write_text(json.dumps({"type": "FeatureCollection", "features": []}))


def _component_ids(component):
    found = set()
    stack = [component]
    while stack:
        node = stack.pop()
        if isinstance(node, (list, tuple)):
            stack.extend(node)
            continue
        if node is None or isinstance(node, (str, int, float)):
            continue
        cid = getattr(node, "id", None)
        if isinstance(cid, str):
            found.add(cid)
        stack.append(getattr(node, "children", None))
    return found


def test_create_dash_app(tmp_path):
    _write_config(tmp_path)

    app = create_dash_app(tmp_path)

    assert isinstance(app, Dash)
    assert app.title == "ESA test"

    ids = _component_ids(app.layout)
    for expected in (
        IDs.Store.TIMELINE_STATE,
        IDs.Control.TIMELINE_GRAPH,
        IDs.Control.PLAY_INTERVAL,
        IDs.Control.HISTOGRAM_GRAPH,
        IDs.Control.MAP_GRAPH,
    ):
        assert expected in ids


def test_create_dash_app_with_missing_resource(tmp_path):
    _write_config(tmp_path, with_geojson=False)

    app = create_dash_app(tmp_path)

    assert isinstance(app, Dash)
    assert IDs.Control.MAP_GRAPH in _component_ids(app.layout)
