import plotly.graph_objs as go

from esa_browser.config.model import GlobalConfig
from esa_browser.core.chart_data import ChartData
from esa_browser.core.ranking import rank_states
from esa_browser.core.view_state import ViewState
from esa_browser.views.state_map_view import StateMapView


def _feature(name):
    return {
        "type": "Feature",
        "properties": {"name": name},
        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]},
    }


def _make_data(geojson_names=("California", "hawaii ", "Texas", "Puerto Rico")):
    states = rank_states([("Hawaii", 150), ("California", 120), ("Texas", 30)])
    geojson = {"type": "FeatureCollection", "features": [_feature(n) for n in geojson_names]}
    return ChartData(config=GlobalConfig(), states=states, geojson=geojson)


def test_compute_data_joins_by_normalised_name():
    view = StateMapView(_make_data())

    data = view.compute_data(ViewState())

    rows = data["rows"]
    assert list(rows["name"]) == ["California", "Hawaii", "Texas"]
    assert list(rows["feature_name"]) == ["California", "hawaii ", "Texas"]
    assert list(rows["rank"]) == [2, 1, 3]
    assert list(rows["level"]) == ["High", "High", "Low"]
    assert data["max_count"] == 150


def test_unmatched_features_are_excluded():
    view = StateMapView(_make_data())

    data = view.compute_data(ViewState())

    names = [f["properties"]["name"] for f in data["geojson"]["features"]]
    assert "Puerto Rico" not in names
    assert len(names) == 3


def test_no_matching_features_returns_none():
    view = StateMapView(_make_data(geojson_names=("Guam",)))

    assert view.compute_data(ViewState()) is None


def test_render_figure_outlines_selected_state():
    view = StateMapView(_make_data())
    state = ViewState(selected_state="Texas")

    fig = view.render_figure(view.compute_data(state), state)

    choropleth = fig.data[0]
    assert isinstance(choropleth, go.Choropleth)
    assert list(choropleth.marker.line.width) == [1, 1, 2]
    assert choropleth.featureidkey == "properties.name"
    assert list(choropleth.customdata[1][:3]) == ["Hawaii", 1, 150]


def test_unavailable_without_geojson():
    data = _make_data()
    data.geojson = None
    view = StateMapView(data)

    assert not view.available
    assert view.compute_data(ViewState()) is None


def test_feature_without_name_property_is_excluded():
    data = _make_data(geojson_names=("California",))
    data.geojson["features"].append(
        {"type": "Feature", "id": "Texas", "properties": {}, "geometry": None}
    )
    view = StateMapView(data)

    result = view.compute_data(ViewState())

    assert list(result["rows"]["name"]) == ["California"]
    assert len(result["geojson"]["features"]) == 1
