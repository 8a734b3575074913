import pytest

from esa_browser.config.model import GlobalConfig
from esa_browser.core.chart_data import ChartData
from esa_browser.core.view_registry import ViewRegistry
from esa_browser.views import ListingsHistogramView, SpeciesTimelineView


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(SpeciesTimelineView)
    registry.register(ListingsHistogramView)

    data = ChartData(config=GlobalConfig())
    view = registry.create("listings_histogram", data)

    assert isinstance(view, ListingsHistogramView)
    assert view.data is data
    assert registry.all_classes() == [SpeciesTimelineView, ListingsHistogramView]


def test_duplicate_id_rejected():
    registry = ViewRegistry()
    registry.register(SpeciesTimelineView)

    with pytest.raises(ValueError):
        registry.register(SpeciesTimelineView)


def test_non_view_rejected():
    with pytest.raises(TypeError):
        ViewRegistry().register(dict)


def test_unknown_view():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope", ChartData(config=GlobalConfig()))


def test_view_without_id_rejected():
    class Anonymous(SpeciesTimelineView):
        id = None

    with pytest.raises(TypeError):
        ViewRegistry().register(Anonymous)


def test_unavailable_lists_views_without_data():
    registry = ViewRegistry()
    registry.register(SpeciesTimelineView)
    registry.register(ListingsHistogramView)

    data = ChartData(config=GlobalConfig(), bins=[])

    assert registry.unavailable(data) == ["species_timeline"]
    assert "listings_histogram" in registry
    assert list(registry) == ["species_timeline", "listings_histogram"]
