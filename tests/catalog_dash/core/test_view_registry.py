import pytest

from catalog_dash.core.view_registry import ViewRegistry
from catalog_dash.views import TopCountriesView, TitlesPerYearView


def test_register_and_create_with_options():
    registry = ViewRegistry()
    registry.register(TitlesPerYearView)
    registry.register(TopCountriesView)

    assert registry.ids() == ["titles-per-year", "top-countries"]
    assert "top-countries" in registry
    assert len(registry) == 2

    view = registry.create("top-countries", top_n=3)
    assert isinstance(view, TopCountriesView)
    assert view.top_n == 3


def test_duplicate_id_rejected():
    registry = ViewRegistry()
    registry.register(TitlesPerYearView)

    with pytest.raises(ValueError):
        registry.register(TitlesPerYearView)


def test_non_view_rejected():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(dict)


def test_unknown_view_id():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope")
