import pytest

from campsite_explorer.domain.entities import MapBounds
from campsite_explorer.infrastructure.map_view import InMemoryMapView


def _contem(externo: MapBounds, interno: MapBounds, tol=1e-9) -> bool:
    return (
        externo.north >= interno.north - tol
        and externo.south <= interno.south + tol
        and externo.east >= interno.east - tol
        and externo.west <= interno.west + tol
    )


class TestInMemoryMapView:
    def test_bounds_surround_center(self):
        mapa = InMemoryMapView(center=(43.37, -74.73), zoom=12)
        b = mapa.get_bounds()
        assert b.south < 43.37 < b.north
        assert b.west < -74.73 < b.east

    def test_higher_zoom_shrinks_bounds(self):
        b10 = InMemoryMapView(center=(43.0, -74.0), zoom=10).get_bounds()
        b12 = InMemoryMapView(center=(43.0, -74.0), zoom=12).get_bounds()
        assert _contem(b10, b12)
        assert (b10.east - b10.west) == pytest.approx(4 * (b12.east - b12.west))

    def test_events_on_view_change(self):
        mapa = InMemoryMapView(zoom=10)
        eventos = []
        mapa.on("moveend", lambda: eventos.append("moveend"))
        mapa.on("zoomend", lambda: eventos.append("zoomend"))

        mapa.pan_to((43.0, -74.0))
        assert eventos == ["moveend"]

        mapa.set_view((43.0, -74.0), 12)
        assert eventos == ["moveend", "moveend", "zoomend"]

    def test_off_removes_handler(self):
        mapa = InMemoryMapView()
        eventos = []
        handler = lambda: eventos.append(1)  # noqa: E731
        mapa.on("moveend", handler)
        mapa.off("moveend", handler)
        mapa.pan_to((40.0, -70.0))
        assert eventos == []
        assert mapa.handler_count("moveend") == 0

    def test_unknown_event_rejected(self):
        with pytest.raises(ValueError):
            InMemoryMapView().on("click", lambda: None)

    def test_fit_bounds_caps_at_max_zoom(self):
        mapa = InMemoryMapView(zoom=5)
        alvo = MapBounds(north=43.0001, south=43.0, east=-74.0, west=-74.0001)
        mapa.fit_bounds(alvo, max_zoom=18)
        assert mapa.get_zoom() == 18

    def test_fit_bounds_contains_target(self):
        mapa = InMemoryMapView(zoom=15)
        alvo = MapBounds(north=45.0, south=40.5, east=-71.8, west=-79.8)
        mapa.fit_bounds(alvo, padding=(20, 20), max_zoom=18)
        assert mapa.get_zoom() < 10
        assert _contem(mapa.get_bounds(), alvo)
