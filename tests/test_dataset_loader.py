import json

import pytest

from campsite_explorer.infrastructure.dataset_loader import carregar_campsites, parse_campsite


def _registro(lat, lng, **extra):
    base = {
        "location_name": "Lewey Lake",
        "site_name": "Site 12",
        "type": "tent",
        "coordinates": {"latitude": lat, "longitude": lng},
    }
    base.update(extra)
    return base


class TestParseCampsite:
    def test_valid_record(self):
        c = parse_campsite(_registro(43.64, -74.39))
        assert c.location_name == "Lewey Lake"
        assert c.site_name == "Site 12"
        assert c.type == "tent"
        assert c.coords == (43.64, -74.39)

    @pytest.mark.parametrize(
        "lat, lng",
        [(None, -74.0), (43.0, None), (91.0, 0.0), (0.0, -180.5), ("43", "-74"), (float("nan"), 0.0), (True, 0.0)],
    )
    def test_invalid_coordinates(self, lat, lng):
        assert parse_campsite(_registro(lat, lng)) is None

    def test_missing_coordinates_block(self):
        assert parse_campsite({"site_name": "x"}) is None
        assert parse_campsite({"coordinates": [43.0, -74.0]}) is None


class TestCarregarCampsites:
    def test_loads_dataset(self, dataset_file, sample_campsites):
        assert carregar_campsites(dataset_file) == sample_campsites

    def test_skips_invalid_records(self, tmp_path):
        path = tmp_path / "mixed.json"
        path.write_text(
            json.dumps([_registro(43.0, -74.0), _registro(float("nan"), -74.0), "lixo", _registro(200, 0)]),
            encoding="utf-8",
        )
        campsites = carregar_campsites(path)
        assert len(campsites) == 1
        assert campsites[0].coords == (43.0, -74.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            carregar_campsites(tmp_path / "nao_existe.json")

    def test_payload_must_be_a_list(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text(json.dumps({"campsites": []}), encoding="utf-8")
        with pytest.raises(ValueError):
            carregar_campsites(path)
