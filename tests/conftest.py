import json
import sys

import pytest
from loguru import logger

from campsite_explorer.domain.entities import Campsite


class FakeClock:
    """Relógio manual (segundos) para testes de throttle."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


def make_campsite(lat, lng, name="Site", type_="tent", location="Test Lake"):
    return Campsite(location_name=location, site_name=name, type=type_, latitude=lat, longitude=lng)


def line_of_campsites(n, lat=43.0, lng=-74.0, step_deg=0.0001, prefix="Site"):
    """n campings em linha norte-sul, `step_deg` graus de latitude entre vizinhos."""
    return [make_campsite(lat + i * step_deg, lng, name=f"{prefix} {i}") for i in range(n)]


@pytest.fixture(autouse=True)
def _restaurar_logger():
    # a CLI troca os handlers do loguru; volta ao padrão após cada teste
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sample_campsites():
    # dois grupos bem separados + um isolado
    grupo_a = line_of_campsites(5, lat=43.46, lng=-74.48, prefix="A")
    grupo_b = line_of_campsites(4, lat=43.64, lng=-74.39, prefix="B")
    isolado = [make_campsite(42.0, -76.0, name="Lonely")]
    return grupo_a + grupo_b + isolado


@pytest.fixture
def dataset_file(tmp_path, sample_campsites):
    payload = [
        {
            "location_name": c.location_name,
            "site_name": c.site_name,
            "type": c.type,
            "coordinates": {"latitude": c.latitude, "longitude": c.longitude},
        }
        for c in sample_campsites
    ]
    path = tmp_path / "campsites.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
