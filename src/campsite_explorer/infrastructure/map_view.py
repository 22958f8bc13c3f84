# ============================================================
# 📦 src/campsite_explorer/infrastructure/map_view.py
# ============================================================

import math
from typing import Callable, Dict, List, Protocol, Tuple

from loguru import logger

from campsite_explorer.config import DEFAULT_CENTER, DEFAULT_ZOOM
from campsite_explorer.domain.entities import MapBounds

TILE_SIZE = 256
MERCATOR_LAT_BOUND = 85.05112878
EVENTOS_SUPORTADOS = ("zoomend", "moveend")


class MapView(Protocol):
    """Contrato mínimo do mapa consumido pelo orquestrador de clusters."""

    def get_zoom(self) -> float: ...

    def get_bounds(self) -> MapBounds: ...

    def fit_bounds(self, bounds: MapBounds, padding: Tuple[int, int] = (0, 0), max_zoom: int = 18) -> None: ...

    def on(self, evento: str, handler: Callable[[], None]) -> None: ...

    def off(self, evento: str, handler: Callable[[], None]) -> None: ...


# ------------------------------------------------------------
# 🌍 Web Mercator (pixels globais ↔ lat/lng)
# ------------------------------------------------------------
def _tamanho_mundo(zoom: float) -> float:
    return TILE_SIZE * (2 ** zoom)


def _projetar(lat: float, lng: float, zoom: float) -> Tuple[float, float]:
    lat = max(-MERCATOR_LAT_BOUND, min(MERCATOR_LAT_BOUND, lat))
    mundo = _tamanho_mundo(zoom)
    x = (lng + 180.0) / 360.0 * mundo
    sin_lat = math.sin(math.radians(lat))
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * mundo
    return x, y


def _desprojetar(x: float, y: float, zoom: float) -> Tuple[float, float]:
    mundo = _tamanho_mundo(zoom)
    lng = x / mundo * 360.0 - 180.0
    n = math.pi * (1 - 2 * y / mundo)
    lat = math.degrees(math.atan(math.sinh(n)))
    return lat, lng


# ============================================================
# 🗺️ Mapa headless (CLI, API e testes)
# ============================================================
class InMemoryMapView:
    """
    Implementação em memória do mapa: guarda centro, zoom e tamanho do
    viewport em pixels e deriva os limites via Web Mercator.
    Dispara "moveend"/"zoomend" de forma síncrona a cada mudança de vista.
    """

    def __init__(
        self,
        center: Tuple[float, float] = DEFAULT_CENTER,
        zoom: int = DEFAULT_ZOOM,
        width: int = 1024,
        height: int = 768,
        min_zoom: int = 0,
    ):
        self.center = center
        self.zoom = zoom
        self.width = width
        self.height = height
        self.min_zoom = min_zoom
        self._handlers: Dict[str, List[Callable[[], None]]] = {e: [] for e in EVENTOS_SUPORTADOS}

    # --------------------------------------------------------
    # 🔌 Eventos
    # --------------------------------------------------------
    def on(self, evento: str, handler: Callable[[], None]) -> None:
        if evento not in self._handlers:
            raise ValueError(f"Evento não suportado: {evento}")
        self._handlers[evento].append(handler)

    def off(self, evento: str, handler: Callable[[], None]) -> None:
        if handler in self._handlers.get(evento, []):
            self._handlers[evento].remove(handler)

    def handler_count(self, evento: str) -> int:
        return len(self._handlers.get(evento, []))

    def _fire(self, evento: str) -> None:
        for handler in list(self._handlers[evento]):
            handler()

    # --------------------------------------------------------
    # 🔍 Leitura
    # --------------------------------------------------------
    def get_zoom(self) -> float:
        return self.zoom

    def get_bounds(self) -> MapBounds:
        cx, cy = _projetar(self.center[0], self.center[1], self.zoom)
        north, west = _desprojetar(cx - self.width / 2, cy - self.height / 2, self.zoom)
        south, east = _desprojetar(cx + self.width / 2, cy + self.height / 2, self.zoom)
        return MapBounds(north=north, south=south, east=east, west=west)

    # --------------------------------------------------------
    # 🎮 Gestos simulados
    # --------------------------------------------------------
    def set_view(self, center: Tuple[float, float], zoom: int) -> None:
        zoom_mudou = zoom != self.zoom
        self.center = center
        self.zoom = zoom
        self._fire("moveend")
        if zoom_mudou:
            self._fire("zoomend")

    def pan_to(self, center: Tuple[float, float]) -> None:
        self.set_view(center, self.zoom)

    def fit_bounds(self, bounds: MapBounds, padding: Tuple[int, int] = (0, 0), max_zoom: int = 18) -> None:
        """
        Escolhe o maior zoom inteiro (≤ max_zoom) em que `bounds` cabe no
        viewport descontando `padding` (px) de cada lado, e centraliza.
        """
        largura_util = max(1, self.width - 2 * padding[0])
        altura_util = max(1, self.height - 2 * padding[1])

        zoom = self.min_zoom
        for z in range(int(max_zoom), self.min_zoom - 1, -1):
            x_oeste, y_norte = _projetar(bounds.north, bounds.west, z)
            x_leste, y_sul = _projetar(bounds.south, bounds.east, z)
            if (x_leste - x_oeste) <= largura_util and (y_sul - y_norte) <= altura_util:
                zoom = z
                break

        x_oeste, y_norte = _projetar(bounds.north, bounds.west, zoom)
        x_leste, y_sul = _projetar(bounds.south, bounds.east, zoom)
        centro = _desprojetar((x_oeste + x_leste) / 2, (y_norte + y_sul) / 2, zoom)

        logger.debug(f"🔎 fit_bounds → zoom={zoom} | centro=({centro[0]:.5f}, {centro[1]:.5f})")
        self.set_view(centro, zoom)
