# ==========================================================
# 📦 src/campsite_explorer/domain/entities.py
# ==========================================================

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Campsite:
    """Representa um camping (registro estático do dataset)."""
    location_name: str
    site_name: str
    type: str
    latitude: float
    longitude: float

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


# ==========================================================
# 🧭 Retângulo geográfico (viewport ou limites de cluster)
# ==========================================================
@dataclass(frozen=True)
class MapBounds:
    north: float
    south: float
    east: float
    west: float

    def padded(self, graus: float) -> "MapBounds":
        """Retorna um novo retângulo expandido `graus` em cada lado."""
        return MapBounds(
            north=self.north + graus,
            south=self.south - graus,
            east=self.east + graus,
            west=self.west - graus,
        )

    def as_corners(self) -> List[List[float]]:
        """Formato [[sul, oeste], [norte, leste]] usado pelo Leaflet/folium."""
        return [[self.south, self.west], [self.north, self.east]]


# ==========================================================
# 🗺️ Cluster (agregado transitório de uma passada)
# ==========================================================
@dataclass(frozen=True, eq=False)
class Cluster:
    """
    Agrupamento de campings próximos para o zoom atual.
    - lat/lng: centróide (média aritmética dos membros)
    - campsites: membros em ordem de descoberta
    - bounds: min/max de lat/lng dos membros
    Não há identidade entre passadas: comparação é sempre por referência.
    """
    lat: float
    lng: float
    count: int
    campsites: Tuple[Campsite, ...]
    bounds: MapBounds


@dataclass(frozen=True)
class ClusteringResult:
    clusters: List[Cluster] = field(default_factory=list)
    single_markers: List[Campsite] = field(default_factory=list)


@dataclass(frozen=True)
class VisibleItems:
    visible_clusters: List[Cluster] = field(default_factory=list)
    visible_markers: List[Campsite] = field(default_factory=list)
