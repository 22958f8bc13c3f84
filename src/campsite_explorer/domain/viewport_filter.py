# ============================================================
# 📦 src/campsite_explorer/domain/viewport_filter.py
# ============================================================

from typing import Sequence

from campsite_explorer.domain.entities import Campsite, Cluster, MapBounds, VisibleItems


def is_inside(lat: float, lng: float, bounds: MapBounds) -> bool:
    """Intervalo fechado: ponto na borda conta como visível."""
    return bounds.south <= lat <= bounds.north and bounds.west <= lng <= bounds.east


def filter_visible_items(
    clusters: Sequence[Cluster],
    single_markers: Sequence[Campsite],
    bounds: MapBounds,
) -> VisibleItems:
    """
    Mantém apenas o que cai dentro do viewport.
    Clusters são testados pelo centróide, não pelos limites dos membros.
    """
    return VisibleItems(
        visible_clusters=[c for c in clusters if is_inside(c.lat, c.lng, bounds)],
        visible_markers=[m for m in single_markers if is_inside(m.latitude, m.longitude, bounds)],
    )
