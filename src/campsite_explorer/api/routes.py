# ============================================================
# 📦 src/campsite_explorer/api/routes.py
# ============================================================

import threading
from typing import Dict, Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from campsite_explorer.api.schemas import (
    BoundsSchema,
    CampsiteSchema,
    ClusterFitResponse,
    ClusterSchema,
    ClustersResponse,
)
from campsite_explorer.application.clustering_orchestrator import (
    ClusteringOrchestrator,
    cluster_fit_bounds,
)
from campsite_explorer.config import CLUSTER_CLICK_MAX_ZOOM, CLUSTER_CLICK_PADDING_PX, DATASET_PATH
from campsite_explorer.domain.entities import Campsite, MapBounds
from campsite_explorer.infrastructure.dataset_loader import carregar_campsites
from campsite_explorer.infrastructure.map_view import InMemoryMapView

router = APIRouter()

_lock = threading.Lock()
_pool: Optional["OrchestratorPool"] = None


# ============================================================
# 🔧 Orquestradores do processo (um por raio)
# ============================================================
class OrchestratorPool:
    """
    Um orquestrador por raio informado na requisição.
    O cache de clusters é por (zoom, quantidade) e não enxerga o raio,
    então raios diferentes não podem dividir o mesmo orquestrador.
    """

    def __init__(self, campsites: Sequence[Campsite]):
        self.campsites = campsites
        self._por_raio: Dict[Optional[float], ClusteringOrchestrator] = {}

    def para_raio(self, radius: Optional[float]) -> ClusteringOrchestrator:
        if radius not in self._por_raio:
            logger.debug(f"🧩 Novo orquestrador para raio={radius or 'tabela por zoom'}")
            self._por_raio[radius] = ClusteringOrchestrator(self.campsites, cluster_radius=radius)
        return self._por_raio[radius]

    def __len__(self) -> int:
        return len(self._por_raio)


def get_pool() -> OrchestratorPool:
    global _pool
    with _lock:
        if _pool is None:
            logger.info(f"📦 Carregando dataset para a API: {DATASET_PATH}")
            _pool = OrchestratorPool(carregar_campsites(DATASET_PATH))
        return _pool


def _montar_bounds(north, south, east, west) -> Optional[MapBounds]:
    informados = [v is not None for v in (north, south, east, west)]
    if not any(informados):
        return None
    if not all(informados):
        raise HTTPException(400, "Informe north, south, east e west juntos.")
    if south > north:
        raise HTTPException(400, f"Bounds inválidos: south ({south}) > north ({north}).")
    return MapBounds(north=north, south=south, east=east, west=west)


# ============================================================
# 🧠 Health
# ============================================================
@router.get("/health", tags=["Status"])
def health():
    return {"status": "ok", "message": "Campsite Explorer API saudável 🏕️"}


# ============================================================
# 🧩 Clusters visíveis
# ============================================================
@router.get("/clusters", response_model=ClustersResponse, tags=["Clusterização"])
def listar_clusters(
    zoom: float = Query(..., ge=0, le=22),
    north: Optional[float] = Query(None, ge=-90, le=90),
    south: Optional[float] = Query(None, ge=-90, le=90),
    east: Optional[float] = Query(None, ge=-180, le=180),
    west: Optional[float] = Query(None, ge=-180, le=180),
    radius: Optional[float] = Query(None, gt=0),
    pool: OrchestratorPool = Depends(get_pool),
):
    bounds = _montar_bounds(north, south, east, west)

    with _lock:
        orchestrator = pool.para_raio(radius)
        orchestrator.apply_view(zoom, bounds)

        indices = {id(c): i for i, c in enumerate(orchestrator.all_items.clusters)}
        visiveis = orchestrator.visible_items

    return ClustersResponse(
        zoom=zoom,
        bounds=BoundsSchema.from_entity(bounds) if bounds else None,
        clusters=[ClusterSchema.from_entity(indices[id(c)], c) for c in visiveis.visible_clusters],
        single_markers=[CampsiteSchema.from_entity(m) for m in visiveis.visible_markers],
    )


# ============================================================
# 🔎 Enquadramento ao clicar num cluster
# ============================================================
@router.get("/clusters/{index}/fit", response_model=ClusterFitResponse, tags=["Clusterização"])
def enquadrar_cluster(
    index: int,
    zoom: float = Query(..., ge=0, le=22),
    radius: Optional[float] = Query(None, gt=0),
    width: int = Query(1024, ge=64, le=8192),
    height: int = Query(768, ge=64, le=8192),
    pool: OrchestratorPool = Depends(get_pool),
):
    with _lock:
        orchestrator = pool.para_raio(radius)
        orchestrator.apply_view(zoom, None)
        clusters = orchestrator.all_items.clusters

    if index < 0 or index >= len(clusters):
        raise HTTPException(404, f"Cluster {index} não encontrado no zoom {zoom} ({len(clusters)} clusters).")

    padded = cluster_fit_bounds(clusters[index])

    mapa = InMemoryMapView(width=width, height=height)
    mapa.fit_bounds(padded, padding=CLUSTER_CLICK_PADDING_PX, max_zoom=CLUSTER_CLICK_MAX_ZOOM)

    return ClusterFitResponse(
        index=index,
        bounds=BoundsSchema.from_entity(padded),
        max_zoom=CLUSTER_CLICK_MAX_ZOOM,
        target_zoom=mapa.get_zoom(),
        center=[mapa.center[0], mapa.center[1]],
    )
