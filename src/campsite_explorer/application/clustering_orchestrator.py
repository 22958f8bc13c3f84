# ============================================================
# 📦 src/campsite_explorer/application/clustering_orchestrator.py
# ============================================================

import time
from typing import Callable, List, Optional, Sequence

from loguru import logger

from campsite_explorer.config import (
    CACHE_MAX_ENTRIES,
    CLUSTER_CLICK_MAX_ZOOM,
    CLUSTER_CLICK_PADDING_DEG,
    CLUSTER_CLICK_PADDING_PX,
    INITIAL_ZOOM,
    THROTTLE_INTERVAL_MS,
)
from campsite_explorer.domain.entities import (
    Campsite,
    Cluster,
    ClusteringResult,
    MapBounds,
    VisibleItems,
)
from campsite_explorer.domain.viewport_filter import filter_visible_items
from campsite_explorer.domain.zoom_clustering import cluster_campsites
from campsite_explorer.infrastructure.cluster_cache import ClusterCache
from campsite_explorer.infrastructure.map_view import MapView
from campsite_explorer.infrastructure.throttle import Throttle

EVENTOS_MAPA = ("zoomend", "moveend")


def cluster_fit_bounds(cluster: Cluster) -> MapBounds:
    """Limites do cluster com folga de 0.01° em cada lado."""
    return cluster.bounds.padded(CLUSTER_CLICK_PADDING_DEG)


class ClusteringOrchestrator:
    """
    Coordena clusterização e mapa para UMA instância de mapa.

    - zoom/bounds são lidos do mapa nos eventos zoomend/moveend, com throttle
      (leading edge, descarta chamadas na janela).
    - O motor de clusterização só roda quando (lista de campings, zoom) muda;
      mudança só de bounds reaplica apenas o filtro de viewport.
    - Resultados ficam num cache próprio por (zoom, quantidade de pontos).
    """

    def __init__(
        self,
        campsites: Sequence[Campsite],
        map_view: Optional[MapView] = None,
        cluster_radius: Optional[float] = None,
        cache_size: int = CACHE_MAX_ENTRIES,
        throttle_ms: float = THROTTLE_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.campsites = campsites
        self.cluster_radius = cluster_radius

        self.zoom: float = INITIAL_ZOOM
        self.bounds: Optional[MapBounds] = None
        self.is_loading = False

        self._cache: ClusterCache[ClusteringResult] = ClusterCache(max_size=cache_size)
        self._memo_key = None
        self._memo_result: Optional[ClusteringResult] = None
        self._visiveis_key = None
        self._visiveis: Optional[VisibleItems] = None

        self._map: Optional[MapView] = None
        self._update_map_state = Throttle(self._read_map_state, throttle_ms, clock)

        if map_view is not None:
            self.attach(map_view)

    # ============================================================
    # 🔌 Ligação com o mapa
    # ============================================================
    def attach(self, map_view: MapView) -> None:
        """Assina os eventos do mapa e faz a leitura inicial de zoom/bounds."""
        if self._map is not None:
            self.detach()

        self._map = map_view
        # mapa novo sempre faz a leitura inicial, mesmo dentro da janela do throttle
        self._update_map_state.reset()
        self.update_map_state()
        for evento in EVENTOS_MAPA:
            map_view.on(evento, self._on_map_event)

        logger.info(f"🗺️ Orquestrador ligado ao mapa | zoom={self.zoom}")

    def detach(self) -> None:
        if self._map is None:
            return
        for evento in EVENTOS_MAPA:
            self._map.off(evento, self._on_map_event)
        self._map = None

    def _on_map_event(self) -> None:
        self.update_map_state()

    def _read_map_state(self) -> None:
        if self._map is None:
            return
        self.zoom = self._map.get_zoom()
        self.bounds = self._map.get_bounds()

    def update_map_state(self) -> bool:
        """Leitura com throttle. Retorna False quando a chamada foi descartada."""
        return self._update_map_state()

    def apply_view(self, zoom: float, bounds: Optional[MapBounds]) -> None:
        """Aplica um snapshot de zoom/bounds vindo de fora (ex.: API), sem throttle."""
        self.zoom = zoom
        self.bounds = bounds

    # ============================================================
    # 📦 Conjunto de campings
    # ============================================================
    def set_campsites(self, campsites: Sequence[Campsite]) -> None:
        """Troca o dataset; nova lista (por identidade) invalida o cache inteiro."""
        if campsites is self.campsites:
            return
        self.campsites = campsites
        self._cache.clear()
        logger.info(f"🔄 Dataset trocado ({len(campsites)} campings) — cache limpo.")

    @property
    def cache(self) -> ClusterCache[ClusteringResult]:
        return self._cache

    # ============================================================
    # 🧩 Clusterização (memo + cache)
    # ============================================================
    def _calcular(self) -> ClusteringResult:
        if len(self.campsites) == 0:
            return ClusteringResult()

        cached = self._cache.get(self.zoom, len(self.campsites))
        if cached is not None:
            logger.debug(f"♻️ Cache hit | zoom={self.zoom} | n={len(self.campsites)}")
            return cached

        self.is_loading = True
        try:
            result = cluster_campsites(self.campsites, self.zoom, self.cluster_radius)
        finally:
            self.is_loading = False

        self._cache.set(self.zoom, len(self.campsites), result)
        return result

    def _memo_valido(self) -> bool:
        if self._memo_key is None or self._memo_result is None:
            return False
        campsites, zoom, raio = self._memo_key
        return campsites is self.campsites and zoom == self.zoom and raio == self.cluster_radius

    @property
    def all_items(self) -> ClusteringResult:
        """Clusters e individuais de todo o dataset no zoom atual."""
        if not self._memo_valido():
            self._memo_result = self._calcular()
            self._memo_key = (self.campsites, self.zoom, self.cluster_radius)
        return self._memo_result

    def _filtrar(self, todos: ClusteringResult) -> VisibleItems:
        if self.bounds is None:
            return VisibleItems(
                visible_clusters=list(todos.clusters),
                visible_markers=list(todos.single_markers),
            )
        return filter_visible_items(todos.clusters, todos.single_markers, self.bounds)

    @property
    def visible_items(self) -> VisibleItems:
        """Filtro de viewport memoizado em (resultado da clusterização, bounds)."""
        todos = self.all_items
        if (
            self._visiveis is None
            or self._visiveis_key[0] is not todos
            or self._visiveis_key[1] != self.bounds
        ):
            self._visiveis = self._filtrar(todos)
            self._visiveis_key = (todos, self.bounds)
        return self._visiveis

    @property
    def clusters(self) -> List[Cluster]:
        return self.visible_items.visible_clusters

    @property
    def single_markers(self) -> List[Campsite]:
        return self.visible_items.visible_markers

    # ============================================================
    # 🎯 Ações
    # ============================================================
    def handle_cluster_click(self, cluster: Cluster) -> Optional[MapBounds]:
        """
        Enquadra o mapa nos limites do cluster com folga de 0.01° e zoom
        máximo 18. Sem mapa ligado, não faz nada.
        """
        if self._map is None:
            logger.warning("⚠️ Clique em cluster ignorado: nenhum mapa ligado.")
            return None

        padded = cluster_fit_bounds(cluster)
        self._map.fit_bounds(padded, padding=CLUSTER_CLICK_PADDING_PX, max_zoom=CLUSTER_CLICK_MAX_ZOOM)
        logger.info(f"🔎 Zoom no cluster ({cluster.count} campings) | bounds={padded}")
        return padded

    def refresh_clusters(self) -> None:
        """Limpa o cache e relê zoom/bounds imediatamente, sem throttle."""
        self._cache.clear()
        self._memo_key = None
        self._memo_result = None
        self._update_map_state.reset()
        self.update_map_state()
        logger.info("🔄 Clusters atualizados manualmente (cache limpo).")
