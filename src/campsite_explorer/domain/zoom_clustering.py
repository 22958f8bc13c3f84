# ============================================================
# 📦 src/campsite_explorer/domain/zoom_clustering.py
# ============================================================

from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from campsite_explorer.domain.entities import Campsite, Cluster, ClusteringResult, MapBounds
from campsite_explorer.domain.haversine_utils import haversine, radius_for_zoom


# ============================================================
# 📏 Densidade mínima por faixa de zoom
# ============================================================
def should_promote(n: int, zoom: float) -> bool:
    """
    Decide se um grupo de `n` campings vira cluster no zoom informado.
    Grupos de 1 nunca viram cluster.
    """
    if n <= 1:
        return False
    if zoom < 10:
        return True
    if zoom < 13:
        return n >= 3
    if zoom < 15:
        return n >= 5
    return n >= 8


def _montar_cluster(membros: List[Campsite]) -> Cluster:
    coords = np.array([[c.latitude, c.longitude] for c in membros], dtype=float)
    lats, lngs = coords[:, 0], coords[:, 1]

    return Cluster(
        lat=float(lats.mean()),
        lng=float(lngs.mean()),
        count=len(membros),
        campsites=tuple(membros),
        bounds=MapBounds(
            north=float(lats.max()),
            south=float(lats.min()),
            east=float(lngs.max()),
            west=float(lngs.min()),
        ),
    )


# ============================================================
# 🚀 Algoritmo principal (guloso, passada única)
# ============================================================
def cluster_campsites(
    campsites: Sequence[Campsite],
    zoom: float,
    custom_radius: Optional[float] = None,
) -> ClusteringResult:
    """
    Agrupa campings por proximidade para o zoom atual.

    Percorre os pontos em ordem; cada ponto ainda livre vira semente e
    captura todos os pontos posteriores livres a até `raio` km DELA
    (não há encadeamento entre membros). O grupo vira cluster conforme
    `should_promote`; caso contrário todos os membros viram marcadores
    individuais. O resultado depende da ordem de entrada.
    """
    raio = custom_radius or radius_for_zoom(zoom)

    clusters: List[Cluster] = []
    single_markers: List[Campsite] = []
    processados = set()

    for i, semente in enumerate(campsites):
        if i in processados:
            continue

        processados.add(i)
        proximos = [semente]

        for j in range(i + 1, len(campsites)):
            if j in processados:
                continue

            candidato = campsites[j]
            dist = haversine(semente.latitude, semente.longitude, candidato.latitude, candidato.longitude)
            if dist <= raio:
                proximos.append(candidato)
                processados.add(j)

        if should_promote(len(proximos), zoom):
            clusters.append(_montar_cluster(proximos))
        else:
            single_markers.extend(proximos)

    logger.debug(
        f"🧩 Clusterização | zoom={zoom} | raio={raio} km | pontos={len(campsites)} "
        f"| clusters={len(clusters)} | individuais={len(single_markers)}"
    )

    return ClusteringResult(clusters=clusters, single_markers=single_markers)
