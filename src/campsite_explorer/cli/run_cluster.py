#campsite_explorer/src/campsite_explorer/cli/run_cluster.py

# ============================================================
# 📦 src/campsite_explorer/cli/run_cluster.py
# ============================================================

import argparse
import sys
import uuid
from pathlib import Path

from loguru import logger

from campsite_explorer.application.clustering_orchestrator import ClusteringOrchestrator
from campsite_explorer.config import DATASET_PATH, LOG_LEVEL, OUTPUT_DIR
from campsite_explorer.domain.entities import MapBounds
from campsite_explorer.infrastructure.dataset_loader import carregar_campsites
from campsite_explorer.reporting.export_cluster_resumo import exportar_resumo_clusters
from campsite_explorer.visualization.cluster_plotting import gerar_mapa_clusters


def validar_zoom(zoom: float) -> float:
    if not 0 <= zoom <= 22:
        raise ValueError(f"Zoom inválido: {zoom} (esperado entre 0 e 22)")
    return zoom


def validar_bounds(north, south, east, west):
    valores = (north, south, east, west)
    if all(v is None for v in valores):
        return None
    if any(v is None for v in valores):
        raise ValueError("Bounds incompletos: informe --north, --south, --east e --west.")
    if south > north:
        raise ValueError(f"Bounds inválidos: south ({south}) > north ({north}).")
    return MapBounds(north=north, south=south, east=east, west=west)


def main(argv=None):

    parser = argparse.ArgumentParser(
        description="Clusterização de campings por zoom/viewport (Campsite Explorer)"
    )

    parser.add_argument("--dataset", default=DATASET_PATH, help="JSON com a lista de campings")
    parser.add_argument("--zoom", type=float, required=True)

    # Viewport (opcional — sem ele, tudo é considerado visível)
    parser.add_argument("--north", type=float)
    parser.add_argument("--south", type=float)
    parser.add_argument("--east", type=float)
    parser.add_argument("--west", type=float)

    parser.add_argument("--radius", type=float, help="Raio fixo em km (ignora a tabela por zoom)")
    parser.add_argument("--mapa", action="store_true", help="Gera mapa HTML (folium)")
    parser.add_argument("--relatorio", choices=["csv", "xlsx"], help="Exporta resumo dos clusters")
    parser.add_argument("--nome", help="Identificador das saídas (padrão: UUID)")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stdout, colorize=True, level=LOG_LEVEL,
               format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    # ============================================================
    # Validações
    # ============================================================
    zoom = validar_zoom(args.zoom)
    bounds = validar_bounds(args.north, args.south, args.east, args.west)
    nome = args.nome or str(uuid.uuid4())

    logger.info("==============================================")
    logger.info("🚀 Iniciando clusterização via CLI")
    logger.info("==============================================")
    logger.info(f"📦 dataset    = {args.dataset}")
    logger.info(f"🔍 zoom       = {zoom}")
    logger.info(f"🧭 bounds     = {bounds or 'ALL'}")
    logger.info(f"📏 raio (km)  = {args.radius or 'tabela por zoom'}")
    logger.info(f"🆔 nome       = {nome}")

    # ============================================================
    # Execução
    # ============================================================
    campsites = carregar_campsites(args.dataset)

    orchestrator = ClusteringOrchestrator(campsites, cluster_radius=args.radius)
    orchestrator.apply_view(zoom, bounds)

    todos = orchestrator.all_items
    visiveis = orchestrator.visible_items

    if args.mapa:
        gerar_mapa_clusters(visiveis, Path(OUTPUT_DIR) / "maps" / f"clusters_{nome}.html", bounds=bounds, zoom=zoom)

    if args.relatorio:
        exportar_resumo_clusters(visiveis.visible_clusters, nome, formato=args.relatorio)

    print("\n=== RESULTADO FINAL ===")
    print(f"campings: {len(campsites)}")
    print(f"clusters: {len(todos.clusters)} (visíveis: {len(visiveis.visible_clusters)})")
    print(f"individuais: {len(todos.single_markers)} (visíveis: {len(visiveis.visible_markers)})")
    for i, c in enumerate(visiveis.visible_clusters):
        print(f"  [{i}] {c.count:>4} campings @ ({c.lat:.5f}, {c.lng:.5f})")

    return visiveis


if __name__ == "__main__":
    main()
