# ============================================================
# 📦 src/campsite_explorer/reporting/export_cluster_resumo.py
# ============================================================

import os
from collections import Counter
from typing import Sequence

import pandas as pd
from loguru import logger

from campsite_explorer.config import OUTPUT_DIR
from campsite_explorer.domain.entities import Cluster
from campsite_explorer.domain.haversine_utils import haversine

COLUNAS = [
    "Cluster",
    "Campings",
    "Latitude centro",
    "Longitude centro",
    "Norte",
    "Sul",
    "Leste",
    "Oeste",
    "Diagonal (km)",
    "Tipo predominante",
]


def montar_resumo_clusters(clusters: Sequence[Cluster]) -> pd.DataFrame:
    """Uma linha por cluster, na ordem de descoberta."""
    linhas = []
    for idx, cluster in enumerate(clusters):
        b = cluster.bounds
        tipos = Counter(c.type for c in cluster.campsites if c.type)
        linhas.append(
            {
                "Cluster": idx,
                "Campings": cluster.count,
                "Latitude centro": round(cluster.lat, 6),
                "Longitude centro": round(cluster.lng, 6),
                "Norte": b.north,
                "Sul": b.south,
                "Leste": b.east,
                "Oeste": b.west,
                "Diagonal (km)": round(haversine(b.south, b.west, b.north, b.east), 3),
                "Tipo predominante": tipos.most_common(1)[0][0] if tipos else None,
            }
        )
    return pd.DataFrame(linhas, columns=COLUNAS)


def exportar_resumo_clusters(
    clusters: Sequence[Cluster],
    nome: str,
    formato: str = "xlsx",
    output_dir: str = os.path.join(OUTPUT_DIR, "reports"),
) -> str:
    """Exporta o resumo em CSV (;) ou XLSX com cabeçalho em negrito e congelado."""
    if formato not in ("csv", "xlsx"):
        raise ValueError(f"Formato inválido: {formato} (use csv ou xlsx)")

    df = montar_resumo_clusters(clusters)
    if df.empty:
        logger.warning("⚠️ Nenhum cluster para exportar — relatório sairá vazio.")

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"cluster_resumo_{nome}.{formato}")

    if formato == "csv":
        df.to_csv(output_path, index=False, sep=";", encoding="utf-8-sig")
    else:
        from openpyxl.styles import Alignment, Font
        from openpyxl.utils import get_column_letter

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Resumo por Cluster", index=False)

            ws = writer.book["Resumo por Cluster"]
            ws.freeze_panes = "A2"

            for cell in ws[1]:
                cell.font = Font(bold=True)
                cell.alignment = Alignment(horizontal="center", vertical="center")

            for col_idx, coluna in enumerate(COLUNAS, start=1):
                ws.column_dimensions[get_column_letter(col_idx)].width = max(12, len(coluna) + 4)

    logger.success(f"✅ Resumo de clusters gerado: {output_path} ({len(df)} clusters)")
    return output_path
