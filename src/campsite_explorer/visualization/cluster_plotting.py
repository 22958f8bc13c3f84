#campsite_explorer/src/campsite_explorer/visualization/cluster_plotting.py

# =========================================================
# 📦 src/campsite_explorer/visualization/cluster_plotting.py
# =========================================================

from html import escape
from pathlib import Path
from typing import Optional, Tuple

import folium
from loguru import logger

from campsite_explorer.config import DEFAULT_CENTER, DEFAULT_ZOOM, MAP_TILES
from campsite_explorer.domain.entities import Campsite, Cluster, MapBounds, VisibleItems

MAX_NOMES_POPUP = 10


# =========================================================
# 1️⃣ ÍCONES E POPUPS
# =========================================================

def _tamanho_badge(count: int) -> int:
    if count < 10:
        return 30
    if count < 100:
        return 38
    return 46


def _icone_cluster(count: int) -> folium.DivIcon:
    tamanho = _tamanho_badge(count)
    html = f"""
    <div style="
        width:{tamanho}px; height:{tamanho}px; line-height:{tamanho}px;
        border-radius:50%; background-color:rgba(34,139,34,0.85);
        color:white; font-weight:bold; text-align:center;
        border:2px solid white; box-shadow:0 0 4px rgba(0,0,0,0.4);">
        {count}
    </div>
    """
    return folium.DivIcon(html=html, icon_size=(tamanho, tamanho), icon_anchor=(tamanho // 2, tamanho // 2))


def _popup_cluster(cluster: Cluster) -> str:
    nomes = [escape(c.site_name or "Sem nome") for c in cluster.campsites[:MAX_NOMES_POPUP]]
    restantes = cluster.count - len(nomes)
    if restantes > 0:
        nomes.append(f"<i>+{restantes} outros</i>")
    return f"<b>{cluster.count} campings</b><br>" + "<br>".join(nomes)


def _popup_campsite(campsite: Campsite) -> str:
    return f"""
    <b>Site:</b> {escape(campsite.site_name or 'Sem nome')}<br>
    <b>Local:</b> {escape(campsite.location_name or 'Não informado')}<br>
    <b>Tipo:</b> {escape(campsite.type or '--')}<br>
    <b>Lat/Lng:</b> {campsite.latitude:.6f}, {campsite.longitude:.6f}
    """


# =========================================================
# 2️⃣ FUNÇÃO DE PLOTAGEM
# =========================================================

def gerar_mapa_clusters(
    visiveis: VisibleItems,
    output_path: Path,
    bounds: Optional[MapBounds] = None,
    center: Tuple[float, float] = DEFAULT_CENTER,
    zoom: float = DEFAULT_ZOOM,
) -> Optional[folium.Map]:
    """
    Gera mapa HTML com clusters (badge com contagem) e campings individuais.
    Quando `bounds` é informado, o mapa abre enquadrado no viewport.
    """
    if not visiveis.visible_clusters and not visiveis.visible_markers:
        logger.warning("❌ Nenhum cluster ou camping visível para plotagem.")
        return None

    m = folium.Map(location=list(center), zoom_start=int(zoom), tiles=MAP_TILES)

    for cluster in visiveis.visible_clusters:
        folium.Marker(
            location=(cluster.lat, cluster.lng),
            icon=_icone_cluster(cluster.count),
            popup=folium.Popup(_popup_cluster(cluster), max_width=320),
            tooltip=folium.Tooltip(f"{cluster.count} campings", sticky=True),
        ).add_to(m)

    for campsite in visiveis.visible_markers:
        folium.Marker(
            location=(campsite.latitude, campsite.longitude),
            icon=folium.Icon(color="green", icon="tree-conifer"),
            popup=folium.Popup(_popup_campsite(campsite), max_width=320),
            tooltip=folium.Tooltip(campsite.site_name or campsite.location_name, sticky=True),
        ).add_to(m)

    if bounds is not None:
        m.fit_bounds(bounds.as_corners())

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.exists():
        output_path.unlink()

    m.save(str(output_path))
    logger.success(
        f"✅ Mapa salvo em {output_path} | clusters={len(visiveis.visible_clusters)} "
        f"| individuais={len(visiveis.visible_markers)}"
    )
    return m
