# ============================================================
# 📦 src/campsite_explorer/domain/haversine_utils.py
# ============================================================

import math

R_TERRA_KM = 6371

# (zoom mínimo, raio em km), do mais próximo ao mais distante
RAIOS_POR_ZOOM = (
    (16, 0.1),   # marcadores individuais
    (14, 0.5),   # clusters minúsculos
    (12, 1.5),   # nível cidade
    (10, 4),     # nível bairro
    (8, 12),
    (6, 30),     # nível condado
    (4, 60),     # nível estado
)
RAIO_MAXIMO_KM = 100  # nível país


def haversine(lat1, lng1, lat2, lng2):
    """
    Calcula a distância entre dois pontos (lat, lng) em quilômetros.
    """
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return R_TERRA_KM * c


def radius_for_zoom(zoom: float) -> float:
    """
    Converte o nível de zoom em raio de agrupamento (km).
    Zoom alto → raio pequeno; zoom baixo → clusters grandes.
    """
    for zoom_min, raio in RAIOS_POR_ZOOM:
        if zoom >= zoom_min:
            return raio
    return RAIO_MAXIMO_KM
