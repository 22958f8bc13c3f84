# ============================================================
# 📦 src/campsite_explorer/infrastructure/dataset_loader.py
# ============================================================

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from campsite_explorer.config import DATASET_PATH
from campsite_explorer.domain.entities import Campsite


def _coordenada_valida(valor: Any, limite: float) -> bool:
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        return False
    if math.isnan(valor) or math.isinf(valor):
        return False
    return -limite <= valor <= limite


def parse_campsite(registro: Dict[str, Any]) -> Optional[Campsite]:
    """
    Converte um registro JSON no formato
    {location_name, site_name, type, coordinates: {latitude, longitude}}.
    Retorna None para registros sem coordenada válida.
    """
    coords = registro.get("coordinates")
    if not isinstance(coords, dict):
        return None

    lat = coords.get("latitude")
    lng = coords.get("longitude")

    if not _coordenada_valida(lat, 90) or not _coordenada_valida(lng, 180):
        return None

    return Campsite(
        location_name=str(registro.get("location_name") or "").strip(),
        site_name=str(registro.get("site_name") or "").strip(),
        type=str(registro.get("type") or "").strip(),
        latitude=float(lat),
        longitude=float(lng),
    )


def carregar_campsites(path: Union[str, Path] = DATASET_PATH) -> List[Campsite]:
    """
    Lê o dataset estático de campings.
    Registros com coordenadas ausentes, NaN ou fora da faixa são descartados
    aqui, antes de chegarem à clusterização.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"❌ Dataset não encontrado: {path}")

    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, list):
        raise ValueError(f"❌ Dataset inválido em {path}: esperado lista de campings.")

    campsites = []
    descartados = 0
    for idx, registro in enumerate(payload):
        campsite = parse_campsite(registro) if isinstance(registro, dict) else None
        if campsite is None:
            descartados += 1
            logger.warning(f"⚠️ Registro {idx} ignorado (coordenadas inválidas): {registro!r:.120}")
            continue
        campsites.append(campsite)

    logger.success(f"📦 {len(campsites)} campings carregados de {path} | descartados={descartados}")
    return campsites
