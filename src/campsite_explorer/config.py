#campsite_explorer/src/campsite_explorer/config.py

# =====================================================
# ⚙️ Configuração do Campsite Explorer
# =====================================================

import os
from dotenv import load_dotenv

load_dotenv()


# =====================================================
# 🧩 Clusterização (cache e throttle)
# =====================================================
CACHE_MAX_ENTRIES = int(os.getenv("CAMPSITE_CACHE_MAX_ENTRIES", "50"))
THROTTLE_INTERVAL_MS = int(os.getenv("CAMPSITE_THROTTLE_MS", "100"))

# zoom inicial do orquestrador antes da primeira leitura do mapa
INITIAL_ZOOM = 10

# clique em cluster → fitBounds com folga
CLUSTER_CLICK_PADDING_DEG = 0.01
CLUSTER_CLICK_PADDING_PX = (20, 20)
CLUSTER_CLICK_MAX_ZOOM = 18


# =====================================================
# 🗺️ Mapa
# =====================================================
DEFAULT_CENTER = (43.371122, -74.730233)
DEFAULT_ZOOM = int(os.getenv("CAMPSITE_DEFAULT_ZOOM", "15"))
MAP_TILES = os.getenv("CAMPSITE_MAP_TILES", "CartoDB positron")


# =====================================================
# 📁 Dados e saídas
# =====================================================
DATASET_PATH = os.getenv("CAMPSITE_DATASET_PATH", "data/campsites.json")
OUTPUT_DIR = os.getenv("CAMPSITE_OUTPUT_DIR", "output")

LOG_LEVEL = os.getenv("CAMPSITE_LOG_LEVEL", "INFO")
