# ============================================================
# 📦 src/campsite_explorer/infrastructure/cluster_cache.py
# ============================================================

from collections import OrderedDict
from typing import Generic, Optional, Tuple, TypeVar

from loguru import logger

from campsite_explorer.config import CACHE_MAX_ENTRIES

T = TypeVar("T")


class ClusterCache(Generic[T]):
    """
    Cache de resultados de clusterização por (zoom, quantidade de pontos).

    A chave NÃO considera a identidade dos pontos: um conjunto diferente
    com a mesma quantidade devolve o resultado antigo. Quem troca o
    dataset deve chamar `clear()`.
    Ao atingir `max_size`, remove a entrada inserida há mais tempo
    (leituras não renovam a posição).
    """

    def __init__(self, max_size: int = CACHE_MAX_ENTRIES):
        if max_size <= 0:
            raise ValueError(f"max_size deve ser positivo (recebido {max_size})")
        self.max_size = max_size
        self._entries: "OrderedDict[Tuple[float, int], T]" = OrderedDict()

    @staticmethod
    def _chave(zoom: float, data_length: int) -> Tuple[float, int]:
        return (zoom, data_length)

    def get(self, zoom: float, data_length: int) -> Optional[T]:
        return self._entries.get(self._chave(zoom, data_length))

    def set(self, zoom: float, data_length: int, result: T) -> None:
        chave = self._chave(zoom, data_length)

        if chave not in self._entries and len(self._entries) >= self.max_size:
            mais_antiga, _ = self._entries.popitem(last=False)
            logger.debug(f"🧹 Cache cheio ({self.max_size}) — removendo entrada {mais_antiga}")

        self._entries[chave] = result

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, chave: Tuple[float, int]) -> bool:
        return chave in self._entries
