# ============================================================
# 📦 src/campsite_explorer/infrastructure/throttle.py
# ============================================================

import time
from typing import Any, Callable, Optional

from campsite_explorer.config import THROTTLE_INTERVAL_MS


class Throttle:
    """
    Limitador de taxa com disparo na borda de subida (leading edge).

    - A primeira chamada de uma janela executa imediatamente e abre a janela.
    - Chamadas dentro da janela são DESCARTADAS (não enfileiradas).
    - Não há disparo final ao fechar a janela.

    `clock` retorna segundos (padrão: time.monotonic); injetável em testes.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        interval_ms: float = THROTTLE_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval_ms < 0:
            raise ValueError(f"interval_ms não pode ser negativo (recebido {interval_ms})")
        self.func = func
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self._janela_inicio: Optional[float] = None

    def in_window(self) -> bool:
        if self._janela_inicio is None:
            return False
        return (self._clock() - self._janela_inicio) < self.interval

    def __call__(self, *args, **kwargs) -> bool:
        """Retorna True se a chamada foi executada, False se descartada."""
        if self.in_window():
            return False

        self._janela_inicio = self._clock()
        self.func(*args, **kwargs)
        return True

    def reset(self) -> None:
        self._janela_inicio = None
