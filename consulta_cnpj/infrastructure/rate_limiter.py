# consulta_cnpj/infrastructure/rate_limiter.py
from __future__ import annotations

import time
from collections.abc import Callable


class SlidingWindowRateLimiter:
    """Contador de janela deslizante por cliente, em memoria de um processo.

    Somente timestamps com t >= now - window contam. max_requests == 0 desliga
    o limite (usado em testes).
    """

    def __init__(
        self,
        max_requests: int,
        window: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window = window
        self._clock = clock
        self._requests: dict[str, list[float]] = {}

    def check_and_record(self, client_id: str) -> bool:
        if self._max_requests == 0:
            return True

        now = self._clock()
        self._purge(now)

        if len(self._requests.get(client_id, ())) >= self._max_requests:
            return False

        self._requests.setdefault(client_id, []).append(now)
        return True

    def sweep(self) -> int:
        """Remove timestamps fora da janela. Retorna quantos saíram."""
        return self._purge(self._clock())

    def _purge(self, now: float) -> int:
        inicio = now - self._window
        removidos = 0
        for client_id in list(self._requests):
            recentes = [t for t in self._requests[client_id] if t >= inicio]
            removidos += len(self._requests[client_id]) - len(recentes)
            if recentes:
                self._requests[client_id] = recentes
            else:
                del self._requests[client_id]
        return removidos

    def count(self, client_id: str) -> int:
        return len(self._requests.get(client_id, ()))
