# consulta_cnpj/infrastructure/cache.py
from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    data: V
    timestamp: float


class ResponseCache(Generic[V]):
    """Cache TTL em memoria, chaveado pelo CNPJ limpo.

    Entrada valida sse now - timestamp < ttl. Expiradas saem no proximo get ou
    no sweep periodico.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}

    def get(self, key: str) -> V | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp < self._ttl:
            return entry.data
        del self._entries[key]
        return None

    def set(self, key: str, value: V) -> None:
        self._entries[key] = CacheEntry(data=value, timestamp=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def sweep(self) -> int:
        """Remove todas as entradas expiradas. Retorna quantas saíram."""
        now = self._clock()
        expiradas = [k for k, e in self._entries.items() if now - e.timestamp >= self._ttl]
        for key in expiradas:
            del self._entries[key]
        return len(expiradas)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
