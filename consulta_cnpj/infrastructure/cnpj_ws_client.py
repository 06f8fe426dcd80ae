# consulta_cnpj/infrastructure/cnpj_ws_client.py
#
# IO-only: fetch one establishment from the publica.cnpj.ws API.
#
# Design decisions:
#   - The deadline covers the whole call (connect + headers + body). It is
#     enforced with asyncio.wait_for, which cancels the in-flight request and
#     leaves no timer behind. httpx's own per-phase timeouts stay as a backstop.
#   - No retry here. Retry policy belongs to the caller (the web controller).
#   - The httpx.AsyncClient is injected; the app lifespan owns its lifecycle.
from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from consulta_cnpj.domain.empresa.errors import (
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "CNPJ-Finder-App/1.0",
}


class CNPJWsClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str, timeout: float = 10.0) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def buscar(self, cnpj: str) -> dict[str, Any]:
        """GET {base_url}/cnpj/{cnpj} e retorna o JSON cru.

        Raises:
            UpstreamTimeoutError:     prazo total estourado.
            UpstreamUnavailableError: falha de rede.
            UpstreamError:            status nao-2xx (subclasse pelo status) ou
                                      corpo que nao e um objeto JSON.
        """
        url = f"{self._base_url}/cnpj/{cnpj}"
        logger.info("Chamando API externa: %s", url)

        try:
            response = await asyncio.wait_for(
                self._http.get(url, headers=_HEADERS, timeout=self._timeout),
                timeout=self._timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as err:
            raise UpstreamTimeoutError(detalhes="Timeout na consulta da API externa") from err
        except httpx.TransportError as err:
            raise UpstreamUnavailableError(detalhes=f"Falha de rede: {err!r}") from err

        if not response.is_success:
            logger.warning("API externa retornou status %d para %s", response.status_code, cnpj)
            raise UpstreamError.from_status(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as err:
            raise UpstreamError(detalhes="Resposta da API externa nao e JSON", status=response.status_code) from err
        if not isinstance(payload, dict):
            raise UpstreamError(detalhes="Resposta da API externa nao e um objeto JSON", status=response.status_code)

        logger.info("Dados recebidos da API externa")
        return payload
