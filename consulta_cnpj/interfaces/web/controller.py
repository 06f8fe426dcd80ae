# consulta_cnpj/interfaces/web/controller.py
#
# Client side of the lookup: validates locally, calls GET /api/cnpj and turns
# the outcome into either a FichaView or a user-facing error message.
#
# Design decisions:
#   - Validation failures are reported immediately and never retried.
#   - Transient failures (timeouts, network errors, 408 and 503 answers) are
#     retried up to max_retries times after a fixed delay. The budget belongs
#     to one pesquisar() call; separate searches never share it.
#   - The browser address travels as X-Forwarded-For; the API rate limit counts
#     each visitor, not the server rendering the page.
#   - `sleep` is injectable.
from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from consulta_cnpj.domain.empresa.formatters import limpar_digitos
from consulta_cnpj.domain.empresa.value_objects import validar_cnpj

from .view import FichaView, montar_ficha

logger = logging.getLogger(__name__)

API_PATH = "/api/cnpj"
_STATUS_TRANSITORIOS = frozenset({408, 503})


class _FalhaTransitoria(Exception):
    pass


class _FalhaDefinitiva(Exception):
    pass


@dataclass(frozen=True)
class ResultadoPesquisa:
    ficha: FichaView | None = None
    erro: str | None = None
    tentativas: int = 0

    @property
    def ok(self) -> bool:
        return self.ficha is not None


def _mensagem_de_erro(response: httpx.Response) -> str:
    texto = response.text
    try:
        corpo = json.loads(texto)
    except ValueError:
        if "<!DOCTYPE" in texto or "<html" in texto:
            return "Servidor retornou página HTML inesperada"
        return texto.strip() or f"Erro {response.status_code}"
    if isinstance(corpo, dict) and corpo.get("message"):
        return str(corpo["message"])
    return f"Erro {response.status_code}"


class ConsultaController:
    def __init__(
        self,
        http: httpx.AsyncClient,
        max_retries: int = 2,
        retry_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._http = http
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._sleep = sleep

    async def pesquisar(self, entrada: str, client_ip: str | None = None) -> ResultadoPesquisa:
        """Valida, consulta /api/cnpj e monta a ficha.

        `client_ip` segue como X-Forwarded-For para o rate limit contar o
        navegador, nao o servidor da pagina.
        """
        cnpj = limpar_digitos(entrada)
        if not cnpj:
            return ResultadoPesquisa(erro="Por favor, digite um CNPJ")
        validacao = validar_cnpj(cnpj)
        if not validacao.is_valid:
            return ResultadoPesquisa(erro=validacao.mensagem)

        tentativa = 0
        while True:
            tentativa += 1
            try:
                data = await self._buscar(cnpj, client_ip)
            except _FalhaTransitoria as err:
                if tentativa > self._max_retries:
                    return ResultadoPesquisa(erro=f"Erro: {err}", tentativas=tentativa)
                logger.info("Falha transitoria (%s), nova tentativa em %.1fs", err, self._retry_delay)
                await self._sleep(self._retry_delay)
                continue
            except _FalhaDefinitiva as err:
                return ResultadoPesquisa(erro=f"Erro: {err}", tentativas=tentativa)

            ficha = montar_ficha(data)
            if ficha is None:
                return ResultadoPesquisa(
                    erro="Dados da empresa não encontrados ou inválidos",
                    tentativas=tentativa,
                )
            return ResultadoPesquisa(ficha=ficha, tentativas=tentativa)

    async def _buscar(self, cnpj: str, client_ip: str | None) -> dict[str, Any]:
        headers = {"X-Forwarded-For": client_ip} if client_ip else None
        try:
            response = await self._http.get(API_PATH, params={"cnpj": cnpj}, headers=headers)
        except httpx.TimeoutException as err:
            raise _FalhaTransitoria("Timeout na consulta") from err
        except httpx.TransportError as err:
            raise _FalhaTransitoria("Falha de conexão com o servidor") from err

        if not response.is_success:
            mensagem = _mensagem_de_erro(response)
            if response.status_code in _STATUS_TRANSITORIOS:
                raise _FalhaTransitoria(mensagem)
            raise _FalhaDefinitiva(mensagem)

        try:
            corpo = response.json()
        except ValueError as err:
            raise _FalhaDefinitiva("Resposta da API inválida (não é JSON)") from err
        if not isinstance(corpo, dict):
            raise _FalhaDefinitiva("Resposta da API inválida (não é JSON)")
        if corpo.get("error"):
            raise _FalhaDefinitiva(str(corpo.get("message") or "Erro desconhecido"))

        data = corpo.get("data")
        return data if isinstance(data, dict) else {}
