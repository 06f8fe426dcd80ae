# consulta_cnpj/application/services/consulta_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from consulta_cnpj.domain.empresa.entities import Empresa
from consulta_cnpj.domain.empresa.errors import (
    CNPJInvalidoError,
    ConsultaError,
    ErroDesconhecidoError,
    MappingError,
)
from consulta_cnpj.domain.empresa.value_objects import sanitizar_cnpj, validar_cnpj
from consulta_cnpj.infrastructure.cache import ResponseCache

from .mapper import mapear_empresa

logger = logging.getLogger(__name__)


class CNPJSource(Protocol):
    async def buscar(self, cnpj: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class ResultadoConsulta:
    empresa: Empresa
    cached: bool


class ConsultaCNPJService:
    """Imperative Shell: valida, consulta cache, chama API externa e mapeia (Pure Core)."""

    def __init__(self, cache: ResponseCache[Empresa], source: CNPJSource) -> None:
        self._cache = cache
        self._source = source

    async def consultar(self, cnpj_bruto: str | None) -> ResultadoConsulta:
        if not cnpj_bruto:
            raise CNPJInvalidoError("CNPJ não informado")

        validacao = validar_cnpj(sanitizar_cnpj(cnpj_bruto))
        if not validacao.is_valid:
            raise CNPJInvalidoError(validacao.mensagem)
        cnpj: str = validacao.cleaned  # type: ignore[assignment]

        logger.info("Consultando CNPJ %s", cnpj)

        cached = self._cache.get(cnpj)
        if cached is not None:
            logger.info("Retornando dados do cache para %s", cnpj)
            return ResultadoConsulta(empresa=cached, cached=True)

        try:
            raw = await self._source.buscar(cnpj)
            empresa = mapear_empresa(raw)
        except ConsultaError:
            raise
        except Exception as err:
            logger.exception("Erro inesperado consultando %s", cnpj)
            raise ErroDesconhecidoError(detalhes=str(err)) from err

        if not empresa.tax_id:
            raise MappingError(detalhes="Dados inválidos retornados pela API")

        self._cache.set(cnpj, empresa)
        return ResultadoConsulta(empresa=empresa, cached=False)
