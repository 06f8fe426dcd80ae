# consulta_cnpj/application/dtos/empresa_dto.py
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from consulta_cnpj.domain.empresa.entities import Empresa


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextoDTO(_CamelModel):
    text: str | None


class NaturezaDTO(_CamelModel):
    id: str | None
    text: str | None


class PorteDTO(_CamelModel):
    text: str | None
    acronym: str | None


class RegimeDTO(_CamelModel):
    optant: bool
    since: date | None


class PessoaDTO(_CamelModel):
    name: str
    age: str | None


class MembroDTO(_CamelModel):
    person: PessoaDTO
    role: TextoDTO
    since: date | None


class DadosEmpresaDTO(_CamelModel):
    name: str | None
    nature: NaturezaDTO | None
    size: PorteDTO | None
    equity: float
    simples: RegimeDTO
    simei: RegimeDTO
    members: list[MembroDTO]


class EnderecoDTO(_CamelModel):
    street: str | None
    number: str | None
    details: str | None
    district: str | None
    city: str | None
    state: str | None
    zip: str | None
    country: str | None
    municipality: str | None


class TelefoneDTO(_CamelModel):
    area: str
    number: str
    type: str


class EmailDTO(_CamelModel):
    address: str
    ownership: str


class AtividadeDTO(_CamelModel):
    id: str | None
    text: str | None


class TipoInscricaoDTO(_CamelModel):
    id: int
    text: str


class InscricaoDTO(_CamelModel):
    type: TipoInscricaoDTO
    number: str | None
    state: str | None
    enabled: bool
    status: TextoDTO


class EmpresaDTO(_CamelModel):
    tax_id: str
    alias: str | None
    founded: date | None
    updated: datetime | None
    status: TextoDTO
    status_date: date | None
    head: bool
    company: DadosEmpresaDTO
    address: EnderecoDTO
    phones: list[TelefoneDTO]
    emails: list[EmailDTO]
    main_activity: AtividadeDTO | None
    side_activities: list[AtividadeDTO]
    registrations: list[InscricaoDTO]
    suframa: list[Any]

    @classmethod
    def from_domain(cls, empresa: Empresa) -> EmpresaDTO:
        # Os campos das entidades ja tem os nomes do contrato JSON.
        dados = dataclasses.asdict(empresa)
        dados["company"]["equity"] = float(empresa.company.equity)
        return cls.model_validate(dados)


class ConsultaResponseDTO(_CamelModel):
    error: bool = False
    data: EmpresaDTO
    cached: bool
