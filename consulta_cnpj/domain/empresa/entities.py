# consulta_cnpj/domain/empresa/entities.py
#
# Canonical company record returned by the lookup endpoint.
#
# Design decisions:
#   - Every entity is a frozen dataclass. A cached record is returned verbatim
#     to later requests, so nothing downstream may mutate it.
#   - Optional upstream fields are explicit `X | None`; collections default to
#     empty tuples, never None.
#   - Names follow the JSON contract consumed by the UI (taxId, mainActivity,
#     ...) in snake_case; the DTO layer renders them as camelCase.
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

TipoTelefone = Literal["LANDLINE", "MOBILE"]


@dataclass(frozen=True)
class Situacao:
    text: str | None = None


@dataclass(frozen=True)
class Natureza:
    id: str | None
    text: str | None


@dataclass(frozen=True)
class Porte:
    text: str | None
    acronym: str | None


@dataclass(frozen=True)
class RegimeTributario:
    """Simples Nacional ou SIMEI."""

    optant: bool = False
    since: date | None = None


@dataclass(frozen=True)
class Pessoa:
    name: str
    age: str | None = None


@dataclass(frozen=True)
class Qualificacao:
    text: str


@dataclass(frozen=True)
class Membro:
    """Socio ou administrador. Membros sem nome nao chegam a ser construidos."""

    person: Pessoa
    role: Qualificacao
    since: date | None = None


@dataclass(frozen=True)
class DadosEmpresa:
    name: str | None = None
    nature: Natureza | None = None
    size: Porte | None = None
    equity: Decimal = Decimal("0")
    simples: RegimeTributario = field(default_factory=RegimeTributario)
    simei: RegimeTributario = field(default_factory=RegimeTributario)
    members: tuple[Membro, ...] = ()


@dataclass(frozen=True)
class Endereco:
    street: str | None = None
    number: str | None = None
    details: str | None = None
    district: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    municipality: str | None = None


@dataclass(frozen=True)
class Telefone:
    area: str
    number: str
    type: TipoTelefone = "LANDLINE"


@dataclass(frozen=True)
class Email:
    address: str
    ownership: str = "CORPORATE"


@dataclass(frozen=True)
class Atividade:
    id: str | None
    text: str | None


@dataclass(frozen=True)
class TipoInscricao:
    id: int = 1
    text: str = "Normal"


@dataclass(frozen=True)
class InscricaoEstadual:
    number: str | None
    state: str | None
    enabled: bool
    status: Situacao
    type: TipoInscricao = field(default_factory=TipoInscricao)


@dataclass(frozen=True)
class Empresa:
    """Aggregate Root. `tax_id` vazio indica registro inutilizavel da API externa."""

    tax_id: str
    alias: str | None = None
    founded: date | None = None
    updated: datetime | None = None
    status: Situacao = field(default_factory=Situacao)
    status_date: date | None = None
    head: bool = False
    company: DadosEmpresa = field(default_factory=DadosEmpresa)
    address: Endereco = field(default_factory=Endereco)
    phones: tuple[Telefone, ...] = ()
    emails: tuple[Email, ...] = ()
    main_activity: Atividade | None = None
    side_activities: tuple[Atividade, ...] = ()
    registrations: tuple[InscricaoEstadual, ...] = ()
    suframa: tuple[()] = ()
