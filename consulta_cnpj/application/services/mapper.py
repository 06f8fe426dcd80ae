# consulta_cnpj/application/services/mapper.py
#
# Pure transform: publica.cnpj.ws JSON -> Empresa.
#
# Design decisions:
#   - Never raises. Every section is read through _secao/_lista, which turn
#     wrong types into empty containers, and every scalar through _texto or
#     the parse helpers, which turn garbage into None.
#   - Members without a name are dropped.
#   - The upstream schema has no registration type, so every state
#     registration gets TipoInscricao(1, "Normal").
from __future__ import annotations

import logging
from typing import Any

from consulta_cnpj.domain.empresa.entities import (
    Atividade,
    DadosEmpresa,
    Email,
    Empresa,
    Endereco,
    InscricaoEstadual,
    Membro,
    Natureza,
    Pessoa,
    Porte,
    Qualificacao,
    RegimeTributario,
    Situacao,
    Telefone,
    TipoTelefone,
)
from consulta_cnpj.domain.empresa.formatters import (
    limpar_digitos,
    parse_data,
    parse_data_hora,
    parse_moeda,
)

logger = logging.getLogger(__name__)


def _secao(valor: Any) -> dict[str, Any]:
    return valor if isinstance(valor, dict) else {}


def _lista(valor: Any) -> list[Any]:
    return valor if isinstance(valor, list) else []


def _texto(valor: Any) -> str | None:
    """Strings aparadas; numeros viram str; vazio, bool e containers viram None."""
    if valor is None or isinstance(valor, (bool, dict, list)):
        return None
    texto = str(valor).strip()
    return texto or None


def mapear_empresa(raw: Any) -> Empresa:
    """Achata a resposta aninhada da API externa no formato canonico."""
    api = _secao(raw)
    estabelecimento = _secao(api.get("estabelecimento"))
    simples = _secao(api.get("simples"))

    tax_id = limpar_digitos(_texto(estabelecimento.get("cnpj")) or _texto(api.get("cnpj_raiz")))

    return Empresa(
        tax_id=tax_id,
        alias=_texto(estabelecimento.get("nome_fantasia")),
        founded=parse_data(estabelecimento.get("data_inicio_atividade")),
        updated=parse_data_hora(api.get("atualizado_em")),
        status=Situacao(text=_texto(estabelecimento.get("situacao_cadastral"))),
        status_date=parse_data(estabelecimento.get("data_situacao_cadastral")),
        head=estabelecimento.get("tipo") == "MATRIZ",
        company=DadosEmpresa(
            name=_texto(api.get("razao_social")),
            nature=_mapear_natureza(api.get("natureza_juridica")),
            size=_mapear_porte(api.get("porte")),
            equity=parse_moeda(api.get("capital_social")),
            simples=RegimeTributario(
                optant=simples.get("simples") == "SIM",
                since=parse_data(simples.get("data_opcao_simples")),
            ),
            simei=RegimeTributario(
                optant=simples.get("mei") == "SIM",
                since=parse_data(simples.get("data_opcao_mei")),
            ),
            members=mapear_membros(api.get("socios")),
        ),
        address=mapear_endereco(estabelecimento),
        phones=mapear_telefones(estabelecimento),
        emails=mapear_emails(estabelecimento),
        main_activity=mapear_atividade(estabelecimento.get("atividade_principal")),
        side_activities=tuple(
            atividade
            for item in _lista(estabelecimento.get("atividades_secundarias"))
            if (atividade := mapear_atividade(item)) is not None
        ),
        registrations=mapear_inscricoes(estabelecimento.get("inscricoes_estaduais")),
    )


def _mapear_natureza(valor: Any) -> Natureza | None:
    natureza = _secao(valor)
    if not natureza:
        return None
    return Natureza(id=_texto(natureza.get("id")), text=_texto(natureza.get("descricao")))


def _mapear_porte(valor: Any) -> Porte | None:
    porte = _secao(valor)
    if not porte:
        return None
    return Porte(text=_texto(porte.get("descricao")), acronym=_texto(porte.get("id")))


def mapear_membros(socios: Any) -> tuple[Membro, ...]:
    membros: list[Membro] = []
    for item in _lista(socios):
        socio = _secao(item)
        nome = _texto(socio.get("nome"))
        if nome is None:
            continue
        qualificacao = _texto(_secao(socio.get("qualificacao_socio")).get("descricao"))
        membros.append(
            Membro(
                person=Pessoa(name=nome, age=_texto(socio.get("faixa_etaria"))),
                role=Qualificacao(text=qualificacao or _texto(socio.get("tipo")) or "Sócio"),
                since=parse_data(socio.get("data_entrada")),
            )
        )
    descartados = len(_lista(socios)) - len(membros)
    if descartados:
        logger.debug("%d socio(s) sem nome descartado(s)", descartados)
    return tuple(membros)


def mapear_endereco(estabelecimento: dict[str, Any]) -> Endereco:
    logradouro = " ".join(
        parte
        for parte in (
            _texto(estabelecimento.get("tipo_logradouro")),
            _texto(estabelecimento.get("logradouro")),
        )
        if parte
    )
    cidade = _texto(_secao(estabelecimento.get("cidade")).get("nome"))
    return Endereco(
        street=logradouro or None,
        number=_texto(estabelecimento.get("numero")),
        details=_texto(estabelecimento.get("complemento")),
        district=_texto(estabelecimento.get("bairro")),
        city=cidade,
        state=_texto(_secao(estabelecimento.get("estado")).get("sigla")),
        zip=_texto(estabelecimento.get("cep")),
        country=_texto(_secao(estabelecimento.get("pais")).get("nome")),
        municipality=cidade,
    )


def _tipo_telefone(numero: str) -> TipoTelefone:
    digitos = limpar_digitos(numero)
    if len(digitos) == 9 and digitos.startswith("9"):
        return "MOBILE"
    return "LANDLINE"


def mapear_telefones(estabelecimento: dict[str, Any]) -> tuple[Telefone, ...]:
    telefones: list[Telefone] = []
    for ddd_key, numero_key in (("ddd1", "telefone1"), ("ddd2", "telefone2")):
        ddd = _texto(estabelecimento.get(ddd_key))
        numero = _texto(estabelecimento.get(numero_key))
        if ddd and numero:
            telefones.append(Telefone(area=ddd, number=numero, type=_tipo_telefone(numero)))
    return tuple(telefones)


def mapear_emails(estabelecimento: dict[str, Any]) -> tuple[Email, ...]:
    email = _texto(estabelecimento.get("email"))
    if email is None:
        return ()
    return (Email(address=email, ownership="CORPORATE"),)


def mapear_atividade(valor: Any) -> Atividade | None:
    atividade = _secao(valor)
    if not atividade:
        return None
    return Atividade(id=_texto(atividade.get("id")), text=_texto(atividade.get("descricao")))


def mapear_inscricoes(inscricoes: Any) -> tuple[InscricaoEstadual, ...]:
    resultado: list[InscricaoEstadual] = []
    for item in _lista(inscricoes):
        inscricao = _secao(item)
        if not inscricao:
            continue
        ativa = bool(inscricao.get("ativo"))
        resultado.append(
            InscricaoEstadual(
                number=_texto(inscricao.get("inscricao_estadual")),
                state=_texto(_secao(inscricao.get("estado")).get("sigla")),
                enabled=ativa,
                status=Situacao(text="Ativa" if ativa else "Inativa"),
            )
        )
    return tuple(resultado)
