# consulta_cnpj/interfaces/web/view.py
#
# Pure presentation: canonical JSON record (as served by /api/cnpj) -> the
# strings shown on the result page. No IO, no HTML.
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from consulta_cnpj.domain.empresa.formatters import (
    formatar_cep,
    formatar_cnpj,
    formatar_data,
    formatar_data_hora,
    formatar_moeda,
    formatar_telefone,
    parse_data,
    parse_moeda,
)

NAO_INFORMADO = "Não informado"
MAX_SOCIOS_RESUMO = 6


@dataclass(frozen=True)
class SocioView:
    nome: str
    cargo: str
    desde: str
    faixa_etaria: str


@dataclass(frozen=True)
class ItemInfo:
    label: str
    valor: str | tuple[str, ...]


@dataclass(frozen=True)
class FichaView:
    razao_social: str
    nome_fantasia: str
    cnpj: str
    inscricao_estadual: str
    situacao: str
    situacao_ativa: bool
    endereco: str
    cnae: str
    telefones: str
    email: str
    socios: tuple[SocioView, ...]
    socios_restantes: int
    dados_completos: tuple[ItemInfo, ...]


def _d(valor: Any) -> dict[str, Any]:
    return valor if isinstance(valor, dict) else {}


def _l(valor: Any) -> list[Any]:
    return valor if isinstance(valor, list) else []


def inscricao_principal(registrations: Any) -> str | None:
    """IE do tipo Normal (id 1) primeiro; senao a primeira da lista."""
    inscricoes = [r for r in _l(registrations) if isinstance(r, dict)]
    escolhida = next((r for r in inscricoes if _d(r.get("type")).get("id") == 1), None)
    if escolhida is None and inscricoes:
        escolhida = inscricoes[0]
    if escolhida is None:
        return None
    return f"{escolhida.get('number')} ({escolhida.get('state')})"


def _telefone(phone: dict[str, Any]) -> str:
    if phone.get("area") and phone.get("number"):
        return formatar_telefone(f"{phone['area']}{phone['number']}")
    return str(phone.get("number") or "")


def _ordenar_socios(members: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Mais recentes primeiro; sem data vai para o fim."""
    return sorted(
        members,
        key=lambda m: parse_data(m.get("since")) or date.min,
        reverse=True,
    )


def montar_ficha(data: dict[str, Any]) -> FichaView | None:
    if not data or not data.get("taxId"):
        return None

    company = _d(data.get("company"))
    address = _d(data.get("address"))
    status_text = _d(data.get("status")).get("text") or NAO_INFORMADO

    partes_endereco = [
        address.get(k)
        for k in ("street", "number", "details", "district", "city", "state")
        if address.get(k)
    ]
    endereco = ", ".join(str(p) for p in partes_endereco)
    if address.get("zip"):
        endereco += f" - CEP: {formatar_cep(address['zip'])}"

    phones = [p for p in _l(data.get("phones")) if isinstance(p, dict)]
    emails = [e for e in _l(data.get("emails")) if isinstance(e, dict)]
    email = next((e for e in emails if e.get("ownership") == "CORPORATE"), emails[0] if emails else None)

    members = _ordenar_socios([m for m in _l(company.get("members")) if isinstance(m, dict)])
    socios = tuple(
        SocioView(
            nome=_d(m.get("person")).get("name") or "Nome não informado",
            cargo=_d(m.get("role")).get("text") or NAO_INFORMADO,
            desde=formatar_data(m.get("since")) or "Data não informada",
            faixa_etaria=_d(m.get("person")).get("age") or "Não informada",
        )
        for m in members[:MAX_SOCIOS_RESUMO]
    )

    return FichaView(
        razao_social=company.get("name") or NAO_INFORMADO,
        nome_fantasia=data.get("alias") or company.get("name") or NAO_INFORMADO,
        cnpj=formatar_cnpj(data["taxId"]) or NAO_INFORMADO,
        inscricao_estadual=inscricao_principal(data.get("registrations")) or NAO_INFORMADO,
        situacao=status_text,
        situacao_ativa="ativa" in status_text.lower(),
        endereco=endereco or NAO_INFORMADO,
        cnae=_d(data.get("mainActivity")).get("text") or NAO_INFORMADO,
        telefones=", ".join(_telefone(p) for p in phones) or NAO_INFORMADO,
        email=(email or {}).get("address") or NAO_INFORMADO,
        socios=socios,
        socios_restantes=max(len(members) - MAX_SOCIOS_RESUMO, 0),
        dados_completos=tuple(_dados_completos(data, company, address, phones, emails, members)),
    )


def _item(label: str, valor: Any) -> ItemInfo | None:
    if valor is None or valor == "" or valor == NAO_INFORMADO:
        return None
    if isinstance(valor, (list, tuple)):
        if not valor:
            return None
        return ItemInfo(label, tuple(str(v) for v in valor))
    return ItemInfo(label, str(valor))


def _dados_completos(
    data: dict[str, Any],
    company: dict[str, Any],
    address: dict[str, Any],
    phones: list[dict[str, Any]],
    emails: list[dict[str, Any]],
    members: list[dict[str, Any]],
) -> list[ItemInfo]:
    campos: list[tuple[str, Any]] = [
        ("CNPJ", formatar_cnpj(data.get("taxId"))),
        ("Razão Social", company.get("name")),
        ("Nome Fantasia", data.get("alias")),
        ("Data de Abertura", formatar_data(data.get("founded"))),
        ("Data da Última Atualização", formatar_data_hora(data.get("updated"))),
        ("Situação Cadastral", _d(data.get("status")).get("text")),
        ("Data da Situação", formatar_data(data.get("statusDate"))),
        ("Matriz/Filial", "Matriz" if data.get("head") else "Filial"),
    ]

    nature = _d(company.get("nature"))
    if nature:
        campos.append(("Natureza Jurídica", f"{nature.get('id')} - {nature.get('text')}"))
    size = _d(company.get("size"))
    if size:
        campos.append(("Porte da Empresa", f"{size.get('text')} ({size.get('acronym')})"))
    if parse_moeda(company.get("equity")):
        campos.append(("Capital Social", f"R$ {formatar_moeda(company.get('equity'))}"))

    regimes: list[str] = []
    simples = _d(company.get("simples"))
    simei = _d(company.get("simei"))
    if simples.get("optant"):
        regimes.append(f"Simples Nacional desde {formatar_data(simples.get('since'))}")
    if simei.get("optant"):
        regimes.append(f"MEI desde {formatar_data(simei.get('since'))}")
    campos.append(("Regimes Especiais", regimes))

    if address:
        campos.extend(
            [
                ("Logradouro", address.get("street")),
                ("Número", address.get("number")),
                ("Complemento", address.get("details")),
                ("Bairro", address.get("district")),
                ("Cidade", address.get("city")),
                ("Estado", address.get("state")),
                ("CEP", formatar_cep(address.get("zip"))),
                ("País", address.get("country")),
                ("Município", address.get("municipality")),
            ]
        )

    campos.append(
        (
            "Telefones",
            [f"{'Fixo' if p.get('type') == 'LANDLINE' else 'Celular'}: {_telefone(p)}" for p in phones],
        )
    )
    campos.append(
        (
            "E-mails",
            [f"{'Corporativo' if e.get('ownership') == 'CORPORATE' else 'Outro'}: {e.get('address')}" for e in emails],
        )
    )

    main = _d(data.get("mainActivity"))
    if main:
        campos.append(("CNAE Principal", f"{main.get('id')} - {main.get('text')}"))
    campos.append(
        (
            "CNAEs Secundários",
            [f"{a.get('id')} - {a.get('text')}" for a in _l(data.get("sideActivities")) if isinstance(a, dict)],
        )
    )

    inscricoes: list[str] = []
    for reg in _l(data.get("registrations")):
        if not isinstance(reg, dict):
            continue
        marca = "✅" if reg.get("enabled") else "❌"
        inscricoes.append(
            f"{marca} {reg.get('number')} - {reg.get('state')} "
            f"({_d(reg.get('type')).get('text')}) - {_d(reg.get('status')).get('text')}"
        )
    campos.append(("Inscrições Estaduais", inscricoes))

    socios: list[str] = []
    for m in members:
        desde = f" desde {formatar_data(m.get('since'))}" if m.get("since") else ""
        socios.append(f"{_d(m.get('person')).get('name')} - {_d(m.get('role')).get('text')}{desde}")
    campos.append(("Sócios e Administradores", socios))

    return [item for label, valor in campos if (item := _item(label, valor)) is not None]
