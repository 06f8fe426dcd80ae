# consulta_cnpj/domain/empresa/formatters.py
#
# Pure pt-BR display helpers shared by the data mapper and the web UI.
#
# Design decisions:
#   - No formatter raises. Malformed input returns "" (missing value), the
#     original input (unrecognized shape) or "0,00" (currency).
#   - Datetimes are shown in Brasilia time (UTC-3, no DST since 2019).
from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation

_NAO_DIGITO = re.compile(r"\D")
_MILHAR_PONTO = re.compile(r"^-?\d{1,3}(\.\d{3})+$")

BRASILIA = timezone(timedelta(hours=-3))


def limpar_digitos(valor: object) -> str:
    if valor is None:
        return ""
    return _NAO_DIGITO.sub("", str(valor))


def formatar_cnpj(cnpj: str | None) -> str:
    """NN.NNN.NNN/NNNN-NN. Entrada com outro tamanho volta sem formatacao."""
    d = limpar_digitos(cnpj)
    if len(d) != 14:
        return d
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


def formatar_cep(cep: str | None) -> str:
    d = limpar_digitos(cep)
    if len(d) != 8:
        return d
    return f"{d[:5]}-{d[5:]}"


def formatar_telefone(telefone: str | None) -> str:
    d = limpar_digitos(telefone)
    if len(d) == 11:
        return f"({d[:2]}) {d[2:7]}-{d[7:]}"
    if len(d) == 10:
        return f"({d[:2]}) {d[2:6]}-{d[6:]}"
    if len(d) == 8:
        return f"{d[:4]}-{d[4:]}"
    return telefone or ""


def parse_data(valor: object) -> date | None:
    """Aceita date, datetime ou string ISO (YYYY-MM-DD, com ou sem hora)."""
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str) or not valor.strip():
        return None
    try:
        return date.fromisoformat(valor.strip()[:10])
    except ValueError:
        return None


def parse_data_hora(valor: object) -> datetime | None:
    """ISO-8601 com sufixo Z ou offset. Sem timezone assume UTC."""
    if isinstance(valor, datetime):
        dt = valor
    elif isinstance(valor, str) and valor.strip():
        try:
            dt = datetime.fromisoformat(valor.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def formatar_data(valor: object) -> str:
    if not valor:
        return ""
    d = parse_data(valor)
    if d is None:
        return str(valor)
    return d.strftime("%d/%m/%Y")


def formatar_data_hora(valor: object) -> str:
    if not valor:
        return ""
    dt = parse_data_hora(valor)
    if dt is None:
        return str(valor)
    try:
        return dt.astimezone(BRASILIA).strftime("%d/%m/%Y %H:%M:%S")
    except (OverflowError, ValueError):
        return str(valor)


def parse_moeda(valor: object) -> Decimal:
    """Converte valor monetario para Decimal. Falha retorna Decimal("0").

    Aceita numeros, "R$ 1.234,56" (pt-BR) e "1234.56". Um unico ponto seguido
    de grupos de tres digitos ("1.234") e tratado como separador de milhar.
    """
    if isinstance(valor, bool) or valor is None:
        return Decimal("0")
    if isinstance(valor, (int, float, Decimal)):
        try:
            resultado = Decimal(str(valor))
        except InvalidOperation:
            return Decimal("0")
        return resultado if resultado.is_finite() else Decimal("0")
    if not isinstance(valor, str):
        return Decimal("0")

    texto = valor.replace("R$", "").replace("\xa0", "").replace(" ", "").strip()
    if not texto:
        return Decimal("0")
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")
    elif _MILHAR_PONTO.match(texto):
        texto = texto.replace(".", "")

    try:
        resultado = Decimal(texto)
    except InvalidOperation:
        return Decimal("0")
    return resultado if resultado.is_finite() else Decimal("0")


def formatar_moeda(valor: object) -> str:
    """1234.5 -> "1.234,50". Vazio ou invalido -> "0,00"."""
    numero = parse_moeda(valor)
    texto = f"{numero:,.2f}"
    return texto.replace(",", "_").replace(".", ",").replace("_", ".")
