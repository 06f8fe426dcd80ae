# consulta_cnpj/domain/empresa/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_NAO_DIGITO = re.compile(r"\D")
_DIGITOS_REPETIDOS = re.compile(r"^(\d)\1+$")

CNPJ_TAMANHO = 14


class MotivoInvalidez(str, Enum):
    WRONG_LENGTH = "WrongLength"
    REPEATED_DIGITS = "RepeatedDigits"
    INVALID_CHECK_DIGIT = "InvalidCheckDigit"

    @property
    def mensagem(self) -> str:
        if self is MotivoInvalidez.WRONG_LENGTH:
            return "CNPJ deve conter 14 dígitos"
        return "CNPJ inválido"


@dataclass(frozen=True)
class ValidacaoCNPJ:
    """Resultado de validar_cnpj. Exatamente um de cleaned/motivo e preenchido."""

    is_valid: bool
    cleaned: str | None = None
    motivo: MotivoInvalidez | None = None

    @property
    def mensagem(self) -> str | None:
        return self.motivo.mensagem if self.motivo else None


def sanitizar_cnpj(valor: object) -> str:
    """Remove nao-digitos e limita a 14 caracteres. Entrada nao-string vira ''."""
    if not isinstance(valor, str):
        return ""
    return _NAO_DIGITO.sub("", valor)[:CNPJ_TAMANHO]


def calcular_digito(base: str) -> int:
    """Digito verificador modulo 11 sobre `base` (12 ou 13 digitos).

    Pesos comecam em len(base) - 7 e decrescem ate 2, voltando para 9.
    Para 12 digitos: 5,4,3,2,9,8,7,6,5,4,3,2.
    """
    soma = 0
    peso = len(base) - 7
    for digito in base:
        soma += int(digito) * peso
        peso -= 1
        if peso < 2:
            peso = 9
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def validar_cnpj(entrada: str) -> ValidacaoCNPJ:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    digitos = _NAO_DIGITO.sub("", entrada)

    if len(digitos) != CNPJ_TAMANHO:
        return ValidacaoCNPJ(is_valid=False, motivo=MotivoInvalidez.WRONG_LENGTH)
    if _DIGITOS_REPETIDOS.match(digitos):
        return ValidacaoCNPJ(is_valid=False, motivo=MotivoInvalidez.REPEATED_DIGITS)
    if calcular_digito(digitos[:12]) != int(digitos[12]):
        return ValidacaoCNPJ(is_valid=False, motivo=MotivoInvalidez.INVALID_CHECK_DIGIT)
    if calcular_digito(digitos[:13]) != int(digitos[13]):
        return ValidacaoCNPJ(is_valid=False, motivo=MotivoInvalidez.INVALID_CHECK_DIGIT)

    return ValidacaoCNPJ(is_valid=True, cleaned=digitos)
