# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any

import pytest

CNPJ_VALIDO = "11222333000181"

_RAW_EMPRESA: dict[str, Any] = {
    "cnpj_raiz": "11222333",
    "razao_social": "EMPRESA TESTE LTDA",
    "capital_social": "1000.00",
    "atualizado_em": "2024-01-10T03:00:00.000Z",
    "porte": {"id": "01", "descricao": "Micro Empresa"},
    "natureza_juridica": {"id": "2062", "descricao": "Sociedade Empresária Limitada"},
    "socios": [
        {
            "nome": "JOAO DA SILVA",
            "faixa_etaria": "Entre 41 a 50 anos",
            "data_entrada": "2015-03-01",
            "tipo": "Pessoa Física",
            "qualificacao_socio": {"id": 49, "descricao": "Sócio-Administrador"},
        },
        {
            "nome": "MARIA SANTOS",
            "faixa_etaria": "Entre 31 a 40 anos",
            "data_entrada": "2018-06-10",
            "tipo": "Pessoa Física",
            "qualificacao_socio": None,
        },
        {
            "nome": None,
            "data_entrada": "2020-01-01",
            "qualificacao_socio": {"descricao": "Sócio"},
        },
    ],
    "simples": {
        "simples": "SIM",
        "data_opcao_simples": "2007-07-01",
        "mei": "NÃO",
        "data_opcao_mei": None,
    },
    "estabelecimento": {
        "cnpj": CNPJ_VALIDO,
        "tipo": "MATRIZ",
        "nome_fantasia": "TESTE SOFTWARE",
        "situacao_cadastral": "Ativa",
        "data_situacao_cadastral": "2005-03-22",
        "data_inicio_atividade": "2005-03-22",
        "tipo_logradouro": "RUA",
        "logradouro": "DAS FLORES",
        "numero": "100",
        "complemento": "SALA 1",
        "bairro": "CENTRO",
        "cep": "01001000",
        "ddd1": "11",
        "telefone1": "33334444",
        "ddd2": "11",
        "telefone2": "987654321",
        "email": "contato@teste.com.br",
        "atividade_principal": {
            "id": "6201501",
            "descricao": "Desenvolvimento de programas de computador sob encomenda",
        },
        "atividades_secundarias": [
            {"id": "6202300", "descricao": "Desenvolvimento e licenciamento de programas customizáveis"},
        ],
        "pais": {"nome": "Brasil"},
        "estado": {"sigla": "SP"},
        "cidade": {"nome": "São Paulo"},
        "inscricoes_estaduais": [
            {"inscricao_estadual": "123456789", "ativo": True, "estado": {"sigla": "SP"}},
        ],
    },
}


@pytest.fixture()
def raw_empresa() -> dict[str, Any]:
    """Resposta realista de publica.cnpj.ws. Copia nova por teste."""
    return copy.deepcopy(_RAW_EMPRESA)
