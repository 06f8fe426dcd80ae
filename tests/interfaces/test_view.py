# tests/interfaces/test_view.py
from __future__ import annotations

from typing import Any

from consulta_cnpj.interfaces.web.view import (
    MAX_SOCIOS_RESUMO,
    NAO_INFORMADO,
    inscricao_principal,
    montar_ficha,
)


def _membro(nome: str, since: str | None) -> dict[str, Any]:
    return {
        "person": {"name": nome, "age": None},
        "role": {"text": "Sócio"},
        "since": since,
    }


def test_resumo_principal(canonico):
    ficha = montar_ficha(canonico)

    assert ficha is not None
    assert ficha.razao_social == "EMPRESA TESTE LTDA"
    assert ficha.nome_fantasia == "TESTE SOFTWARE"
    assert ficha.cnpj == "11.222.333/0001-81"
    assert ficha.inscricao_estadual == "123456789 (SP)"
    assert ficha.situacao == "Ativa"
    assert ficha.situacao_ativa is True
    assert ficha.endereco == "RUA DAS FLORES, 100, SALA 1, CENTRO, São Paulo, SP - CEP: 01001-000"
    assert ficha.telefones == "(11) 3333-4444, (11) 98765-4321"
    assert ficha.email == "contato@teste.com.br"
    assert ficha.cnae == "Desenvolvimento de programas de computador sob encomenda"


def test_sem_tax_id_nao_monta_ficha():
    assert montar_ficha({}) is None
    assert montar_ficha({"alias": "X"}) is None


def test_campos_ausentes_viram_nao_informado():
    ficha = montar_ficha({"taxId": "11222333000181"})

    assert ficha is not None
    assert ficha.razao_social == NAO_INFORMADO
    assert ficha.endereco == NAO_INFORMADO
    assert ficha.telefones == NAO_INFORMADO
    assert ficha.situacao_ativa is False
    assert ficha.socios == ()


def test_nome_fantasia_cai_para_razao_social(canonico):
    canonico["alias"] = None
    ficha = montar_ficha(canonico)
    assert ficha is not None
    assert ficha.nome_fantasia == "EMPRESA TESTE LTDA"


def test_situacao_inativa(canonico):
    canonico["status"] = {"text": "Baixada"}
    ficha = montar_ficha(canonico)
    assert ficha is not None
    assert ficha.situacao_ativa is False


def test_socios_mais_recentes_primeiro_e_limitados():
    membros = [_membro(f"SOCIO {i}", f"20{10 + i}-01-01") for i in range(8)]
    membros.append(_membro("SEM DATA", None))
    ficha = montar_ficha({"taxId": "11222333000181", "company": {"members": membros}})

    assert ficha is not None
    assert len(ficha.socios) == MAX_SOCIOS_RESUMO
    assert ficha.socios[0].nome == "SOCIO 7"
    assert ficha.socios[0].desde == "01/01/2017"
    assert ficha.socios[-1].nome == "SOCIO 2"
    assert ficha.socios_restantes == 3


def test_socio_sem_dados_usa_textos_padrao():
    ficha = montar_ficha({"taxId": "11222333000181", "company": {"members": [{"person": {}, "role": {}}]}})

    assert ficha is not None
    socio = ficha.socios[0]
    assert socio.nome == "Nome não informado"
    assert socio.cargo == NAO_INFORMADO
    assert socio.desde == "Data não informada"
    assert socio.faixa_etaria == "Não informada"


def test_inscricao_principal_prefere_tipo_normal():
    registros = [
        {"number": "111", "state": "RJ", "type": {"id": 2, "text": "Substituto"}},
        {"number": "222", "state": "SP", "type": {"id": 1, "text": "Normal"}},
    ]
    assert inscricao_principal(registros) == "222 (SP)"
    assert inscricao_principal(registros[:1]) == "111 (RJ)"
    assert inscricao_principal([]) is None
    assert inscricao_principal(None) is None


def test_dados_completos_omite_vazios(canonico):
    ficha = montar_ficha(canonico)
    assert ficha is not None
    itens = {item.label: item.valor for item in ficha.dados_completos}

    assert itens["CNPJ"] == "11.222.333/0001-81"
    assert itens["Matriz/Filial"] == "Matriz"
    assert itens["Capital Social"] == "R$ 1.000,00"
    assert itens["Regimes Especiais"] == ("Simples Nacional desde 01/07/2007",)
    assert itens["Telefones"] == ("Fixo: (11) 3333-4444", "Celular: (11) 98765-4321")
    assert itens["Inscrições Estaduais"] == ("✅ 123456789 - SP (Normal) - Ativa",)
    assert "Data da Última Atualização" in itens
    # nenhum suframa nem complemento vazio na lista
    assert all(valor not in ("", (), NAO_INFORMADO) for valor in itens.values())


def test_capital_zero_nao_aparece(canonico):
    canonico["company"]["equity"] = 0
    ficha = montar_ficha(canonico)
    assert ficha is not None
    assert "Capital Social" not in [item.label for item in ficha.dados_completos]
