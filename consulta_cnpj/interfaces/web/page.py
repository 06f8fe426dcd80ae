# consulta_cnpj/interfaces/web/page.py
from __future__ import annotations

from html import escape

from .controller import ResultadoPesquisa
from .view import FichaView, ItemInfo

_STYLE = """
    body { font-family: system-ui, sans-serif; margin: 2rem auto; max-width: 960px; color: #1f2933; }
    form { display: flex; gap: .5rem; margin-bottom: 1.5rem; }
    input { flex: 1; padding: .5rem; font-size: 1rem; }
    .error { background: #fde8e8; color: #9b1c1c; padding: .75rem; border-radius: 4px; }
    .info-item { display: flex; gap: 1rem; padding: .25rem 0; border-bottom: 1px solid #e4e7eb; }
    .label { font-weight: 600; min-width: 14rem; }
    .status-active { color: #057a55; font-weight: 600; }
    .partner-item { padding: .5rem 0; border-bottom: 1px solid #e4e7eb; }
    .partner-more { text-align: center; padding: 10px; font-style: italic; }
"""


def _info(label: str, valor: str, classe: str = "value") -> str:
    return (
        f'<div class="info-item"><span class="label">{escape(label)}</span>'
        f'<span class="{classe}">{escape(valor)}</span></div>'
    )


def _item_completo(item: ItemInfo) -> str:
    if isinstance(item.valor, tuple):
        valor = "<br>".join(f"• {escape(v)}" for v in item.valor)
    else:
        valor = escape(item.valor)
    return f'<div class="info-item"><span class="label">{escape(item.label)}</span><span class="value">{valor}</span></div>'


def _build_ficha(ficha: FichaView) -> str:
    sections: list[str] = []

    # Principal
    status_class = "value status-active" if ficha.situacao_ativa else "value"
    sections.append(f"""
    <section id="principal">
        <h2>{escape(ficha.razao_social)}</h2>
        {_info("Nome Fantasia", ficha.nome_fantasia)}
        {_info("CNPJ", ficha.cnpj)}
        {_info("Inscrição Estadual", ficha.inscricao_estadual)}
        {_info("Situação Cadastral", ficha.situacao, status_class)}
        {_info("Endereço", ficha.endereco)}
        {_info("CNAE Principal", ficha.cnae)}
        {_info("Telefones", ficha.telefones)}
        {_info("E-mail", ficha.email)}
    </section>
    """)

    # Socios
    if ficha.socios:
        socio_rows = "".join(
            f'<div class="partner-item"><div class="partner-name">{escape(s.nome)}</div>'
            f"<div>Cargo: {escape(s.cargo)}</div>"
            f"<div>Desde: {escape(s.desde)}</div>"
            f"<div>Faixa Etária: {escape(s.faixa_etaria)}</div></div>"
            for s in ficha.socios
        )
        if ficha.socios_restantes:
            socio_rows += f'<div class="partner-more">+ {ficha.socios_restantes} outros sócios...</div>'
        sections.append(f"""
    <section id="socios">
        <h2>Sócios e Administradores</h2>
        {socio_rows}
    </section>
    """)

    # Dados completos
    itens = "".join(_item_completo(i) for i in ficha.dados_completos)
    sections.append(f"""
    <section id="completo">
        <h2>Dados Completos</h2>
        {itens}
    </section>
    """)

    return "".join(sections)


def renderizar_pagina(entrada: str = "", resultado: ResultadoPesquisa | None = None) -> str:
    corpo = ""
    if resultado is not None and resultado.erro:
        corpo = f'<div class="error" id="errorMessage">{escape(resultado.erro)}</div>'
    elif resultado is not None and resultado.ficha is not None:
        corpo = _build_ficha(resultado.ficha)

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="utf-8">
    <title>Consulta CNPJ</title>
    <style>{_STYLE}</style>
</head>
<body>
    <h1>Consulta CNPJ</h1>
    <form method="get" action="/">
        <input id="cnpjInput" name="cnpj" value="{escape(entrada)}" placeholder="Digite o CNPJ" autofocus>
        <button type="submit" id="searchBtn">Consultar</button>
    </form>
    {corpo}
</body>
</html>
"""
