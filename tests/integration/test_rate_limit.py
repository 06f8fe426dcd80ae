from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


@pytest.fixture()
def rate_limited_client(make_app: Callable[..., FastAPI]) -> Generator[TestClient, None, None]:
    """Client com rate limit ativo (3 req/min para teste rapido)."""
    with TestClient(make_app(rate_limit_per_minute=3)) as c:
        yield c


def test_rate_limit_permite_dentro_do_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        response = rate_limited_client.get("/api/cnpj?cnpj=11222333000181")
        assert response.status_code == 200


def test_rate_limit_bloqueia_apos_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/cnpj?cnpj=11222333000181")
    response = rate_limited_client.get("/api/cnpj?cnpj=11222333000181")
    assert response.status_code == 429
    assert response.json() == {
        "error": True,
        "message": "Limite de requisições excedido. Tente novamente em 1 minuto.",
    }
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["access-control-allow-origin"] == "*"


def test_rate_limit_antes_da_validacao(rate_limited_client: TestClient, upstream) -> None:
    for _ in range(3):
        assert rate_limited_client.get("/api/cnpj?cnpj=123").status_code == 400
    assert rate_limited_client.get("/api/cnpj?cnpj=123").status_code == 429
    assert upstream.requests == []


def test_rate_limit_por_ip_encaminhado(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/cnpj?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.1, 172.16.0.1"})
    bloqueado = rate_limited_client.get(
        "/api/cnpj?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.1"}
    )
    outro_ip = rate_limited_client.get(
        "/api/cnpj?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.2"}
    )
    assert bloqueado.status_code == 429
    assert outro_ip.status_code == 200


def test_options_nao_conta_no_limite(rate_limited_client: TestClient) -> None:
    for _ in range(5):
        assert rate_limited_client.options("/api/cnpj").status_code == 200
    assert rate_limited_client.get("/api/cnpj?cnpj=11222333000181").status_code == 200


def test_instancias_novas_nao_compartilham_contador(make_app: Callable[..., FastAPI]) -> None:
    for _ in range(2):
        with TestClient(make_app(rate_limit_per_minute=1)) as c:
            assert c.get("/api/cnpj?cnpj=11222333000181").status_code == 200


def test_pagina_html_fora_do_limite_direto(rate_limited_client: TestClient) -> None:
    rate_limited_client.get("/api/cnpj?cnpj=11222333000181")
    rate_limited_client.get("/")

    assert rate_limited_client.app.state.rate_limiter.count("testclient") == 1


def test_pagina_limita_por_visitante(rate_limited_client: TestClient) -> None:
    for i in range(4):
        html = rate_limited_client.get(
            "/?cnpj=11222333000181", headers={"X-Forwarded-For": f"10.0.0.{i}"}
        ).text
        assert "EMPRESA TESTE LTDA" in html

    limiter = rate_limited_client.app.state.rate_limiter
    assert [limiter.count(f"10.0.0.{i}") for i in range(4)] == [1, 1, 1, 1]


def test_pagina_bloqueia_o_mesmo_visitante(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.9"})
    html = rate_limited_client.get("/?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.9"}).text

    assert "Erro: Limite de requisições excedido. Tente novamente em 1 minuto." in html
    outro = rate_limited_client.get("/?cnpj=11222333000181", headers={"X-Forwarded-For": "10.0.0.10"}).text
    assert "EMPRESA TESTE LTDA" in outro
