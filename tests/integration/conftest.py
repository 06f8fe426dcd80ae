# tests/integration/conftest.py
from __future__ import annotations

import time
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from consulta_cnpj.infrastructure.config import Settings
from consulta_cnpj.interfaces.api.main import create_app
from consulta_cnpj.interfaces.web.controller import ConsultaController

UPSTREAM_URL = "https://upstream.test"


class FakeUpstream:
    """publica.cnpj.ws falso. Responde `payload` ou o que `handler_override` devolver."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.requests: list[httpx.Request] = []
        self.handler_override: Callable[[httpx.Request], httpx.Response] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler_override is not None:
            return self.handler_override(request)
        return httpx.Response(200, json=self.payload)

    def responder(self, status: int, text: str = "") -> None:
        self.handler_override = lambda request: httpx.Response(status, text=text)

    def levantar(self, erro_cls: type[httpx.TransportError]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise erro_cls("falha simulada", request=request)

        self.handler_override = handler


@pytest.fixture()
def upstream(raw_empresa: dict[str, Any]) -> FakeUpstream:
    return FakeUpstream(raw_empresa)


def _settings(**overrides: Any) -> Settings:
    base: dict[str, Any] = {
        "rate_limit_per_minute": 0,
        "cnpj_api_base_url": UPSTREAM_URL,
        "cnpj_api_timeout_seconds": 2.0,
        "web_retry_delay_seconds": 0.0,
    }
    base.update(overrides)
    return Settings(**base)


@pytest.fixture()
def make_app(upstream: FakeUpstream) -> Callable[..., FastAPI]:
    """Aplicacao nova por teste: cache e rate limiter nunca vazam entre testes."""

    def _make(clock: Callable[[], float] = time.monotonic, **overrides: Any) -> FastAPI:
        http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        app = create_app(settings=_settings(**overrides), http_client=http, clock=clock)
        # UI chama a propria API em processo, sem rede.
        app.state.web_controller = ConsultaController(
            httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver"),
            max_retries=app.state.settings.web_max_retries,
            retry_delay=0.0,
        )
        return app

    return _make


@pytest.fixture()
def client(make_app: Callable[..., FastAPI]) -> Generator[TestClient, None, None]:
    with TestClient(make_app()) as c:
        yield c


@pytest.fixture()
def debug_client(make_app: Callable[..., FastAPI]) -> Generator[TestClient, None, None]:
    with TestClient(make_app(debug=True)) as c:
        yield c
