# consulta_cnpj/interfaces/api/main.py
from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from consulta_cnpj.application.services.consulta_service import ConsultaCNPJService
from consulta_cnpj.domain.empresa.entities import Empresa
from consulta_cnpj.domain.empresa.errors import ConsultaError
from consulta_cnpj.infrastructure.cache import ResponseCache
from consulta_cnpj.infrastructure.cnpj_ws_client import CNPJWsClient
from consulta_cnpj.infrastructure.config import Settings, get_settings
from consulta_cnpj.infrastructure.log import configure_logging
from consulta_cnpj.infrastructure.rate_limiter import SlidingWindowRateLimiter
from consulta_cnpj.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from consulta_cnpj.interfaces.api.routes.cnpj_routes import router as cnpj_router
from consulta_cnpj.interfaces.api.routes.web_routes import router as web_router
from consulta_cnpj.interfaces.web.controller import ConsultaController

logger = logging.getLogger(__name__)

_MENSAGENS_HTTP = {
    404: "Recurso não encontrado",
    405: "Método não permitido",
}


async def _sweep_periodico(
    cache: ResponseCache[Empresa],
    limiter: SlidingWindowRateLimiter,
    intervalo: float,
) -> None:
    """Expira cache e rate limit mesmo sem leituras."""
    while True:
        await asyncio.sleep(intervalo)
        removidos_cache = cache.sweep()
        removidos_limite = limiter.sweep()
        if removidos_cache or removidos_limite:
            logger.debug(
                "Sweep: %d entrada(s) de cache, %d registro(s) de rate limit",
                removidos_cache,
                removidos_limite,
            )


def create_app(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    web_client: httpx.AsyncClient | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    """Monta a aplicacao com estado proprio (cache, rate limiter, clientes HTTP).

    Clientes passados pelo chamador nao sao fechados no shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    owned: list[httpx.AsyncClient] = []
    if http_client is None:
        http_client = httpx.AsyncClient(follow_redirects=True)
        owned.append(http_client)
    if web_client is None:
        web_client = httpx.AsyncClient(
            base_url=settings.web_api_base_url,
            timeout=settings.cnpj_api_timeout_seconds + 5.0,
        )
        owned.append(web_client)

    cache: ResponseCache[Empresa] = ResponseCache(ttl=settings.cache_ttl_seconds, clock=clock)
    limiter = SlidingWindowRateLimiter(max_requests=settings.rate_limit_per_minute, clock=clock)
    source = CNPJWsClient(
        http_client,
        base_url=settings.cnpj_api_base_url,
        timeout=settings.cnpj_api_timeout_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        sweeper = asyncio.create_task(
            _sweep_periodico(cache, limiter, settings.cache_sweep_interval_seconds)
        )
        logger.info(
            "API pronta: limite %d req/min, cache TTL %.0fs",
            settings.rate_limit_per_minute,
            settings.cache_ttl_seconds,
        )
        try:
            yield
        finally:
            sweeper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sweeper
            for client in owned:
                await client.aclose()

    app = FastAPI(
        title="Consulta CNPJ",
        debug=False,  # NUNCA True em producao
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.cache = cache
    app.state.rate_limiter = limiter
    app.state.consulta_service = ConsultaCNPJService(cache=cache, source=source)
    app.state.web_controller = ConsultaController(
        web_client,
        max_retries=settings.web_max_retries,
        retry_delay=settings.web_retry_delay_seconds,
    )

    # Rate limit antes do middleware de headers: respostas 429 tambem recebem headers.
    app.add_middleware(RateLimitMiddleware, limiter=limiter)

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next: object) -> Response:
        response = await call_next(request)  # type: ignore[operator]
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization, X-Requested-With"
        response.headers["Access-Control-Max-Age"] = "86400"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response  # type: ignore[no-any-return]

    @app.exception_handler(ConsultaError)
    async def consulta_error_handler(request: Request, exc: ConsultaError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Erro no handler: %s (%s)", exc.mensagem, exc.detalhes)
        else:
            logger.info("Consulta recusada (%d): %s", exc.status_code, exc.mensagem)
        content: dict[str, object] = {"error": True, "message": exc.mensagem}
        if settings.debug and exc.detalhes:
            content["details"] = exc.detalhes
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": True, "message": _MENSAGENS_HTTP.get(exc.status_code, str(exc.detail))},
            headers=exc.headers,
        )

    app.include_router(cnpj_router, prefix="/api")
    app.include_router(web_router)
    return app


app = create_app()
