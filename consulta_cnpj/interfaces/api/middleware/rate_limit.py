# consulta_cnpj/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from consulta_cnpj.domain.empresa.errors import LimiteRequisicoesError
from consulta_cnpj.infrastructure.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        primeiro = forwarded.split(",")[0].strip()
        if primeiro:
            return primeiro
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return request.client.host if request.client else "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limita GETs em /api/* por IP. OPTIONS e metodos rejeitados passam direto."""

    def __init__(self, app: ASGIApp, limiter: SlidingWindowRateLimiter) -> None:
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method != "GET" or not request.url.path.startswith("/api/"):
            return await call_next(request)

        client_ip = get_client_ip(request)
        if not self._limiter.check_and_record(client_ip):
            logger.warning("Rate limit excedido para IP %s", client_ip)
            erro = LimiteRequisicoesError()
            return JSONResponse(
                status_code=erro.status_code,
                content={"error": True, "message": erro.mensagem},
            )

        return await call_next(request)
