# consulta_cnpj/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int = 10
    cache_ttl_seconds: float = 300.0
    cache_sweep_interval_seconds: float = 60.0
    cnpj_api_base_url: str = "https://publica.cnpj.ws"
    cnpj_api_timeout_seconds: float = 10.0
    cors_allow_origin: str = "*"
    debug: bool = False
    log_level: str = "INFO"
    web_api_base_url: str = "http://127.0.0.1:8000"
    web_max_retries: int = 2
    web_retry_delay_seconds: float = 1.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "10")),
        cache_ttl_seconds=float(os.environ.get("CACHE_TTL_SECONDS", "300")),
        cache_sweep_interval_seconds=float(os.environ.get("CACHE_SWEEP_INTERVAL_SECONDS", "60")),
        cnpj_api_base_url=os.environ.get("CNPJ_API_BASE_URL", "https://publica.cnpj.ws").rstrip("/"),
        cnpj_api_timeout_seconds=float(os.environ.get("CNPJ_API_TIMEOUT_SECONDS", "10")),
        cors_allow_origin=os.environ.get("CORS_ALLOW_ORIGIN", "*"),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        web_api_base_url=os.environ.get("WEB_API_BASE_URL", "http://127.0.0.1:8000").rstrip("/"),
        web_max_retries=int(os.environ.get("WEB_MAX_RETRIES", "2")),
        web_retry_delay_seconds=float(os.environ.get("WEB_RETRY_DELAY_SECONDS", "1.0")),
    )
