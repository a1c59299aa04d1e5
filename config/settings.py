from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Record store
    company_json_path: str

    log_level: str
    run_env: str

    # HTTP boundary
    http_host: str
    http_port: int
    http_debug: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        company_json_path=os.getenv("COMPANY_JSON_FILEPATH", "data/companies.json"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        http_host=os.getenv("HTTP_HOST", "127.0.0.1"),
        http_port=int(os.getenv("HTTP_PORT", "8080")),
        http_debug=_as_bool(os.getenv("HTTP_DEBUG")),
    )
