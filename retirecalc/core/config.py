from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml
from dotenv import load_dotenv

from retirecalc.presentation.currency import DEFAULT_CURRENCY_SYMBOLS


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    default_currency: str
    currency_symbols: Dict[str, str] = field(default_factory=dict)
    cors_origins: List[str] = field(default_factory=list)


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Loads config.yaml + overrides from .env/environment variables.
    """
    load_dotenv()

    cfg: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    env = os.getenv("APP_ENV", _deep_get(cfg, "app.env", "dev"))
    log_level = os.getenv("LOG_LEVEL", _deep_get(cfg, "app.log_level", "INFO"))
    default_currency = os.getenv(
        "DEFAULT_CURRENCY", _deep_get(cfg, "currency.default", "USD")
    ).upper()

    # configured symbols extend/override the built-in table
    currency_symbols = dict(DEFAULT_CURRENCY_SYMBOLS)
    currency_symbols.update(
        {str(code).upper(): str(symbol) for code, symbol in (_deep_get(cfg, "currency.symbols", {}) or {}).items()}
    )

    cors_env = os.getenv("CORS_ORIGINS")
    if cors_env is not None:
        cors_origins = _split_csv(cors_env)
    else:
        cors_origins = list(_deep_get(cfg, "api.cors_origins", ["http://localhost:5173"]) or [])

    return Settings(
        env=env,
        log_level=log_level,
        default_currency=default_currency,
        currency_symbols=currency_symbols,
        cors_origins=cors_origins,
    )
