from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from tto_survey.core.env import load_env


DEFAULT_AI_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_AI_MODEL = "google/gemini-3-flash-preview"

AI_PROVIDERS = {"gateway", "fake"}


@dataclass(frozen=True)
class Settings:
    environment: str  # development, production, staging
    log_level: str
    log_json: bool
    log_file: str
    ai_provider: str
    ai_gateway_url: str
    ai_model: str
    ai_gateway_timeout_seconds: float
    supabase_url: str
    supabase_anon_key: str
    functions_timeout_seconds: float
    copilot_docs_enabled: bool


def _get_float(name: str, default: float, *, minimum: Optional[float] = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except (TypeError, ValueError):
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _get_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or "").strip() or default


load_env()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    if environment not in {"development", "production", "staging"}:
        environment = "development"

    ai_provider = _get_str("AI_PROVIDER", "gateway").lower()
    if ai_provider not in AI_PROVIDERS:
        ai_provider = "gateway"

    return Settings(
        environment=environment,
        log_level=_get_str("LOG_LEVEL", "INFO").upper(),
        log_json=_get_bool("LOG_JSON", default=False),
        log_file=_get_str("LOG_FILE"),
        ai_provider=ai_provider,
        ai_gateway_url=_get_str("AI_GATEWAY_URL", DEFAULT_AI_GATEWAY_URL),
        ai_model=_get_str("AI_MODEL", DEFAULT_AI_MODEL),
        ai_gateway_timeout_seconds=_get_float("AI_GATEWAY_TIMEOUT_SECONDS", 0.0, minimum=0.0),
        supabase_url=_get_str("SUPABASE_URL").rstrip("/"),
        supabase_anon_key=_get_str("SUPABASE_ANON_KEY"),
        functions_timeout_seconds=_get_float("FUNCTIONS_TIMEOUT_SECONDS", 0.0, minimum=0.0),
        copilot_docs_enabled=_get_bool("COPILOT_DOCS_ENABLED", default=False),
    )


__all__ = ["Settings", "get_settings", "DEFAULT_AI_GATEWAY_URL", "DEFAULT_AI_MODEL"]
