from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    log_level: str

    openai_api_key: str | None
    openai_model: str | None

    # AI gating
    ai_enabled: bool
    ai_provider: str  # only "openai" is wired; anything else keeps AI off

    # Parsing
    header_scan_limit: int
    min_row_fields: int

    # Analytics defaults
    peer_count: int
    default_ebitda_multiple: float
    advisory_max_records: int

    # Remote exports
    request_timeout_seconds: int

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    ai_enabled = _as_bool(os.getenv("AI_ENABLED"))
    ai_provider = os.getenv("AI_PROVIDER", "openai")
    openai_api_key = os.getenv("OPENAI_API_KEY")

    if ai_enabled and ai_provider == "openai" and not openai_api_key:
        raise RuntimeError(
            "OPENAI_API_KEY required when AI_PROVIDER=openai and AI_ENABLED=true"
        )
    return Settings(
        db_path=os.getenv("DB_PATH", "companies.db"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        openai_api_key=openai_api_key,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        ai_enabled=ai_enabled,
        ai_provider=ai_provider,
        header_scan_limit=int(os.getenv("HEADER_SCAN_LIMIT", "20")),
        min_row_fields=int(os.getenv("MIN_ROW_FIELDS", "5")),
        peer_count=int(os.getenv("PEER_COUNT", "4")),
        default_ebitda_multiple=float(os.getenv("DEFAULT_EBITDA_MULTIPLE", "8")),
        advisory_max_records=int(os.getenv("ADVISORY_MAX_RECORDS", "10")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
    )
