# app/config.py

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

_ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(_ROOT_DIR / ".env")
load_dotenv()  # fallback to current working directory


def _env_int(name: str, default: int, minimum: int, maximum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    # getLevelName returns an int only for registered level names
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


def _resolve_database_url() -> str:
    return os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL") or "sqlite:///db.sqlite"


class Settings(BaseModel):
    app_name: str = "Dashboard Seed API"
    database_url: str = _resolve_database_url()
    database_echo: bool = _env_bool("DATABASE_ECHO", False)
    # bcrypt cost factor; passlib accepts 4..31
    bcrypt_rounds: int = _env_int("BCRYPT_ROUNDS", 10, 4, 31)
    seed_max_workers: int = _env_int("SEED_MAX_WORKERS", 8, 1)
    log_level: str = _env_log_level("LOG_LEVEL", "INFO")


settings = Settings()
