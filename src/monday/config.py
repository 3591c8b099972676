# src/monday/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default; nothing is required at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "MONDAY"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    if value:
        logger.warning("Ignoring malformed %s=%r, using default %s", name, raw, default)
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Console ----
    prompt: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "monday").strip() or "monday"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        prompt = _env(_k("PROMPT"), "> ")

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "monday.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            prompt=prompt,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
