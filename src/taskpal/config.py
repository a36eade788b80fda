# src/taskpal/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app. Nothing here is required at import time:
every value has a default suitable for a local run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAL"

DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H%M"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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

    # ---- Console ----
    prompt: str
    datetime_format: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpal").strip() or "taskpal"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        prompt = _env(_k("PROMPT"), "> ")
        datetime_format = _env(_k("DATETIME_FORMAT"), DEFAULT_DATETIME_FORMAT) or DEFAULT_DATETIME_FORMAT

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpal"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            prompt=prompt,
            datetime_format=datetime_format,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
