# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every variable is optional; the defaults give a working interactive session.
- Tasks are never stored here or anywhere else on disk; data_dir only holds the log file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
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
    data_dir: Path
    log_to_file: bool

    # ---- Console ----
    color: bool
    seed_demo: bool
    pause_after_action: bool

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            # .env is looked up from the working directory the app is started in.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "taskboard").strip() or "taskboard",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskboard")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            color=_env_bool(_k("COLOR"), True),
            seed_demo=_env_bool(_k("SEED_DEMO"), True),
            pause_after_action=_env_bool(_k("PAUSE_AFTER_ACTION"), True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
