# src/dayplan/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; malformed values fall back to it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAYPLAN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    if raw not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Schedule behaviour ----
    check_edit_conflicts: bool

    @staticmethod
    def from_env() -> "Settings":
        # WARNING by default: INFO records would interleave with the menu.
        return Settings(
            app_name=_env(_k("APP_NAME"), "dayplan").strip() or "dayplan",
            log_level=_env_log_level(_k("LOG_LEVEL"), "WARNING"),
            log_file=_env_path(_k("LOG_FILE"), None),
            check_edit_conflicts=_env_bool(_k("CHECK_EDIT_CONFLICTS"), False),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
