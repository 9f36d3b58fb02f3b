# src/questbook/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- The model layer never reads the environment itself; it receives defaults
  through UserPrefs.from_settings().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "QUESTBOOK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


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

    # ---- Local data paths ----
    data_dir: Path
    log_dir: Path
    address_book_path: Path

    # ---- Default window geometry ----
    window_width: int
    window_height: int
    window_x: int | None
    window_y: int | None

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "questbook")
        log_level = _env(_k("LOG_LEVEL"), "INFO").upper()

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")
        address_book_path = _env_path(_k("ADDRESS_BOOK_PATH"), data_dir / "addressbook.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_dir=log_dir,
            address_book_path=address_book_path,
            window_width=_env_int(_k("WINDOW_WIDTH"), 740),
            window_height=_env_int(_k("WINDOW_HEIGHT"), 600),
            window_x=_env_optional_int(_k("WINDOW_X")),
            window_y=_env_optional_int(_k("WINDOW_Y")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
