# src/ticklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every field has a default.
- Optional config_local.py can override the display switches.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TICKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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

    # ---- Display ----
    dark_mode: bool
    color: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    prefs_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "ticklist").strip() or "ticklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        dark_mode = _env_bool(_k("DARK_MODE"), False)
        # NO_COLOR (https://no-color.org) wins over our own default.
        color = _env_bool(_k("COLOR"), os.getenv("NO_COLOR") is None)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/ticklist"))
        prefs_db_path = _env_path(_k("PREFS_DB_PATH"), data_dir / "prefs.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            dark_mode=dark_mode,
            color=color,
            data_dir=data_dir,
            prefs_db_path=prefs_db_path,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe display overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "DARK_MODE"):
        object.__setattr__(SETTINGS, "dark_mode", bool(_config_local.DARK_MODE))  # type: ignore[misc]
    if hasattr(_config_local, "COLOR"):
        object.__setattr__(SETTINGS, "color", bool(_config_local.COLOR))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
