"""Application configuration.

Why here:
- One settings contract (pydantic-settings) for the CLI and the loader, so
  both read ``MANIFEST_LINT_*`` the same way.
- The per-user ``.env`` lets `doctor set` persist defaults without editing
  project files.

Precedence: explicit CLI flags, environment variables, the project ``.env``,
then the per-user ``.env``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "MANIFEST_LINT_"
APP_DIR_NAME = "manifest-lint"


def get_user_config_dir() -> Path:
    """Per-user configuration directory. ``MANIFEST_LINT_CONFIG_DIR`` overrides it."""

    override = (os.environ.get(f"{ENV_PREFIX}CONFIG_DIR") or "").strip()
    if override:
        return Path(override)

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    """``MANIFEST_LINT_*`` values stored in the user's .env (empty if none)."""

    env_path = get_user_env_file()
    if not env_path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(env_path).items()
        if value is not None and key.upper().startswith(ENV_PREFIX)
    }


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Set (or replace) variables in the user's .env, keeping other lines."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    manifest_path: Path = Field(
        default=Path("composer.json"),
        description="Manifest validated when no path is given on the command line.",
    )
    include_dev: bool = Field(
        default=True,
        description="Lint require-dev links together with require.",
    )
    strict: bool = Field(
        default=False,
        description="Treat warnings as failures (non-zero exit code).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
