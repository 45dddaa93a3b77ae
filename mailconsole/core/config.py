"""Environment-driven configuration for the console.

Every knob the console reads lives on ``ConsoleSettings``. Values come from
the environment (or a ``.env`` file) and are read once, the first time
``get_settings`` is called.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOCALES = ("en", "zh")


class ConsoleSettings(BaseSettings):
    """Settings for the console process and its link to the backend API."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Mail Forwarding Console"

    BASE_DIR: Path = Field(default_factory=lambda: Path(__file__).resolve().parent.parent)
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2] / "data")
    TEMPLATES_DIR: Path | None = None
    STATE_FILE: str = "console_state.json"

    # ---- Backend API
    # Every request path is relative to this root.
    API_BASE_URL: str = "http://127.0.0.1:8080/api"
    API_TIMEOUT_MS: int = 5000

    # ---- Locale
    DEFAULT_LOCALE: str = "zh"
    FALLBACK_LOCALE: str = "en"

    LOGIN_PATH: str = "/login"
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 5173

    @field_validator("DEFAULT_LOCALE", "FALLBACK_LOCALE")
    @classmethod
    def check_locale(cls, value: str) -> str:
        value = (value or "").strip().lower()
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"locale must be one of {', '.join(SUPPORTED_LOCALES)}")
        return value

    @property
    def templates_dir(self) -> Path:
        return self.TEMPLATES_DIR or self.BASE_DIR / "templates"

    @property
    def state_path(self) -> Path:
        return self.DATA_DIR / self.STATE_FILE


@lru_cache(maxsize=1)
def get_settings() -> ConsoleSettings:
    settings = ConsoleSettings()
    settings.DATA_DIR.mkdir(parents=True, exist_ok=True)
    return settings
