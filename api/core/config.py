"""
Configuration helpers for the Personas backend.

Routers/services read settings through get_settings() instead of touching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    db_echo: bool
    hunter_api_key: str
    hunter_api_url: str
    email_verification_timeout: float
    email_verification_strict: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _float(value: str | None, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./personas.db").strip(),
        db_echo=_bool(os.getenv("DB_ECHO"), False),
        hunter_api_key=os.getenv("HUNTER_API_KEY", ""),
        hunter_api_url=os.getenv("HUNTER_API_URL", "https://api.hunter.io/v2/email-verifier"),
        email_verification_timeout=_float(os.getenv("EMAIL_VERIFICATION_TIMEOUT"), 10.0),
        email_verification_strict=_bool(os.getenv("EMAIL_VERIFICATION_STRICT"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
