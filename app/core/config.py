# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, field_validator


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _split_csv(value: str) -> List[str]:
    return [i.strip() for i in value.split(",") if i.strip()]


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "MyFinance API"
    VERSION: str = "0.1.0"

    port: int = int(os.getenv("PORT", "3000"))
    api_prefix: str = os.getenv("API_PREFIX", "")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./myfinance.db")
    seed_default_categories: bool = _env_flag("SEED_DEFAULT_CATEGORIES", "true")

    # Security / auth
    secret_key: str = os.getenv("JWT_SECRET", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    algorithm: str = "HS256"

    # Mail
    mail_host: str = os.getenv("MAIL_HOST", "localhost")
    mail_port: int = int(os.getenv("MAIL_PORT", "465"))
    mail_user: str = os.getenv("MAIL_USER", "")
    mail_password: str = os.getenv("MAIL_PASS", "")
    mail_use_ssl: bool = _env_flag("MAIL_USE_SSL", "true")
    mail_from: str = os.getenv("MAIL_FROM", '"MyFinance App" <no-reply@myfinance.local>')

    # Base of the link embedded in confirmation emails
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:3000")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return _split_csv(v)
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()
