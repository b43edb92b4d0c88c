import secrets
from enum import Enum
from typing import Any

from pydantic import PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file="../.env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "PITCHCRAFT"
    LOG_LEVEL: str = "INFO"

    # ── JWT / Auth ────────────────────────────────────────────
    SECRET_KEY: str = secrets.token_urlsafe(32)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # ── Database ──────────────────────────────────────────────
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_NAME: str = "app_db"

    ASYNC_DATABASE_URI: PostgresDsn | str = ""

    @field_validator("ASYNC_DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: str | None, info) -> Any:
        if isinstance(v, str) and v == "":
            data = info.data
            # Skip SSL for local dev (MODE defaults to development)
            mode = data.get("MODE", ModeEnum.development)
            query = "ssl=require" if mode != ModeEnum.development else None
            return PostgresDsn.build(
                scheme="postgresql+asyncpg",
                username=data.get("DATABASE_USER"),
                password=data.get("DATABASE_PASSWORD"),
                host=data.get("DATABASE_HOST"),
                port=data.get("DATABASE_PORT"),
                path=data.get("DATABASE_NAME"),
                query=query,
            )
        return v

    # ── OpenAI / generation ───────────────────────────────────
    OPENAI_API_KEY: str = ""
    GENERATION_MODEL: str = "gpt-4o-mini"
    GENERATION_TEMPERATURE: float = 0.7
    SLIDE_MAX_TOKENS: int = 500
    SUMMARY_MAX_TOKENS: int = 1000
    GENERATION_MAX_CONCURRENCY: int = 10
    FORCE_DEMO_MODE: bool = False

    @property
    def demo_mode(self) -> bool:
        """True when no usable OpenAI key is configured (placeholder keys count as missing)."""
        if self.FORCE_DEMO_MODE:
            return True
        key = self.OPENAI_API_KEY.strip()
        return not key or "your_" in key


settings = Settings()
