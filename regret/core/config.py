from __future__ import annotations

import json
from dataclasses import dataclass
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # env: dev|stage|prod
    APP_ENV: str = "dev"
    API_PREFIX: str = "/api"

    # DB
    DATABASE_URL: str = "sqlite+aiosqlite:///./regret.db"
    DB_ECHO: bool = False

    # JWT
    JWT_SECRET_KEY: str = Field(default="CHANGE_ME_IN_STAGE_AND_PROD")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_TTL_SECONDS: int = 60 * 60 * 24  # 1d

    # Security
    PASSWORD_BCRYPT_ROUNDS: int = 10
    AUTH_TOKEN_HEADER: str = "x-auth-token"

    # HTTP & CORS
    CORS_ALLOW_CREDENTIALS: bool = False
    CORS_ALLOW_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    INSECURE_DEFAULT_VALUES: ClassVar[set[str]] = {
        "CHANGE_ME_IN_STAGE_AND_PROD",
        "CHANGE_ME",
        "SECRET_KEY",
        "YOUR_KEY_HERE",
    }

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        allowed = {"dev", "stage", "prod"}
        if value not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}, got '{value}'")
        return value

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def validate_secrets(cls, value: str, info: ValidationInfo) -> str:
        """Outside dev the signing secret must be explicitly set and reasonably long."""
        env = info.data.get("APP_ENV", "dev")
        if env == "dev":
            return value

        if value in cls.INSECURE_DEFAULT_VALUES:
            raise ValueError(
                f"{info.field_name} must be set to a secure value in {env} environment. "
                f"Current value '{value}' is not allowed."
            )
        if len(value) < 16:
            raise ValueError(f"{info.field_name} must be at least 16 characters long in {env} environment.")
        return value

    @field_validator("PASSWORD_BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:
            raise ValueError("PASSWORD_BCRYPT_ROUNDS must be between 4 and 31")
        return value

    @field_validator("CORS_ALLOW_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: str | list[str] | None) -> list[str]:
        """Parse CORS origins from string (JSON array) or list."""
        if value is None:
            return []
        if isinstance(value, list):
            return value
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return [origin.strip() for origin in value.split(",") if origin.strip()]

    @field_validator("CORS_ALLOW_ORIGINS")
    @classmethod
    def validate_cors_config(cls, value: list[str], info: ValidationInfo) -> list[str]:
        allow_credentials = info.data.get("CORS_ALLOW_CREDENTIALS", False)
        if allow_credentials and "*" in value:
            raise ValueError("CORS_ALLOW_ORIGINS cannot contain '*' when CORS_ALLOW_CREDENTIALS=True.")
        return value

    def auth_config(self) -> "AuthConfig":
        return AuthConfig(
            secret_key=self.JWT_SECRET_KEY,
            algorithm=self.JWT_ALGORITHM,
            token_ttl_seconds=self.ACCESS_TOKEN_TTL_SECONDS,
            bcrypt_rounds=self.PASSWORD_BCRYPT_ROUNDS,
        )


@dataclass(frozen=True)
class AuthConfig:
    """Everything the authentication gate needs; handed over at construction time."""

    secret_key: str
    algorithm: str = "HS256"
    token_ttl_seconds: int = 60 * 60 * 24
    bcrypt_rounds: int = 10


settings = Settings()
