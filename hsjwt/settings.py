from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hsjwt.schemas.enums import Algorithm


class Settings(BaseSettings):
    app_env: str = "prod"
    token_secret: str
    token_algorithm: Algorithm = Algorithm.HS256
    token_ttl_seconds: int = Field(default=3600, ge=1)
    token_leeway_seconds: int = Field(default=0, ge=0)
    token_issuer: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
    )

    @field_validator("token_secret", mode="before")
    @classmethod
    def _normalize_secret(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("TOKEN_SECRET must be a string")

        cleaned = value.strip()
        if not cleaned:
            raise ValueError("TOKEN_SECRET must not be empty")
        return cleaned

    @field_validator("token_algorithm", mode="before")
    @classmethod
    def _normalize_algorithm(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("token_issuer", mode="before")
    @classmethod
    def _blank_issuer_is_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Optional[str]) -> str:
        if not value:
            return "INFO"

        if isinstance(value, str):
            cleaned = value.strip().upper()
            return cleaned or "INFO"

        raise ValueError("LOG_LEVEL must be a string")


@lru_cache
def get_settings() -> "Settings":
    return Settings()
