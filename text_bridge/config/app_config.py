"""Host-side settings: runtime environment, HTTP host address and logging."""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Settings shared by the HTTP and command-line hosts.

    ``log_level`` may be left unset, in which case it follows ``app_env``:
    ``DEBUG`` while developing, ``INFO`` in staging and production.
    """

    app_env: str = Field("development")
    app_debug: bool = Field(False)
    app_host: str = Field("0.0.0.0")
    app_port: int = Field(8000)

    log_level: Optional[str] = Field(None)
    log_file: Optional[str] = Field(None)

    @field_validator("app_env")
    def validate_app_env(cls, value: str) -> str:
        if value not in ("development", "staging", "production"):
            raise ValueError("APP_ENV must be development, staging, or production")
        return value

    @field_validator("log_level")
    def validate_log_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError("LOG_LEVEL must be a valid Loguru level")
        return level

    @model_validator(mode="after")
    def default_log_level(self) -> "AppConfig":
        if self.log_level is None:
            self.log_level = "DEBUG" if self.app_env == "development" else "INFO"
        return self

    @property
    def diagnose(self) -> bool:
        """Whether Loguru may print local variables in tracebacks.

        Never in production, where they could leak request payloads.
        """
        return self.app_debug and self.app_env != "production"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_app_config() -> AppConfig:
    """Return a cached application configuration instance."""

    return AppConfig()
