"""Service configuration loaded from environment variables.

Every setting can be overridden with a ``POKEDEX_`` prefixed variable, e.g.
``POKEDEX_RETRY_ATTEMPTS=5`` or ``POKEDEX_TRANSLATION_BASE_URL=http://localhost:8080``.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream services
    pokeapi_base_url: str = Field(default="https://pokeapi.co", description="PokeAPI base URL")
    translation_base_url: str = Field(
        default="https://api.funtranslations.com",
        description="FunTranslations base URL",
    )

    # Description selection
    target_locale: str = Field(default="en", min_length=1, description="Language tag of the description to return")

    # Transport
    retry_attempts: int = Field(default=3, ge=1, description="Total attempts per outbound call")
    retry_delay: float = Field(default=0.6, ge=0, description="Fixed delay between attempts (seconds)")
    request_timeout: float = Field(default=5.0, gt=0, description="Per-request timeout (seconds)")

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got {v}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    return Settings()
