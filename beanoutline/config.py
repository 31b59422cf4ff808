"""Library Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Settings only supply defaults: explicit builder arguments always win

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - OUTLINE_ prefix keeps the library from reading a host application's variables
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from beanoutline.core.domain_types import ConventionKind, parse_convention_kind


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OUTLINE_", env_file=".env", extra="ignore", case_sensitive=False,
    )

    # Naming
    default_convention: ConventionKind = ConventionKind.CAMEL

    @field_validator("default_convention", mode="before")
    @classmethod
    def normalize_convention(cls, v):
        if isinstance(v, str):
            return parse_convention_kind(v)
        return v

    # Methods that look like getters but are never properties
    reserved_member_names: list[str] = ["getClass", "get_class"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
