"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from the environment, a mounted key-per-file directory, or
      secrets.yaml (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Development mode is an explicit flag (is_development), never queried ad hoc

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Source priority: init > env > .env > /mnt/secrets > secrets.yaml
      (ADR: container secrets override the checked-in-for-local yaml file)
"""

import os
from functools import lru_cache

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

SECRETS_DIR = "/mnt/secrets"
SECRETS_YAML = "secrets.yaml"


class Settings(BaseSettings):
    """Application settings from environment variables and secret files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        yaml_file=SECRETS_YAML,
        secrets_dir=SECRETS_DIR if os.path.isdir(SECRETS_DIR) else None,
    )

    # Runtime
    environment: str = "Production"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = []
    https_redirect: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: str | None = None
    log_excluded_paths: list[str] = [
        "/employees/liveness",
        "/employees/readiness",
        "/metrics",
    ]

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            YamlConfigSettingsSource(settings_cls),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
