# core/config.py
"""
Process‑wide settings, read from the environment (and an optional ``.env``).

Only the bits the excerpt engine needs at startup live here: where the
plugin configuration file is and how chatty the logs should be.  The plugin
configuration itself is loaded by ``services.excerpts.config_loader`` and
injected into the resolver – it is never stored on this object.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root – one level up from ``core/``
REPO_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Runtime settings for the excerpt engine."""

    EXCERPTS_CONFIG_PATH: Path = Field(
        default=REPO_ROOT / "configs" / "excerpts.yaml",
        description="YAML file holding the sources / sourceSets / excerpts",
    )
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
