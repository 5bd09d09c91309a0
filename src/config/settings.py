"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Values are read from two sources (in priority order):
#
#   1. **Environment variables** — e.g., LOG_LEVEL=DEBUG
#   2. **.env file** — key=value lines in the project root .env file
#
# Field `circleci_graphql_url` maps to env var `CIRCLECI_GRAPHQL_URL`.
# Defaults apply when neither source provides a value.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Orb datasource settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === CircleCI registry ===
    circleci_graphql_url: str = "https://circleci.com/graphql-unstable"
    # Homepage fallback prefix when the registry has no homeUrl for an orb.
    circleci_registry_url: str = "https://circleci.com/orbs/registry/orb"

    # === HTTP client ===
    http_timeout: float = 30.0
    http_user_agent: str = "orb-datasource/0.1.0"

    # === Cache ===
    cache_max_size: int = 1000

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
