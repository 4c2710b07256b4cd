"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Settings only supply defaults; per-request options always win

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # GraphQL endpoint
    graphql_path: str = "/graphql"
    graphql_pretty: bool = False
    graphql_graphiql: bool = False

    @field_validator("graphql_path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        """Route paths must start with '/'."""
        return v if v.startswith("/") else f"/{v}"

    # GraphiQL assets (loaded from the CDN by the browser)
    graphiql_version: str = "3.0.10"
    graphiql_react_version: str = "18.2.0"

    # API
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
