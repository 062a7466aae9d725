"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = {"env_prefix": "JACKETT_", "frozen": True}

    # Jackett
    url: str = "http://localhost:9117"
    results_path: str = "/api/v2.0/indexers/all/results"
    api_key: str = ""

    # HTTP
    timeout: int = 30

    # Conversion modes:
    # - permissive (default): every record converts, metadata only when parse_names is set
    # - validating: require_parse_names, unparseable release names come back as ParseError
    require_parse_names: bool = False
    parse_names: bool = False

    @property
    def search_endpoint(self) -> str:
        return f"{self.url.rstrip('/')}/{self.results_path.lstrip('/')}"


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
