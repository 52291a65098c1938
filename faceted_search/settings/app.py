"""Search settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from faceted_search.content.constants import DEFAULT_EXCERPT_LENGTH


class SearchSettings(BaseSettings):
    """Centralized environment configuration for faceted search."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    site_domain: str = Field(default="", validation_alias="SEARCH_SITE_DOMAIN")
    use_semantic_search: bool = Field(
        default=False, validation_alias="SEARCH_USE_SEMANTIC"
    )
    semantic_weight: float = Field(
        default=0.5, ge=0.0, validation_alias="SEARCH_SEMANTIC_WEIGHT"
    )
    excerpt_length: int = Field(
        default=DEFAULT_EXCERPT_LENGTH, ge=1, validation_alias="SEARCH_EXCERPT_LENGTH"
    )
    log_json: bool = Field(default=True, validation_alias="SEARCH_LOG_JSON")


def get_settings() -> SearchSettings:
    """Get a settings instance."""
    return SearchSettings()
