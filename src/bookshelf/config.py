"""
Configuration management for Bookshelf backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKSHELF_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # API Settings
    api_host: str = "0.0.0.0"
    # Hosting platforms hand the port over as a bare PORT variable
    api_port: int = Field(
        default=5000,
        validation_alias=AliasChoices("BOOKSHELF_API_PORT", "PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Record store
    seed_data: bool = True
    strict_author_references: bool = False  # reject addBook for unknown authors

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
