"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Notes Mentor")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Storage
    storage_url: str = Field(
        default="sqlite:///./notes_mentor.db",
        description="SQLAlchemy URL of the durable key-value table",
    )
    storage_namespace: str = Field(
        default="notes-mentor",
        description="Prefix of the keys holding the project, tag and note arrays",
    )

    # Presentation helpers
    preview_length: int = Field(default=150, ge=1)
    tag_suggestion_limit: int = Field(default=5, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def projects_key(self) -> str:
        """Storage key of the project array."""
        return f"{self.storage_namespace}-projects"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tags_key(self) -> str:
        """Storage key of the tag array."""
        return f"{self.storage_namespace}-tags"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def notes_key(self) -> str:
        """Storage key of the note array."""
        return f"{self.storage_namespace}-notes"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
