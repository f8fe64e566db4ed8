"""Application configuration using pydantic-settings."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORAGE_PATH = str(Path.home() / ".local" / "share" / "smart-bookmarks" / "storage.json")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Persisted slot - an empty path keeps bookmarks in memory only
    storage_path: str = Field(default=DEFAULT_STORAGE_PATH, validation_alias="STORAGE_PATH")
    storage_key: str = Field(default="smart-bookmarks", validation_alias="STORAGE_KEY")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        validation_alias="CORS_ORIGINS",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def storage_file(self) -> Path | None:
        """Resolved storage file, or None when bookmarks should stay in memory."""
        if not self.storage_path.strip():
            return None
        return Path(self.storage_path).expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
