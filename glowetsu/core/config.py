from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Configuration settings for the application, loaded from .env file and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    PROJECT_NAME: str = "glowetsu"
    API_STR: str = "/api"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Content management API for the glowetsu travel website"

    MONGO_URI: str
    MONGO_DB: str

    AZURE_STORAGE_CONNECTION_STRING: str
    CONTENT_CONTAINER_NAME: str = "content-images"
    IMAGE_MAX_SIZE_MB: int = 5

    @property
    def IMAGE_MAX_SIZE_BYTES(self) -> int:
        """
        Return the maximum accepted image upload size in bytes.

        Args:
            None

        Returns:
            int: Maximum image size in bytes.
        """
        return self.IMAGE_MAX_SIZE_MB * 1024 * 1024

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    ALLOWED_HOSTS: List[str] = ["localhost", "127.0.0.1"]

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


settings = get_settings()
