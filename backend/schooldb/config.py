"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from schooldb.database.databases import school_db


class Settings(BaseSettings):
    """SchoolDB settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = school_db.DB_NAME

    # Create unique indexes on courseId / studentId instead of the plain studentId index
    unique_business_keys: bool = False

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
