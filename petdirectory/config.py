"""
Pet Directory - Configuration
Environment configuration using Pydantic Settings
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Pet Directory Locations"
    debug: bool = False
    log_level: str = "INFO"

    # Database (MySQL)
    database_url: str = "mysql+pymysql://root:@localhost:3306/petdirectory"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
