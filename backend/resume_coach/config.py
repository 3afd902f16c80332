from pydantic_settings import BaseSettings
from functools import lru_cache
import os


class Settings(BaseSettings):
    app_name: str = "Resume Coach API"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Database - supports both SQLite (local) and PostgreSQL (production)
    database_url: str = "sqlite+aiosqlite:///./resume_coach.db"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:5173,http://localhost:5174"

    # AWS S3 (resume uploads)
    aws_region: str = "us-east-1"
    s3_bucket: str = ""
    upload_prefix: str = "uploads"
    upload_url_expire_minutes: int = 10

    # AI/LLM Configuration
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-pro"
    gemini_temperature: float = 0.4

    class Config:
        env_file = ".env"
        extra = "ignore"
        # Make field names case-insensitive for environment variables
        case_sensitive = False

    def get_cors_origins(self) -> list:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
