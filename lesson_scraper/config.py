"""Application configuration and environment variables"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Page fetching (single request, no retries)
    FETCH_TIMEOUT_SECONDS: float = 20.0
    FETCH_USER_AGENT: str = "Mozilla/5.0 (compatible; LessonScraper/0.1)"
    FETCH_FOLLOW_REDIRECTS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
