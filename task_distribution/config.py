"""Configuration management using environment variables"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./task_distribution.db"


class Settings:
    """Application settings - YAGNI: Only what we need right now"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Database configuration (any SQLAlchemy async URL)
        if self.environment == "production":
            self.database_url = self._get_required("DATABASE_URL")
        else:
            self.database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        self.sql_echo = os.getenv("SQL_ECHO", "false").lower() == "true"

        # Server configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

        # CORS origins (comma-separated list)
        self.cors_origins = os.getenv("CORS_ORIGINS", "")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value


# Global settings instance
settings = Settings()
