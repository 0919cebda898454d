"""Service settings, read from the environment (and .env when present)"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./employees.db"


class Settings:
    """Everything the service reads from the environment, resolved once at import"""

    def __init__(self):
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Production must name its database explicitly
        if self.environment == "production":
            self.database_url = self._require("DATABASE_URL")
        else:
            self.database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
            if self.database_url == DEFAULT_DATABASE_URL:
                logging.getLogger(__name__).info(
                    "DATABASE_URL not set, using SQLite file ./employees.db"
                )

        # uvicorn bind address
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

        # Extra allowed origins, comma-separated
        self.cors_origins = os.getenv("CORS_ORIGINS", "")

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _require(self, key: str) -> str:
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"{key} must be set when ENVIRONMENT=production"
            )
        return value


settings = Settings()
