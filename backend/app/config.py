"""
FriendList API: Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (server, logging, CORS) and database.py (MongoDB).
When:  Loaded once at module import time.

Only two values matter to a bare deployment: PORT and MONGO_URL. Everything
else has a default that works against a local mongod.
"""

from typing import List
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Format: mongodb://[user:password@]host[:port]/dbname
    # The path component selects the database; it defaults to FriendList.
    mongo_url: str = Field(
        default="mongodb://localhost/FriendList",
        description="MongoDB connection URL",
    )

    # What: How long the driver waits to find a usable server before failing
    # an operation. This is the only timeout in the request path.
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=120_000)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def mongo_database(self) -> str:
        """Database name taken from the path of mongo_url."""
        name = urlparse(self.mongo_url).path.lstrip("/")
        return name or "FriendList"

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5005, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
