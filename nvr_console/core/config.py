# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional

# External package imports
from dotenv import load_dotenv

# .env at the repository root
ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Persistence Configuration ("mongo" or "memory")
        self.persistence_backend: Final[str] = os.getenv("PERSISTENCE_BACKEND", "mongo").lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "nvr_console")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        
        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3001"))
        self.cors_origins: Final[List[str]] = _split_csv(os.getenv("CORS_ORIGIN", "*"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # Groups seeded at startup
        self.default_groups: Final[List[str]] = _split_csv(
            os.getenv("DEFAULT_GROUPS", "Exterior,Interior,Perimeter")
        )
        
        # Console client (presentation layer) configuration
        self.console_api_url: Final[str] = os.getenv("CONSOLE_API_URL", "http://localhost:3001")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_environment() -> None:
    """
    Load ENV_FILE into the process environment.

    Must run before the first get_settings() call, which caches the values it
    reads. Variables already set in the environment take precedence.
    """
    load_dotenv(ENV_FILE)
