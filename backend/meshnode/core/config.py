"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Mesh Node Operator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./meshnode.db"
    DB_ECHO: bool = False

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Node identity (generated on first config read when empty)
    NODE_ID: Optional[str] = None

    # Settlement
    SETTLEMENT_BASE_RATE: float = 0.0005  # Credits per GB of dominant-direction traffic

    # Listing defaults
    METRICS_DEFAULT_LIMIT: int = 60
    LOGS_DEFAULT_LIMIT: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
