"""Application configuration with environment-based settings."""
import os
import logging
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Runner
    SHOW_VIOLATIONS: bool = os.getenv("SHOW_VIOLATIONS", "false").lower() == "true"

    # Monitoring
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")

    @classmethod
    def get_log_level(cls) -> int:
        """Resolve the numeric logging level (DEBUG wins over LOG_LEVEL)."""
        if cls.DEBUG or os.getenv("DEBUG", "false").lower() == "true":
            return logging.DEBUG
        return logging.getLevelName(cls.LOG_LEVEL)

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration (DEBUG still comes from the environment)."""


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    LOG_LEVEL = "WARNING"
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("APP_ENV", "production").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, ProductionConfig)
