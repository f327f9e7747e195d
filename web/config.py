"""Flask application configuration."""

import os
from pathlib import Path


class Config:
    """Base configuration."""

    BASE_DIR = Path(__file__).parent.parent
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

    # Logbook file served by the app
    LOGBOOK_PATH = Path(
        os.environ.get("FUEL_LOGBOOK", BASE_DIR / "logbooks" / "logbook.yaml")
    )

    # Month label locale for chart rows
    LOCALE = os.environ.get("FUEL_LOG_LOCALE", "pt-BR")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
