"""
Configuration settings for the media transcript assistant.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Media Transcript Assistant"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    TMP_DIR = Path(os.getenv("TMP_DIR", str(BASE_DIR / "tmp")))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Default models
    DEFAULT_TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "whisper-large-v3-turbo")
    DEFAULT_QA_MODEL = os.getenv("QA_MODEL", "openai/gpt-oss-20b")

    # External tools
    FFMPEG_BINARY = os.getenv("FFMPEG_BINARY", "ffmpeg")
    ENABLE_YTDLP_FALLBACK = _env_flag("ENABLE_YTDLP_FALLBACK", True)

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Create working directories and check required settings."""
        cls.TMP_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GROQ_API_KEY:
            # Imported here, the logger module reads LOG_LEVEL from this module
            from transcript_assistant.utils.logger import logging
            logging.warning("GROQ_API_KEY environment variable not set. "
                            "Set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
