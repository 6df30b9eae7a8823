"""
Service-level settings read from the environment (and an optional .env file).

Generation settings (models, keys, delays) live in infra.config.InfraConfig.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).parent / ".env")

logger = logging.getLogger(__name__)


class Config:
    API_PORT = int(os.getenv("API_PORT", "8000"))
    ADMIN_API_TOKEN = os.getenv("ADMIN_API_TOKEN", "")

    # Template defaults for {appName} / {ctaLink}
    APP_NAME = os.getenv("APP_NAME", "CommitHabit")
    APP_URL = os.getenv("APP_URL", "https://commithabit.app")

    LLM_BACKEND = os.getenv("LLM_BACKEND", "gemini")
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    @classmethod
    def missing_settings(cls) -> list:
        """Names of required settings that are unset in the current environment."""
        return [key for key in ("ADMIN_API_TOKEN",) if not os.getenv(key, getattr(cls, key))]

    @classmethod
    def validate(cls) -> bool:
        missing = cls.missing_settings()
        if missing:
            logger.warning(f"Missing required environment variables: {', '.join(missing)}")
            return False
        return True
