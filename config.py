"""
Configuration management for the trivia gateway.

Loads environment variables from .env file and provides typed access to configuration.
"""

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

logger = logging.getLogger(__name__)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Configuration class for the trivia gateway."""

    # Upstream (OpenRouter) Configuration
    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
    OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "mistralai/mistral-7b-instruct:free")
    UPSTREAM_TIMEOUT_S = float(os.getenv("UPSTREAM_TIMEOUT_S", "60"))

    # Suggested topics cache
    SUGGESTIONS_TTL_S = float(os.getenv("SUGGESTIONS_TTL_S", str(24 * 60 * 60)))

    # Server Configuration
    PORT = int(os.getenv("PORT", "3000"))
    STATIC_DIR = os.getenv("STATIC_DIR", "public")
    CORS_ALLOW_ORIGINS = _split_csv(os.getenv("CORS_ALLOW_ORIGINS", ""))

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> bool:
        """Validate that required configuration is set."""
        required = ["OPENROUTER_API_KEY"]
        missing = [key for key in required if not getattr(cls, key)]

        if missing:
            logger.warning(f"Missing required environment variables: {', '.join(missing)}")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  OpenRouter API Key: {'✓ Set' if Config.OPENROUTER_API_KEY else '✗ Missing'}")
    print(f"  Model: {Config.OPENROUTER_MODEL}")
    print(f"  Upstream Timeout: {Config.UPSTREAM_TIMEOUT_S}s")
    print(f"  Suggestions TTL: {Config.SUGGESTIONS_TTL_S}s")
    print(f"  Port: {Config.PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
