"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validation settings loaded from environment variables."""

    # File uploads
    MAX_FILE_SIZE_BYTES: int = 5 * 1024 * 1024

    # Live (per-keystroke) validation
    DEBOUNCE_WAIT_MS: int = 300

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_prefix": "FORMGUARD_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
