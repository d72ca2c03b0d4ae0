"""Engine configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (prefix FORMSTATE_)."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Form defaults
    DEFAULT_FORM_NAME: str = "viking_form"
    DEFAULT_FIELD_VALUE: str = ""

    # Validation
    DISCARD_STALE_RESULTS: bool = True
    GUARD_CONCURRENT_SUBMIT: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FORMSTATE_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
