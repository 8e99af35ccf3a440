import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="RECIPE_TEXT_LOG_LEVEL")
    default_unit: str = Field("Stk", alias="RECIPE_TEXT_DEFAULT_UNIT")
    description_min_length: int = Field(50, alias="RECIPE_TEXT_DESCRIPTION_MIN_LENGTH")
    # Pasted text beyond this is dropped before parsing
    max_input_chars: int = Field(100_000, alias="RECIPE_TEXT_MAX_INPUT_CHARS")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
