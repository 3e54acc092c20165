"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from macro_calculator.adapters.off_client import DEFAULT_PRODUCT_FIELDS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    off_base_url: str = "https://world.openfoodfacts.org"
    off_search_url_template: str = "https://{locale}.openfoodfacts.org"
    off_product_fields: str = DEFAULT_PRODUCT_FIELDS
    off_user_agent: str = "MacroCalculator/0.1 (diet-log)"
    off_timeout_seconds: float = 15
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
