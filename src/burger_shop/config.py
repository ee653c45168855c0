"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    currency_symbol: str = "$"
    language: Literal["en", "es"] = "en"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="BURGER_SHOP_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
