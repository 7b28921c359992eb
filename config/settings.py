"""Configuration settings for uistrings."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from UISTRINGS_* environment variables or .env."""

    # Resource bundle
    resource_dir: Path | None = None  # None = bundle shipped with the package
    resource_base_name: str = "ui_strings"

    # Locale used by resolve() calls that do not pass one ("" = neutral)
    default_locale: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "UISTRINGS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
