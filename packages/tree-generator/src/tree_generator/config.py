from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tree_generator.components.generator import DEFAULT_TREE_SIZE


class Settings(BaseSettings):
    """Generator settings loaded from ``TREEGEN_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TREEGEN_", env_file=".env", env_file_encoding="utf-8"
    )

    # Tree
    tree_size: int = Field(default=DEFAULT_TREE_SIZE, ge=1)
    seed: int | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


settings = Settings()
