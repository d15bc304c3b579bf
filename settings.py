import logging
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Both credentials are optional: the service starts unconfigured and an
    # administrator can supply keys later through PageGenerator.configure_*.
    gemini_api_key: str | None = None
    openrouter_api_key: str | None = None

    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_max_tokens: int = 8192
    default_provider: Literal["gemini", "openrouter"] = "gemini"
    default_model: str = ""
    strict_block_types: bool = False
    output_dir: Path = Path("./output")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PAGEGEN_",
        env_file_encoding="utf-8",
    )

    @field_validator("gemini_api_key", "openrouter_api_key")
    @classmethod
    def blank_key_is_missing(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("openrouter_max_tokens")
    @classmethod
    def max_tokens_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("openrouter_max_tokens must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log_level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
