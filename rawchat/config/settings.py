"""Settings for the chat codec loaded from environment variables.

Values are read from ``RAWCHAT_``-prefixed environment variables or a
``.env`` file.  Using Pydantic's ``BaseSettings`` keeps environment
handling typesafe and gives every option a default, so the codec works
without any configuration at all.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Configuration for encoding, decoding and logging."""

    # Environment
    app_env: str = Field("development")
    app_debug: bool = Field(False)

    # Logging
    log_level: str = Field("INFO")
    log_file: Optional[str] = Field(None)

    # Encoding
    json_indent: Optional[int] = Field(None)

    @field_validator("app_env")
    def validate_app_env(cls, value: str) -> str:
        if value not in ["development", "staging", "production"]:
            raise ValueError("RAWCHAT_APP_ENV must be development, staging, or production")
        return value

    @field_validator("log_level")
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("RAWCHAT_LOG_LEVEL must be a valid Loguru level")
        return level

    @field_validator("json_indent")
    def validate_json_indent(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("RAWCHAT_JSON_INDENT must not be negative")
        return value

    model_config = SettingsConfigDict(env_prefix="RAWCHAT_", env_file=".env", extra="ignore")


@lru_cache()
def get_codec_settings() -> CodecSettings:
    """Return a cached settings instance.

    Environment variables are read on first use only; call
    ``get_codec_settings.cache_clear()`` to pick up changes.
    """
    return CodecSettings()
