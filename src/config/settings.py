"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Configures the API key defaults and logging from environment variables
with validation. Variables use the KEYAUTH_ prefix (for example
KEYAUTH_AUTH_SCHEME) and may also be supplied via a .env file.
"""

import re
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HASHED_KEY_PATTERN = re.compile(r'^[0-9a-f]{64}$')


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KEYAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="KeyAuth", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Key issuance
    key_prefix: str = Field(
        default="sk_",
        description="Prefix prepended to newly created API keys"
    )

    # Header validation
    auth_scheme: str = Field(
        default="Bearer",
        min_length=1,
        description="Expected authorization scheme token"
    )
    auth_header: str = Field(
        default="authorization",
        min_length=1,
        description="Name of the header carrying the credentials"
    )

    # Accepted key hashes for the request dependency
    api_key_hashes: List[str] = Field(
        default_factory=list,
        description="SHA-256 hex digests of the API keys accepted by APIKeyAuth"
    )

    @field_validator('api_key_hashes')
    @classmethod
    def validate_api_key_hashes(cls, v: List[str]) -> List[str]:
        """Validate every configured hash is a lowercase SHA-256 hex digest."""
        for hashed_key in v:
            if not HASHED_KEY_PATTERN.match(hashed_key):
                raise ValueError(
                    "api_key_hashes must contain 64-character lowercase hex digests"
                )
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


# Global settings instance
settings = Settings()
