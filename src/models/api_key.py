"""
Module: api_key.py
Description: Data models for API key issuance.

Key Components:
- APIKeyConfig: Options accepted by create_api_key()
- CreatedAPIKey: The issued key and its SHA-256 hash

Dependencies: pydantic, typing
Author: KeyAuth Team
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class APIKeyConfig(BaseModel):
    """
    Options for creating an API key.

    Attributes:
        prefix: Text prepended to the encoded key material
        key: Caller-supplied key material; random UUID4 when omitted
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        default="sk_",
        description="Prefix added to the generated API key"
    )
    key: Optional[str] = Field(
        default=None,
        description="Key material to encode instead of a random UUID"
    )


class CreatedAPIKey(BaseModel):
    """
    Result of API key creation.

    The plain key is returned once and is never stored by this package;
    callers are expected to persist only hashed_key.

    Attributes:
        key: Plain API key to hand to the client
        hashed_key: Lowercase hex SHA-256 digest of key
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        description="Plain API key"
    )
    hashed_key: str = Field(
        ...,
        pattern=r'^[0-9a-f]{64}$',
        description="SHA-256 hex digest of the API key"
    )
