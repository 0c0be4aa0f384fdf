"""
Module: auth.py
Description: Data models for authorization header validation.

Key Components:
- AuthHeaderConfig: Expected scheme and header name
- AuthError: Structured validation failure
- ValidationResult: Token string or AuthError

Dependencies: pydantic, typing
Author: KeyAuth Team
"""

from typing import Union
from pydantic import BaseModel, Field, ConfigDict


class AuthHeaderConfig(BaseModel):
    """
    Options for validating an authorization header.

    Attributes:
        auth: Expected scheme token, matched case-sensitively
        header: Name of the header to read from a header collection
    """

    model_config = ConfigDict(frozen=True)

    auth: str = Field(
        default="Bearer",
        description="Expected authorization scheme"
    )
    header: str = Field(
        default="authorization",
        min_length=1,
        description="Header name to read"
    )


class AuthError(BaseModel):
    """
    Validation failure returned instead of a token.

    Attributes:
        error: Human-readable reason the header was rejected
    """

    model_config = ConfigDict(frozen=True)

    error: str = Field(
        ...,
        description="Validation failure message"
    )


ValidationResult = Union[str, AuthError]
