"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models used by KeyAuth:
- APIKeyConfig / CreatedAPIKey: API key issuance
- AuthHeaderConfig / AuthError: Authorization header validation

All models are exported here for convenient importing.
"""

from .api_key import APIKeyConfig, CreatedAPIKey
from .auth import AuthHeaderConfig, AuthError, ValidationResult

__all__ = [
    "APIKeyConfig",
    "CreatedAPIKey",
    "AuthHeaderConfig",
    "AuthError",
    "ValidationResult",
]
