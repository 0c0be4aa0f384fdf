"""
Module: auth
Description: Package initialization for API key issuance and verification.

This package contains authentication components:
- hasher: SHA-256 hex digests
- api_key: API key creation, hashing and hash validation
- headers: Authorization header validation
- dependencies: FastAPI dependency for API key authentication
"""

from .hasher import digest_hex
from .api_key import create_api_key, hash_api_key, validate_hash
from .headers import validate_headers, validate_header
from .dependencies import APIKeyAuth, get_api_key_auth

__all__ = [
    "digest_hex",
    "create_api_key",
    "hash_api_key",
    "validate_hash",
    "validate_headers",
    "validate_header",
    "APIKeyAuth",
    "get_api_key_auth",
]
