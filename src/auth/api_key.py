"""
Module: api_key.py
Description: API key creation, hashing and hash validation.

Keys are built as prefix + base64(key material). Material is either
supplied by the caller or a random UUID4. Only the SHA-256 hex digest
of the full key is meant to be stored; the plain key is returned once
and never logged.

Key Components:
- create_api_key(): Build a key and its hash
- hash_api_key(): SHA-256 hex digest of a key
- validate_hash(): Check a key against a stored digest

Dependencies: base64, secrets, uuid, hasher
Author: KeyAuth Team
"""

import base64
import secrets
import uuid
from typing import Optional

from src.auth.hasher import digest_hex, encode_utf8
from src.models.api_key import APIKeyConfig, CreatedAPIKey
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _encode_key_material(material: str) -> str:
    """Base64 encode key material (standard alphabet, padded)."""
    return base64.b64encode(encode_utf8(material)).decode('ascii')


def create_api_key(config: Optional[APIKeyConfig] = None) -> CreatedAPIKey:
    """
    Create an API key and its SHA-256 hash.

    Args:
        config: Prefix and optional key material. Defaults to the
            "sk_" prefix with random UUID4 material.

    Returns:
        CreatedAPIKey holding the plain key and its hex digest

    Example:
        >>> created = create_api_key(APIKeyConfig(prefix="pk_", key="abc"))
        >>> created.key
        'pk_YWJj'
        >>> validate_hash(created.key, created.hashed_key)
        True
    """
    config = config or APIKeyConfig()

    material = config.key if config.key is not None else str(uuid.uuid4())
    api_key = f"{config.prefix}{_encode_key_material(material)}"

    created = CreatedAPIKey(key=api_key, hashed_key=digest_hex(api_key))

    logger.info(
        "API key created",
        prefix=config.prefix,
        key_length=len(api_key),
        generated=config.key is None
    )

    return created


def hash_api_key(api_key: str) -> str:
    """
    Hash an API key with SHA-256.

    Args:
        api_key: Plain API key

    Returns:
        64-character lowercase hex digest
    """
    return digest_hex(api_key)


def validate_hash(key: str, hashed_key: str) -> bool:
    """
    Check a plain key against a stored hash.

    Args:
        key: Plain API key from the request
        hashed_key: Stored hex digest

    Returns:
        True if the digest of key equals hashed_key, False otherwise
    """
    computed = digest_hex(key)
    is_valid = secrets.compare_digest(
        computed.encode('ascii'),
        encode_utf8(hashed_key)
    )

    if not is_valid:
        logger.debug("API key hash mismatch", key_length=len(key))

    return is_valid
