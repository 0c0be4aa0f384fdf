"""
Module: test_api_key.py
Description: Unit tests for API key creation, hashing and validation.
"""

import base64
import re
import uuid

import pytest
from pydantic import ValidationError

from src.auth.api_key import create_api_key, hash_api_key, validate_hash
from src.auth.hasher import digest_hex
from src.models.api_key import APIKeyConfig, CreatedAPIKey

HEX_DIGEST = re.compile(r'^[0-9a-f]{64}$')


class TestCreateApiKey:
    """Test cases for create_api_key()."""

    def test_default_key(self):
        """Test default prefix and random UUID material."""
        created = create_api_key()

        assert isinstance(created, CreatedAPIKey)
        assert created.key.startswith("sk_")
        assert HEX_DIGEST.match(created.hashed_key)
        assert created.hashed_key == digest_hex(created.key)

    def test_default_material_is_uuid(self):
        """Test generated material decodes to a UUID4 string."""
        created = create_api_key(APIKeyConfig())

        material = base64.b64decode(created.key[len("sk_"):]).decode('utf-8')
        parsed = uuid.UUID(material)

        assert str(parsed) == material
        assert parsed.version == 4

    def test_generated_keys_are_unique(self):
        """Test two generated keys differ."""
        first = create_api_key()
        second = create_api_key()

        assert first.key != second.key
        assert first.hashed_key != second.hashed_key

    def test_custom_prefix_and_key(self):
        """Test caller-supplied prefix and material."""
        created = create_api_key(APIKeyConfig(prefix="pk_", key="abc"))

        assert created.key == "pk_YWJj"
        assert created.hashed_key == digest_hex("pk_YWJj")

    def test_custom_key_is_reproducible(self):
        """Test the same config produces the same key and hash."""
        config = APIKeyConfig(key="stable-material")

        assert create_api_key(config) == create_api_key(config)

    def test_empty_prefix_and_key(self):
        """Test empty strings are accepted as prefix and material."""
        created = create_api_key(APIKeyConfig(prefix="", key=""))

        assert created.key == ""
        assert created.hashed_key == digest_hex("")

    def test_non_ascii_material(self):
        """Test material outside Latin-1 is encoded as UTF-8."""
        created = create_api_key(APIKeyConfig(key="ключ🔑"))

        expected = base64.b64encode("ключ🔑".encode('utf-8')).decode('ascii')
        assert created.key == f"sk_{expected}"

    def test_lone_surrogate_material(self):
        """Test unpaired surrogates in material become U+FFFD."""
        created = create_api_key(APIKeyConfig(key="a\ud800b"))

        expected = base64.b64encode("a\ufffdb".encode('utf-8')).decode('ascii')
        assert created.key == f"sk_{expected}"
        assert validate_hash(created.key, created.hashed_key) is True

    def test_created_key_is_immutable(self):
        """Test CreatedAPIKey cannot be modified."""
        created = create_api_key()

        with pytest.raises(ValidationError):
            created.key = "sk_other"


class TestHashApiKey:
    """Test cases for hash_api_key()."""

    def test_hash_matches_digest(self):
        """Test hash_api_key() is digest_hex() of the key."""
        assert hash_api_key("sk_YWJj") == digest_hex("sk_YWJj")

    def test_hash_reproduces_created_hash(self):
        """Test the stored hash can be recomputed from the key."""
        created = create_api_key()

        assert hash_api_key(created.key) == created.hashed_key


class TestValidateHash:
    """Test cases for validate_hash()."""

    def test_valid_pair(self):
        """Test a key validates against its own hash."""
        for key in ["", "sk_abc", "sk_" + "a" * 50, "ünïcödé"]:
            assert validate_hash(key, digest_hex(key)) is True

    def test_modified_key(self):
        """Test a key does not validate against another key's hash."""
        for key in ["", "sk_abc", "sk_" + "a" * 50]:
            assert validate_hash(key, digest_hex(key + "x")) is False

    def test_created_key(self):
        """Test created keys validate against their hash."""
        created = create_api_key()

        assert validate_hash(created.key, created.hashed_key) is True

    def test_invalid_hash_values(self):
        """Test malformed stored hashes never validate."""
        invalid_hashes = ["", "not_a_hash", "ABC", "ключ", digest_hex("sk_abc").upper()]

        for invalid_hash in invalid_hashes:
            assert validate_hash("sk_abc", invalid_hash) is False

    def test_non_ascii_stored_hash(self):
        """Test stored hashes with unpaired surrogates compare as False."""
        assert validate_hash("sk_abc", "\ud800" * 64) is False
