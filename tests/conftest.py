"""
Module: conftest.py
Description: Shared pytest fixtures for KeyAuth tests.

Provides test settings with .env loading disabled, sample keys and
a small FastAPI application protected by APIKeyAuth.
"""

from typing import List

import pytest
import structlog
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.auth.api_key import create_api_key
from src.auth.dependencies import APIKeyAuth
from src.models.api_key import APIKeyConfig, CreatedAPIKey


class TestSettings(BaseSettings):
    """Test settings that don't read environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="KEYAUTH_TEST_",
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = Field(default="KeyAuth Test", description="Application name")
    log_level: str = Field(default="DEBUG", description="Logging level")
    key_prefix: str = Field(default="sk_", description="API key prefix")
    auth_scheme: str = Field(default="Bearer", description="Authorization scheme")
    auth_header: str = Field(default="authorization", description="Header name")
    api_key_hashes: List[str] = Field(default_factory=list, description="Accepted hashes")


@pytest.fixture
def test_settings():
    """Provide test configuration settings."""
    return TestSettings()


@pytest.fixture
def sample_api_key() -> CreatedAPIKey:
    """Provide a deterministic API key."""
    return create_api_key(APIKeyConfig(key="test-key-material"))


@pytest.fixture
def protected_app(sample_api_key):
    """
    Provide a FastAPI app with one route guarded by APIKeyAuth.

    The route echoes the authenticated key back to the caller.
    """
    app = FastAPI()
    auth = APIKeyAuth(hashed_keys=[sample_api_key.hashed_key])

    @app.get("/protected")
    async def protected(api_key: str = Depends(auth)):
        return {"api_key": api_key}

    return app


@pytest.fixture
def client(protected_app):
    """Provide a TestClient for the protected app."""
    return TestClient(protected_app)


@pytest.fixture
def reset_structlog():
    """Restore structlog's default configuration after the test."""
    yield
    structlog.reset_defaults()
