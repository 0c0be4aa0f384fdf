"""
Module: dependencies.py
Description: FastAPI dependency for API key authentication.

Extracts the API key from the configured authorization header and
checks it against a set of accepted SHA-256 hashes. Any failure is
turned into a 401 response carrying the validation message.

Key Components:
- APIKeyAuth: Callable dependency returning the authenticated key
- get_api_key_auth(): Builds an APIKeyAuth from settings

Dependencies: fastapi, headers, api_key
Author: KeyAuth Team
"""

from typing import Iterable, Optional

from fastapi import HTTPException, Request, status

from src.auth.api_key import validate_hash
from src.auth.headers import validate_headers
from src.config.settings import settings
from src.models.auth import AuthHeaderConfig, AuthError
from src.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_KEY_ERROR = "Invalid API key."


class APIKeyAuth:
    """
    Request dependency that authenticates API keys.

    Usage:
        auth = APIKeyAuth(hashed_keys=[...])

        @app.get("/protected")
        async def protected(api_key: str = Depends(auth)):
            ...
    """

    def __init__(
        self,
        hashed_keys: Iterable[str],
        config: Optional[AuthHeaderConfig] = None
    ):
        """
        Initialize the dependency.

        Args:
            hashed_keys: Hex SHA-256 digests of the accepted keys. An
                empty collection rejects every request.
            config: Expected scheme and header name
        """
        self.hashed_keys = tuple(hashed_keys)
        self.config = config or AuthHeaderConfig()

    def _reject(self, request: Request, message: str) -> HTTPException:
        logger.warning(
            "API key authentication failed",
            reason=message,
            path=request.url.path,
            method=request.method
        )
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": self.config.auth}
        )

    def __call__(self, request: Request) -> str:
        """
        Authenticate the request.

        Returns:
            The plain API key taken from the header

        Raises:
            HTTPException: 401 if the header is invalid or the key
                matches none of the accepted hashes
        """
        result = validate_headers(request.headers, self.config)
        if isinstance(result, AuthError):
            raise self._reject(request, result.error)

        if not any(validate_hash(result, hashed) for hashed in self.hashed_keys):
            raise self._reject(request, INVALID_KEY_ERROR)

        logger.info(
            "API key authentication successful",
            path=request.url.path,
            key_length=len(result)
        )
        return result


def get_api_key_auth() -> APIKeyAuth:
    """
    Build an APIKeyAuth from application settings.

    Uses KEYAUTH_API_KEY_HASHES, KEYAUTH_AUTH_SCHEME and
    KEYAUTH_AUTH_HEADER.
    """
    return APIKeyAuth(
        hashed_keys=settings.api_key_hashes,
        config=AuthHeaderConfig(
            auth=settings.auth_scheme,
            header=settings.auth_header
        )
    )
