"""
Module: headers.py
Description: Authorization header validation.

Validates "<scheme> <token>" authorization headers. Failures are
expected, recoverable conditions, so they are returned as AuthError
values rather than raised; callers branch on isinstance().

Key Components:
- validate_headers(): Look up the configured header and validate it
- validate_header(): Validate a raw header value
- Error messages for missing header, wrong scheme, missing token

Dependencies: typing, models.auth
Author: KeyAuth Team
"""

from typing import Any, Mapping, Optional

from src.models.auth import AuthHeaderConfig, AuthError, ValidationResult
from src.utils.logger import get_logger

logger = get_logger(__name__)

MISSING_HEADER_ERROR = "Authorization header is missing."
INVALID_TYPE_ERROR = "Invalid authorization type."
MISSING_TOKEN_ERROR = "Token is missing."


def _lookup_header(headers: Mapping[str, Any], name: str) -> Optional[str]:
    """
    Find a header value by name.

    Tries headers.get() first (case-insensitive for Starlette Headers),
    then falls back to a case-insensitive scan for plain dicts.
    """
    value = headers.get(name)
    if value is not None:
        return value

    wanted = name.lower()
    for header_name, header_value in headers.items():
        if header_name.lower() == wanted:
            return header_value

    return None


def _validate(header_value: Optional[str], auth: str) -> ValidationResult:
    if not header_value:
        return AuthError(error=MISSING_HEADER_ERROR)

    # Split at the first space only; later spaces stay in the token
    scheme, _, token = header_value.partition(' ')

    if scheme != auth:
        logger.warning(
            "Authorization scheme rejected",
            expected=auth,
            received_length=len(scheme)
        )
        return AuthError(error=INVALID_TYPE_ERROR)

    if not token:
        return AuthError(error=MISSING_TOKEN_ERROR)

    return token


def validate_headers(
    headers: Mapping[str, Any],
    config: Optional[AuthHeaderConfig] = None
) -> ValidationResult:
    """
    Validate the authorization header in a header collection.

    Args:
        headers: Header mapping (dict, Starlette Headers, ...)
        config: Expected scheme and header name. Defaults to
            "Bearer" read from the "authorization" header.

    Returns:
        The token on success, AuthError otherwise

    Example:
        >>> validate_headers({"authorization": "Bearer sk_abc"})
        'sk_abc'
        >>> validate_headers({})
        AuthError(error='Authorization header is missing.')
    """
    config = config or AuthHeaderConfig()
    return _validate(_lookup_header(headers, config.header), config.auth)


def validate_header(
    header_value: Optional[str],
    config: Optional[AuthHeaderConfig] = None
) -> ValidationResult:
    """
    Validate a raw authorization header value.

    Args:
        header_value: Raw value, e.g. "Bearer sk_abc"
        config: Expected scheme; the header name is not used

    Returns:
        The token on success, AuthError otherwise
    """
    config = config or AuthHeaderConfig()
    return _validate(header_value, config.auth)
