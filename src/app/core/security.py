"""
Token Utilities

The identity provider signs bearer tokens with a shared secret. This module
decodes them and can mint equivalent tokens for local development and tests.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from app.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(
    subject: str,
    additional_claims: dict[str, Any] | None = None,
    expires_minutes: int | None = None,
) -> str:
    """
    Create a signed access token for ``subject``.

    Args:
        subject: Identity subject (the user id)
        additional_claims: Extra claims such as email and names
        expires_minutes: Lifetime override, defaults to settings

    Returns:
        Encoded JWT string
    """
    now = datetime.now(UTC)
    lifetime = expires_minutes or settings.jwt_access_token_minutes
    payload: dict[str, Any] = {
        "sub": subject,
        "type": "access",
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    if additional_claims:
        payload.update(additional_claims)
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Decode and verify a token.

    Returns:
        The claims, or None when the signature, algorithm or expiry is invalid
    """
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid token: {e}")
        return None
