"""
Authentication and Authorization Module

Provides authentication dependencies for FastAPI endpoints.

Bearer tokens are issued by the external identity provider and validated
with the shared secret (see security.py). The authenticated user's role is
turned into a closed capability type, and every protected endpoint depends
on exactly one of ``require_applicant``, ``require_admin`` or
``require_board``.
"""

import logging
from dataclasses import dataclass
from typing import assert_never

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import decode_token
from app.modules.users import User, UserRepository, UserRole

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation. Missing credentials are
# reported by get_current_user so the error body keeps our shape.
security = HTTPBearer(
    auto_error=False,
    description="JWT Bearer token from the identity provider",
)


# ============================================
# Capability Types
# ============================================


@dataclass(frozen=True)
class ApplicantContext:
    """Authenticated user acting as a job applicant."""

    user: User


@dataclass(frozen=True)
class AdminContext:
    """Authenticated user acting as a portal administrator."""

    user: User


@dataclass(frozen=True)
class BoardContext:
    """Authenticated user acting as a board reviewer."""

    user: User


AuthContext = ApplicantContext | AdminContext | BoardContext


def build_context(user: User) -> AuthContext:
    """Convert a user's role into its capability type."""
    match user.role:
        case UserRole.APPLICANT:
            return ApplicantContext(user)
        case UserRole.ADMIN:
            return AdminContext(user)
        case UserRole.BOARD:
            return BoardContext(user)
        case _:
            assert_never(user.role)


# ============================================
# Token Validation
# ============================================


def _unauthorized(error: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": error, "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def _forbidden() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail={
            "error": "FORBIDDEN",
            "message": "You do not have access to this resource.",
        },
    )


def _validate_claims(token: str) -> dict:
    """
    Decode the bearer token and check the claims we rely on.

    Raises:
        HTTPException 401: If the token is invalid, expired, of the wrong type
            or missing its subject
    """
    payload = decode_token(token)
    if payload is None:
        raise _unauthorized("INVALID_TOKEN", "Invalid or expired authentication token.")

    token_type = payload.get("type", "access")
    if token_type != "access":
        logger.warning(f"Invalid token type: {token_type}")
        raise _unauthorized("INVALID_TOKEN_TYPE", "This endpoint requires an access token.")

    if not payload.get("sub"):
        logger.warning("Token is missing the 'sub' claim")
        raise _unauthorized("INVALID_TOKEN_CLAIMS", "Token contains invalid or missing claims.")

    return payload


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    FastAPI dependency returning the authenticated user.

    The user row is created from the token claims the first time a subject
    is seen. Roles are never taken from the token.

    Raises:
        HTTPException 401: If the token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("NOT_AUTHENTICATED", "Authentication is required.")

    claims = _validate_claims(credentials.credentials)
    user_id = str(claims["sub"])

    user = await UserRepository.get_by_id(db, user_id)
    if user is None:
        user = await UserRepository.upsert(
            db,
            user_id=user_id,
            email=claims.get("email"),
            first_name=claims.get("first_name"),
            last_name=claims.get("last_name"),
            profile_image_url=claims.get("profile_image_url"),
        )
        logger.info(f"Registered new user {user_id} from identity claims")

    return user


async def get_auth_context(user: User = Depends(get_current_user)) -> AuthContext:
    return build_context(user)


# ============================================
# Role Requirements
# ============================================


async def require_applicant(context: AuthContext = Depends(get_auth_context)) -> ApplicantContext:
    """Allow only applicants."""
    match context:
        case ApplicantContext():
            return context
        case _:
            logger.warning(f"Access denied: user {context.user.id} is not an applicant")
            raise _forbidden()


async def require_admin(context: AuthContext = Depends(get_auth_context)) -> AdminContext:
    """Allow only administrators."""
    match context:
        case AdminContext():
            return context
        case _:
            logger.warning(f"Access denied: user {context.user.id} is not an admin")
            raise _forbidden()


async def require_board(context: AuthContext = Depends(get_auth_context)) -> BoardContext:
    """Allow only board members."""
    match context:
        case BoardContext():
            return context
        case _:
            logger.warning(f"Access denied: user {context.user.id} is not a board member")
            raise _forbidden()


__all__ = [
    "AdminContext",
    "ApplicantContext",
    "AuthContext",
    "BoardContext",
    "build_context",
    "get_auth_context",
    "get_current_user",
    "require_admin",
    "require_applicant",
    "require_board",
]
