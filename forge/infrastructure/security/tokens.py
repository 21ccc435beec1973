"""
Bearer token signing and verification.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt

from forge.config.settings import settings
from forge.domain.exceptions.access_error import UnauthorizedError
from forge.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class AuthUser:
    """Identity of the caller for the duration of one request."""

    id: UUID
    role: UserRole
    email: Optional[str] = None


def create_access_token(user: AuthUser, expires_minutes: int = None) -> str:
    """Sign a token carrying the user's identity and role."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "role": user.role.value,
        "email": user.email,
        "iat": now,
        "exp": now
        + timedelta(minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> AuthUser:
    """
    Verify a token and return the caller identity.

    Raises:
        UnauthorizedError: If the token is expired, tampered with or lacks claims
    """
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except jwt.ExpiredSignatureError as e:
        raise UnauthorizedError("Token expired", reason="token_expired") from e
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError("Invalid token", reason="invalid_token") from e

    try:
        return AuthUser(
            id=UUID(payload["sub"]),
            role=UserRole(payload["role"]),
            email=payload.get("email"),
        )
    except (KeyError, ValueError) as e:
        raise UnauthorizedError("Invalid token claims", reason="invalid_token") from e
