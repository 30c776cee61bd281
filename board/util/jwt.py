"""JWT token utilities.

Tokens are issued by the account service. This module decodes them and, for
tests and local tooling, can mint tokens with the same shape.
"""

from datetime import datetime, timedelta

import jwt
from pydantic import BaseModel

from board.config import AuthSettings
from board.domain.value import Role


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    role: Role = Role.MEMBER
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, role: Role, settings: AuthSettings) -> str:
    """Create a JWT token for a user.

    Args:
        user_id: User ID
        role: Role granted to the user
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now() + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "role": role.value,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
