"""Session token helpers.

Tokens are HS256 JWTs. The user id travels in the registered ``sub`` claim
and the handle rides along so clients can greet the user without a lookup.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from holding.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "handle", "iat", "exp"]


class TokenPayload(BaseModel):
    """Verified token claims."""

    user_id: str
    handle: str
    issued_at: datetime
    exp: datetime


class JWTError(Exception):
    """Raised when a session token is missing claims, tampered with or expired."""

    pass


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Issue a session token for a user.

    Args:
        user_id: User ID, stored as ``sub``
        handle: User handle
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "handle": handle,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a session token's signature, expiry and claims.

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(
        user_id=claims["sub"],
        handle=claims["handle"],
        issued_at=claims["iat"],
        exp=claims["exp"],
    )
