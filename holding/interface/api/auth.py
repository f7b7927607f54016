"""Request authentication helpers shared by the routes."""

from fastapi import HTTPException, status

from holding.domain.service import JWTService
from holding.util.jwt import JWTError, TokenPayload


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the session token from a Bearer header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def authenticate(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
) -> TokenPayload:
    """Verify the caller's session token.

    Raises:
        HTTPException: 401 if no token was sent or it does not verify
    """
    token = extract_token(authorization, auth_token)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
