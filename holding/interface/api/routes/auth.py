"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from holding.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from holding.config import Settings
from holding.domain.error import NotFoundError
from holding.interface.api.auth import extract_token
from holding.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Authentication status.

    ``/auth/me`` reports unauthenticated callers instead of raising.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key="auth_token",
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create an account and start a session.

    The session token is returned in the body and set as the ``auth_token``
    cookie.
    """
    result = await register_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with handle or email and password."""
    result = await login_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the authentication cookie."""
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get the current user, or report that nobody is signed in.

    Safe to call without authentication so the frontend can check its
    session without producing error responses.
    """
    token = extract_token(authorization, auth_token)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except JWTError:
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Token outlived its user
        return AuthStatusResponse(authenticated=False)
