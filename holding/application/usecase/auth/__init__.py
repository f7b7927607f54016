"""Auth use cases."""

from holding.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from holding.application.usecase.auth.login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from holding.application.usecase.auth.register import (
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
