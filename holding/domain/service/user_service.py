"""User domain service."""

from uuid import uuid4

import logfire
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from pydantic import ValidationError as PydanticValidationError

from holding.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from holding.domain.model.user import User
from holding.domain.repository import UserRepository
from holding.domain.value import Email, Handle, UserId

from .base import Service

MIN_PASSWORD_LENGTH = 8


class UserService(Service):
    """Domain service for registration and credential checks."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_hasher: argon2 hasher, defaults to library parameters
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher or PasswordHasher()

    async def register(self, handle: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            handle: Desired handle
            email: Email address
            password: Plain-text password

        Returns:
            Created user

        Raises:
            ValidationError: If handle, email or password is malformed
            ConflictError: If the handle or email is taken
        """
        with logfire.span("user_service.register", handle=handle):
            try:
                user_handle = Handle(handle)
                user_email = Email(email)
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e
            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )

            if await self.user_repository.find_by_handle(user_handle):
                logfire.warn("Handle already taken", handle=user_handle.root)
                raise ConflictError(f"Handle {user_handle} is already taken")
            if await self.user_repository.find_by_email(user_email):
                logfire.warn("Email already registered", handle=user_handle.root)
                raise ConflictError("Email is already registered")

            user = User(
                id=UserId(uuid4()),
                handle=user_handle,
                email=user_email,
                password_hash=self.password_hasher.hash(password),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), handle=saved.handle.root)
            return saved

    async def authenticate(self, login: str, password: str) -> User:
        """Check credentials.

        Args:
            login: Handle or email
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self._find_by_login(login)
            if user is None:
                logfire.warn("Login for unknown user")
                raise AuthenticationError()

            try:
                self.password_hasher.verify(user.password_hash, password)
            except (VerificationError, InvalidHashError):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError()

            if self.password_hasher.check_needs_rehash(user.password_hash):
                user = await self.user_repository.save(
                    user.model_copy(
                        update={"password_hash": self.password_hasher.hash(password)}
                    )
                )
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def _find_by_login(self, login: str) -> User | None:
        try:
            if "@" in login:
                return await self.user_repository.find_by_email(Email(login))
            return await self.user_repository.find_by_handle(Handle(login))
        except PydanticValidationError:
            return None
