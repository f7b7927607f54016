"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a registered user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user lacks the role an operation requires."""

    def __init__(self, bag_id: str, user_id: str, required_role: str):
        self.bag_id = bag_id
        self.user_id = user_id
        self.required_role = required_role
        super().__init__(
            f"User {user_id} requires role {required_role} on bag {bag_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    pass


class ExpiredError(DomainError):
    """Raised when an invitation is past its expiry."""

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__(f"Invitation {invitation_id} has expired")


class AlreadyAcceptedError(DomainError):
    """Raised when an invitation token has already been consumed."""

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__(f"Invitation {invitation_id} has already been accepted")


class InvalidTransitionError(DomainError):
    """Raised by the invitation store when a status change is not allowed."""

    def __init__(self, invitation_id: str, current: str, requested: str):
        self.invitation_id = invitation_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invitation {invitation_id} cannot move from {current} to {requested}"
        )
