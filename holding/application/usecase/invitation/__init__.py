"""Invitation use cases."""

from holding.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from holding.application.usecase.invitation.common import InvitationItem
from holding.application.usecase.invitation.create_invitation import (
    MAX_TTL_HOURS,
    CreateInvitationRequest,
    CreateInvitationUseCase,
)
from holding.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from holding.application.usecase.invitation.validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "MAX_TTL_HOURS",
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationUseCase",
    "InvitationItem",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
