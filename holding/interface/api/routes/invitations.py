"""Invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from holding.application.usecase.invitation import (
    MAX_TTL_HOURS,
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationUseCase,
    InvitationItem,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from holding.domain.service import JWTService
from holding.interface.api.auth import authenticate

router = APIRouter(tags=["invitations"], route_class=DishkaRoute)


class CreateInvitationAPIRequest(BaseModel):
    """API request for creating an invitation."""

    email: str | None = None
    ttl_hours: int | None = Field(default=None, ge=1, le=MAX_TTL_HOURS)


@router.post(
    "/bags/{bag_id}/invitations",
    response_model=InvitationItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_invitation(
    bag_id: UUID,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    request: CreateInvitationAPIRequest | None = None,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> InvitationItem:
    """Create an invitation link for a bag. Owner only.

    Examples:
        POST /bags/{bag_id}/invitations
        {"email": "friend@example.com", "ttl_hours": 48}
    """
    payload = authenticate(jwt_service, authorization, auth_token)
    request = request or CreateInvitationAPIRequest()
    return await create_invitation_use_case.execute(
        CreateInvitationRequest(
            bag_id=str(bag_id),
            user_id=payload.user_id,
            email=request.email,
            ttl_hours=request.ttl_hours,
        )
    )


@router.get("/bags/{bag_id}/invitations", response_model=ListInvitationsResponse)
async def list_invitations(
    bag_id: UUID,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListInvitationsResponse:
    """List every invitation for a bag, newest first. Owner only."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(bag_id=str(bag_id), user_id=payload.user_id)
    )


@router.get("/invitations/{token}", response_model=ValidateInvitationResponse)
async def validate_invitation(
    token: str,
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
) -> ValidateInvitationResponse:
    """Preview an invitation. No authentication required.

    Responds 404 for unknown tokens, 409 for used ones and 410 once expired.
    """
    return await validate_invitation_use_case.execute(
        ValidateInvitationRequest(token=token)
    )


@router.post("/invitations/{token}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    token: str,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AcceptInvitationResponse:
    """Accept an invitation and join its bag."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await accept_invitation_use_case.execute(
        AcceptInvitationRequest(token=token, user_id=payload.user_id)
    )
