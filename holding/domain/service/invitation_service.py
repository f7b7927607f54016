"""Invitation domain service."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

import logfire

from holding.domain.error import (
    AlreadyAcceptedError,
    ExpiredError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from holding.domain.model.common import utcnow
from holding.domain.model.invitation import Invitation
from holding.domain.repository import BagRepository, InvitationRepository
from holding.domain.value import (
    BagEventType,
    BagId,
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    Role,
    UserId,
)
from holding.domain.value.common import ValueObject

from .access_service import AccessService
from .base import Clock, Service
from .notification import BagEvent, NotificationSink, publish
from .token_generator import TokenGenerator

DEFAULT_TTL = timedelta(days=7)


class InvitationPreview(ValueObject):
    """What a token holder sees before accepting."""

    invitation_id: InvitationId
    token: InvitationToken
    bag_id: BagId
    bag_name: str
    inviter_id: UserId
    email: Optional[Email] = None
    status: InvitationStatus
    expires_at: datetime


class InvitationService(Service):
    """Creates, validates and accepts bag invitations.

    State machine: Pending -> Accepted, Pending -> Expired. Expiry is
    detected lazily whenever a token is read; there is no background sweep
    to rely on.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        access_service: AccessService,
        token_generator: TokenGenerator,
        notification_sink: NotificationSink,
        bag_repository: BagRepository,
        default_ttl: timedelta = DEFAULT_TTL,
        clock: Clock = utcnow,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation store
            access_service: Access control service
            token_generator: Source of invitation tokens
            notification_sink: Bag broadcast target
            bag_repository: Bag repository, used for previews
            default_ttl: Lifetime applied when create_invitation gets no ttl
            clock: Returns the current UTC time
        """
        self.invitation_repository = invitation_repository
        self.access_service = access_service
        self.token_generator = token_generator
        self.notification_sink = notification_sink
        self.bag_repository = bag_repository
        self.default_ttl = default_ttl
        self.clock = clock

    async def create_invitation(
        self,
        bag_id: BagId,
        requester_id: UserId,
        email: Optional[Email] = None,
        ttl: Optional[timedelta] = None,
    ) -> Invitation:
        """Create a pending invitation to a bag.

        Args:
            bag_id: Bag the invitation grants access to
            requester_id: User creating the invitation (must be Owner)
            email: Optional address the invitation is meant for
            ttl: Lifetime of the invitation, defaults to the configured TTL

        Returns:
            The persisted pending invitation

        Raises:
            ForbiddenError: If the requester is not the bag's Owner
            ValidationError: If ttl is not positive
            ConflictError: If the generated token already exists
        """
        ttl = ttl if ttl is not None else self.default_ttl
        with logfire.span(
            "invitation_service.create_invitation",
            bag_id=str(bag_id),
            requester_id=str(requester_id),
            ttl_seconds=ttl.total_seconds(),
        ):
            if ttl <= timedelta(0):
                raise ValidationError("Invitation lifetime must be positive")

            await self.access_service.require_role(bag_id, requester_id, Role.OWNER)

            now = self.clock()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                bag_id=bag_id,
                inviter_id=requester_id,
                token=self.token_generator.generate(),
                email=email,
                status=InvitationStatus.PENDING,
                created_at=now,
                expires_at=now + ttl,
            )

            await self.invitation_repository.create(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=str(invitation.id),
                bag_id=str(bag_id),
                token=invitation.token.redacted,
                expires_at=invitation.expires_at.isoformat(),
            )
            return invitation

    async def validate_invitation(self, token: InvitationToken) -> InvitationPreview:
        """Check a token and describe the invitation behind it.

        Validation never consumes the token. The only write it can perform is
        moving an overdue Pending invitation to Expired.

        Args:
            token: Invitation token from the link

        Returns:
            Preview of the pending invitation

        Raises:
            NotFoundError: If no invitation has this token (or its bag is gone)
            AlreadyAcceptedError: If the invitation was already accepted
            ExpiredError: If the invitation is expired
        """
        with logfire.span(
            "invitation_service.validate_invitation", token=token.redacted
        ):
            invitation = await self._load_pending(token)

            bag = await self.bag_repository.find_by_id(invitation.bag_id)
            if bag is None:
                logfire.warn(
                    "Invitation points at a missing bag",
                    invitation_id=str(invitation.id),
                    bag_id=str(invitation.bag_id),
                )
                raise NotFoundError("Bag", str(invitation.bag_id))

            logfire.info(
                "Valid invitation found",
                invitation_id=str(invitation.id),
                bag_id=str(bag.id),
            )
            return InvitationPreview(
                invitation_id=invitation.id,
                token=invitation.token,
                bag_id=bag.id,
                bag_name=bag.name,
                inviter_id=invitation.inviter_id,
                email=invitation.email,
                status=invitation.status,
                expires_at=invitation.expires_at,
            )

    async def accept_invitation(
        self, token: InvitationToken, user_id: UserId
    ) -> Invitation:
        """Consume a token and make the user a member of the bag.

        Exactly one of any number of concurrent acceptances of the same token
        succeeds; the store's compare-and-set decides the winner. A user who
        already has access keeps their role, but the token is still consumed.

        Args:
            token: Invitation token from the link
            user_id: User accepting the invitation

        Returns:
            The accepted invitation

        Raises:
            NotFoundError: If no invitation has this token
            AlreadyAcceptedError: If the token was already consumed
            ExpiredError: If the invitation is expired
        """
        with logfire.span(
            "invitation_service.accept_invitation",
            token=token.redacted,
            user_id=str(user_id),
        ):
            invitation = await self._load_pending(token)

            try:
                accepted = await self.invitation_repository.update_status(
                    invitation.id, InvitationStatus.ACCEPTED, accepted_by=user_id
                )
            except InvalidTransitionError as e:
                logfire.warn(
                    "Invitation acceptance lost a race",
                    invitation_id=str(invitation.id),
                    stored_status=e.current,
                )
                if e.current == InvitationStatus.EXPIRED.value:
                    raise ExpiredError(str(invitation.id)) from e
                raise AlreadyAcceptedError(str(invitation.id)) from e

            role = await self.access_service.get_role(accepted.bag_id, user_id)
            if role is None:
                await self.access_service.grant(accepted.bag_id, user_id, Role.MEMBER)
                role = Role.MEMBER
            else:
                logfire.info(
                    "Invitation accepted by existing member",
                    invitation_id=str(accepted.id),
                    user_id=str(user_id),
                    role=role.value,
                )

            await publish(
                self.notification_sink,
                BagEvent(
                    type=BagEventType.MEMBER_JOINED,
                    bag_id=accepted.bag_id,
                    actor_id=user_id,
                    payload={
                        "user_id": str(user_id),
                        "role": role.value,
                        "invitation_id": str(accepted.id),
                    },
                ),
            )

            logfire.info(
                "Invitation accepted",
                invitation_id=str(accepted.id),
                bag_id=str(accepted.bag_id),
                user_id=str(user_id),
            )
            return accepted

    async def list_invitations(
        self, bag_id: BagId, requester_id: UserId
    ) -> list[Invitation]:
        """List every invitation for a bag, newest first.

        Raises:
            ForbiddenError: If the requester is not the bag's Owner
        """
        with logfire.span(
            "invitation_service.list_invitations",
            bag_id=str(bag_id),
            requester_id=str(requester_id),
        ):
            await self.access_service.require_role(bag_id, requester_id, Role.OWNER)
            invitations = await self.invitation_repository.list_by_bag(bag_id)
            logfire.info(
                "Invitations listed", bag_id=str(bag_id), count=len(invitations)
            )
            return invitations

    async def _load_pending(self, token: InvitationToken) -> Invitation:
        """Look up a token and make sure it can still be accepted."""
        invitation = await self.invitation_repository.find_by_token(token)
        if invitation is None:
            logfire.warn("Invitation not found", token=token.redacted)
            raise NotFoundError("Invitation", token.redacted)

        if invitation.status == InvitationStatus.ACCEPTED:
            raise AlreadyAcceptedError(str(invitation.id))
        if invitation.status == InvitationStatus.EXPIRED:
            raise ExpiredError(str(invitation.id))

        if invitation.is_expired_at(self.clock()):
            await self._expire(invitation)
            raise ExpiredError(str(invitation.id))

        return invitation

    async def _expire(self, invitation: Invitation) -> None:
        """Record lazily detected expiry."""
        try:
            await self.invitation_repository.update_status(
                invitation.id, InvitationStatus.EXPIRED
            )
            logfire.info(
                "Invitation expired",
                invitation_id=str(invitation.id),
                expires_at=invitation.expires_at.isoformat(),
            )
        except InvalidTransitionError as e:
            # Someone else resolved it between our read and write
            if e.current == InvitationStatus.ACCEPTED.value:
                raise AlreadyAcceptedError(str(invitation.id)) from e
